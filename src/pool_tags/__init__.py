"""
pool-tags - human-readable contract tags for SushiSwap v3 liquidity pools
"""

from .errors import (
    PoolTagsError,
    UnsupportedNetwork,
    TransportError,
    UpstreamQueryError,
    MalformedResponseError,
    UnknownError,
)
from .models import ContractTag, Pool, Token
from .networks import NETWORK_ENDPOINTS, prepare_url, supported_networks
from .service import TagService, return_tags

__version__ = "1.0.0"

__all__ = [
    "ContractTag",
    "Pool",
    "Token",
    "TagService",
    "return_tags",
    "prepare_url",
    "supported_networks",
    "NETWORK_ENDPOINTS",
    "PoolTagsError",
    "UnsupportedNetwork",
    "TransportError",
    "UpstreamQueryError",
    "MalformedResponseError",
    "UnknownError",
]
