from types import MappingProxyType
from typing import List
from urllib.parse import quote

from loguru import logger

from .errors import UnsupportedNetwork

API_KEY_PLACEHOLDER = "[api-key]"

_GATEWAY = "https://gateway.thegraph.com/api/" + API_KEY_PLACEHOLDER + "/subgraphs/id/"

# SushiSwap v3 subgraphs on the decentralized network, keyed by chain id
NETWORK_ENDPOINTS = MappingProxyType({
    "1": _GATEWAY + "5nnoU1nUFeWqtXgbpC54L9PWdpgo7Y9HYinR3uTMsfzs",
    "10": _GATEWAY + "Dr3FkshPgTMMDwxckz3oZdwLxaPcbzZuAbE92i6arYtJ",
    "56": _GATEWAY + "FiJDXMFCBv88GP17g2TtPh8BcA8jZozn5WRW7hCN7cUT",
    "137": _GATEWAY + "CqLnQY1d6DLcBYu7aZvGmt17LoNdTe4fDYnGbE2EgotR",
    "8453": _GATEWAY + "Cz4Snpih41NNNPZcbj1gd3fYXPwFr5q92iWMoZjCarEb",
    "42161": _GATEWAY + "96EYD64NqmnFxMELu2QLWB95gqCmA9N96ssYsZfFiYHg",
    "43114": _GATEWAY + "4BxsTB5ADnYdgJgdmzyddmnDGCauctDia28uxB1hgTBE",
})

# same set encodeURIComponent leaves alone
_CREDENTIAL_SAFE = "!~*'()"


def supported_networks() -> List[str]:
    return sorted(NETWORK_ENDPOINTS, key=int)


def prepare_url(network_id: str, credential: str) -> str:
    """Resolve the subgraph endpoint for a network and embed the API key.

    Raises UnsupportedNetwork when the id is unknown or not numeric; the
    message lists every supported id so operators can spot typos.
    """
    template = NETWORK_ENDPOINTS.get(network_id)
    if template is None or not network_id.isdigit():
        supported = supported_networks()
        message = (
            f"Unsupported network id: {network_id!r}. "
            f"Supported network ids are: {', '.join(supported)}."
        )
        logger.error(message)
        raise UnsupportedNetwork(message, network_id=network_id, supported=supported)
    return template.replace(API_KEY_PLACEHOLDER, quote(credential, safe=_CREDENTIAL_SAFE))
