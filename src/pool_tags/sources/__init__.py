from .base import TagSource
from .thegraph import graph_query
from .sushiswap_subgraph import PAGE_SIZE, POOLS_QUERY, fetch_page

__all__ = ["TagSource", "graph_query", "fetch_page", "PAGE_SIZE", "POOLS_QUERY"]
