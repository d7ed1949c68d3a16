from typing import List
from loguru import logger
from pydantic import ValidationError

from .thegraph import graph_query
from ..errors import MalformedResponseError
from ..models import Pool, PoolsResponse

PAGE_SIZE = 1000

POOLS_QUERY = """
query GetPools($lastTimestamp: Int) {
  pools(
    first: 1000,
    orderBy: createdAtTimestamp,
    orderDirection: asc,
    where: { createdAtTimestamp_gt: $lastTimestamp }
  ) {
    id
    createdAtTimestamp
    token0 {
      id
      name
      symbol
    }
    token1 {
      id
      name
      symbol
    }
  }
}
"""

async def fetch_page(url: str, after_timestamp: int) -> List[Pool]:
    """One page of pools created strictly after ``after_timestamp``, oldest first."""
    body = await graph_query(url, POOLS_QUERY, {"lastTimestamp": after_timestamp})
    try:
        response = PoolsResponse.model_validate(body)
    except ValidationError as e:
        logger.error(f"Unexpected pools response shape: {e}")
        raise MalformedResponseError(f"Unexpected pools response shape: {e}") from e
    if response.data is None:
        logger.error("No pools data found in subgraph response")
        raise MalformedResponseError("No pools data found.")
    logger.debug(f"Fetched {len(response.data.pools)} pools after timestamp {after_timestamp}")
    return response.data.pools
