from typing import List

from loguru import logger

from .errors import PoolTagsError, UnknownError
from .models import ContractTag
from .networks import prepare_url
from .pipelines.tagging import transform
from .sources.base import TagSource
from .sources.sushiswap_subgraph import PAGE_SIZE, fetch_page


class TagService(TagSource):
    """
    Tag source for SushiSwap v3 pools.

    Walks every pool of the network's subgraph in creation order, one page at
    a time, using the last creation timestamp seen as the cursor. Any failure
    aborts the run; callers never receive a partial list.
    """

    name = "sushiswap_v3"

    async def return_tags(self, network_id: str, credential: str) -> List[ContractTag]:
        operation = f"Failed fetching tags for network {network_id}"
        try:
            url = prepare_url(network_id, credential)
            return await self._collect(network_id, url)
        except PoolTagsError as e:
            logger.error(f"An error occurred: {e}")
            raise e.with_context(operation) from e
        except Exception as e:
            logger.error(f"An unknown error occurred: {e!r}")
            raise UnknownError(f"{operation}: an unknown error occurred during fetch operation.") from e

    async def _collect(self, network_id: str, url: str) -> List[ContractTag]:
        watermark = 0
        pages = 0
        tags: List[ContractTag] = []
        while True:
            page = await fetch_page(url, watermark)
            pages += 1
            tags.extend(transform(network_id, page))
            if len(page) < PAGE_SIZE:
                break
            watermark = page[-1].createdAtTimestamp
        logger.info(f"Built {len(tags)} tags from {pages} pages on network {network_id}")
        return tags


async def return_tags(network_id: str, credential: str) -> List[ContractTag]:
    return await TagService().return_tags(network_id, credential)
