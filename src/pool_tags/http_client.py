import aiohttp, asyncio
from loguru import logger
from typing import Optional, Dict, Any
from contextlib import asynccontextmanager

from .errors import TransportError, MalformedResponseError

DEFAULT_TIMEOUT = aiohttp.ClientTimeout(total=60)
JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}

@asynccontextmanager
async def http_session():
    async with aiohttp.ClientSession(timeout=DEFAULT_TIMEOUT) as s:
        yield s

async def post_json(url: str, payload: Dict[str, Any], headers: Optional[Dict[str, str]] = None) -> Any:
    try:
        async with http_session() as s:
            async with s.post(url, json=payload, headers=headers or JSON_HEADERS) as r:
                if not 200 <= r.status < 300:
                    logger.error(f"HTTP error! status: {r.status}")
                    raise TransportError(f"HTTP error! status: {r.status}", status=r.status)
                try:
                    return await r.json(content_type=None)
                except ValueError as e:
                    logger.error(f"Response body is not valid JSON: {e}")
                    raise MalformedResponseError(f"Response body is not valid JSON: {e}") from e
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        logger.error(f"Request failed before a response was received: {e!r}")
        raise TransportError(f"Request failed: {e!r}") from e
