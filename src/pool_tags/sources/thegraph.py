from typing import Dict, Any
from loguru import logger
from pydantic import ValidationError

from ..errors import MalformedResponseError, UpstreamQueryError
from ..http_client import post_json
from ..models import GraphQLResponse

async def graph_query(url: str, query: str, variables: Dict[str, Any] | None = None) -> Dict[str, Any]:
    """POST a GraphQL document and return the decoded body.

    A non-empty ``errors`` array fails the call even when ``data`` is also
    present; each message is logged before the aggregate error is raised.
    """
    body = await post_json(url, {"query": query, "variables": variables or {}})
    try:
        envelope = GraphQLResponse.model_validate(body)
    except ValidationError as e:
        logger.error(f"Unexpected GraphQL response envelope: {e}")
        raise MalformedResponseError(f"Unexpected GraphQL response envelope: {e}") from e
    if envelope.errors:
        messages = [error.message for error in envelope.errors]
        for message in messages:
            logger.error(f"GraphQL error: {message}")
        raise UpstreamQueryError("GraphQL errors occurred: see logs for details.", messages=messages)
    return body
