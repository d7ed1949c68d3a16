"""
Pool validation and tag construction.

Pools whose token names or symbols are blank or carry markup are dropped in
full; they never fail the run. Everything here is pure apart from logging.
"""

import re
from typing import List

from loguru import logger

from ..models import ContractTag, Pool, Token

PROJECT_NAME = "SushiSwap v3"
UI_WEBSITE_LINK = "https://www.sushi.com/"
MAX_SYMBOLS_LENGTH = 45

MARKUP_PATTERN = re.compile(r"<[^>]*>")


def contains_markup(text: str) -> bool:
    return MARKUP_PATTERN.search(text) is not None


def invalid_token_fields(token: Token) -> List[str]:
    """Names of the fields ("name", "symbol") that disqualify this token."""
    bad = []
    for field in ("name", "symbol"):
        value = getattr(token, field)
        if not value.strip() or contains_markup(value):
            bad.append(field)
    return bad


def rejection_reasons(pool: Pool) -> List[str]:
    reasons = []
    for side in ("token0", "token1"):
        token = getattr(pool, side)
        for field in invalid_token_fields(token):
            reasons.append(
                f"Contract: {pool.id} rejected due to invalid {side} {field}: "
                f"{getattr(token, field)!r}"
            )
    return reasons


def truncate(text: str, max_length: int = MAX_SYMBOLS_LENGTH) -> str:
    if len(text) > max_length:
        return text[: max_length - 3] + "..."
    return text


def pool_to_tag(network_id: str, pool: Pool) -> ContractTag:
    token0, token1 = pool.token0, pool.token1
    symbols = truncate(f"{token0.symbol}/{token1.symbol}")
    return ContractTag(
        contract_address=f"eip155:{network_id}:{pool.id}",
        public_name_tag=f"{symbols} Pool",
        project_name=PROJECT_NAME,
        ui_website_link=UI_WEBSITE_LINK,
        public_note=(
            f"The liquidity pool contract on {PROJECT_NAME} for the "
            f"{token0.name} ({token0.symbol}) / {token1.name} ({token1.symbol}) pair."
        ),
    )


def transform(network_id: str, pools: List[Pool]) -> List[ContractTag]:
    tags: List[ContractTag] = []
    rejected: List[str] = []
    for pool in pools:
        reasons = rejection_reasons(pool)
        if reasons:
            rejected.extend(reasons)
            continue
        tags.append(pool_to_tag(network_id, pool))

    if rejected:
        logger.info(f"Rejected {len(pools) - len(tags)} of {len(pools)} pools on network {network_id}")
        for reason in rejected:
            logger.info(reason)
    return tags
