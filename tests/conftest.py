import pytest

from pool_tags.models import Pool, Token


def build_pool(pool_id="0xabc", created_at=1, token0=None, token1=None):
    return Pool(
        id=pool_id,
        createdAtTimestamp=created_at,
        token0=token0 or Token(id="0xt0", name="Wrapped Ether", symbol="WETH"),
        token1=token1 or Token(id="0xt1", name="USD Coin", symbol="USDC"),
    )


@pytest.fixture
def make_pool():
    return build_pool


@pytest.fixture
def make_page():
    """Page of ``size`` valid pools with timestamps counting up from ``start``."""
    def _make_page(size, start=1):
        return [build_pool(pool_id=f"0x{start + i:040x}", created_at=start + i) for i in range(size)]
    return _make_page
