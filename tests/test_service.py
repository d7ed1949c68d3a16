"""
Tests for the paginated tag service
"""

from unittest.mock import AsyncMock, patch

import pytest

from pool_tags import return_tags
from pool_tags.errors import (
    MalformedResponseError,
    TransportError,
    UnknownError,
    UnsupportedNetwork,
    UpstreamQueryError,
)
from pool_tags.models import Token
from pool_tags.networks import prepare_url
from pool_tags.service import TagService
from pool_tags.sources.base import TagSource


class TestPagination:
    """Watermark pagination over the pools subgraph"""

    @pytest.fixture
    def service(self):
        return TagService()

    @pytest.mark.asyncio
    async def test_three_pages(self, service, make_page):
        pages = [make_page(1000, start=1), make_page(1000, start=1001), make_page(400, start=2001)]

        with patch("pool_tags.service.fetch_page", AsyncMock(side_effect=pages)) as mock_fetch:
            tags = await service.return_tags("1", "key")

        url = prepare_url("1", "key")
        assert mock_fetch.await_count == 3
        assert mock_fetch.await_args_list[0].args == (url, 0)
        assert mock_fetch.await_args_list[1].args == (url, pages[0][-1].createdAtTimestamp)
        assert mock_fetch.await_args_list[2].args == (url, pages[1][-1].createdAtTimestamp)
        assert len(tags) == 2400

    @pytest.mark.asyncio
    async def test_output_keeps_fetch_order(self, service, make_page):
        pages = [make_page(1000, start=1), make_page(3, start=1001)]

        with patch("pool_tags.service.fetch_page", AsyncMock(side_effect=pages)):
            tags = await service.return_tags("42161", "key")

        expected = [f"eip155:42161:{p.id}" for page in pages for p in page]
        assert [t.contract_address for t in tags] == expected

    @pytest.mark.asyncio
    async def test_full_last_page_costs_one_empty_fetch(self, service, make_page):
        pages = [make_page(1000), []]

        with patch("pool_tags.service.fetch_page", AsyncMock(side_effect=pages)) as mock_fetch:
            tags = await service.return_tags("1", "key")

        assert mock_fetch.await_count == 2
        assert len(tags) == 1000

    @pytest.mark.asyncio
    async def test_single_short_page(self, service, make_pool):
        page = [
            make_pool(pool_id="0xabc", created_at=10),
            make_pool(pool_id="0xdef", created_at=11, token0=Token(id="0x1", name="<script>", symbol="X")),
        ]

        with patch("pool_tags.service.fetch_page", AsyncMock(return_value=page)) as mock_fetch:
            tags = await service.return_tags("1", "key")

        assert mock_fetch.await_count == 1
        assert [t.contract_address for t in tags] == ["eip155:1:0xabc"]
        assert tags[0].public_name_tag == "WETH/USDC Pool"

    @pytest.mark.asyncio
    async def test_module_level_entry_point(self, make_page):
        with patch("pool_tags.service.fetch_page", AsyncMock(return_value=make_page(2))):
            tags = await return_tags("10", "key")

        assert len(tags) == 2

    def test_implements_tag_source(self, service):
        assert isinstance(service, TagSource)
        assert service.name == "sushiswap_v3"


class TestErrors:
    """Every failure aborts the run"""

    @pytest.fixture
    def service(self):
        return TagService()

    @pytest.mark.asyncio
    async def test_unsupported_network_before_any_fetch(self, service):
        with patch("pool_tags.service.fetch_page", AsyncMock()) as mock_fetch:
            with pytest.raises(UnsupportedNetwork) as exc_info:
                await service.return_tags("999", "key")

        mock_fetch.assert_not_awaited()
        assert "Failed fetching tags for network 999" in str(exc_info.value)
        assert "42161" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, UnsupportedNetwork)

    @pytest.mark.asyncio
    async def test_failure_on_later_page_returns_nothing(self, service, make_page):
        side_effect = [make_page(1000), TransportError("HTTP error! status: 502", status=502)]

        with patch("pool_tags.service.fetch_page", AsyncMock(side_effect=side_effect)):
            with pytest.raises(TransportError) as exc_info:
                await service.return_tags("1", "key")

        assert exc_info.value.status == 502
        assert "Failed fetching tags for network 1" in str(exc_info.value)
        assert "502" in str(exc_info.value)
        assert exc_info.value.__cause__.message == "HTTP error! status: 502"

    @pytest.mark.asyncio
    async def test_upstream_errors_fail_with_pools_present(self, service):
        payload = {
            "data": {"pools": [{
                "id": "0xabc",
                "createdAtTimestamp": "1",
                "token0": {"id": "0x1", "name": "Wrapped Ether", "symbol": "WETH"},
                "token1": {"id": "0x2", "name": "USD Coin", "symbol": "USDC"},
            }]},
            "errors": [{"message": "bad indexers"}],
        }

        with patch("pool_tags.sources.thegraph.post_json", AsyncMock(return_value=payload)):
            with pytest.raises(UpstreamQueryError) as exc_info:
                await service.return_tags("1", "key")

        assert exc_info.value.messages == ["bad indexers"]

    @pytest.mark.asyncio
    async def test_malformed_response(self, service):
        with patch("pool_tags.sources.thegraph.post_json", AsyncMock(return_value={"data": {}})):
            with pytest.raises(MalformedResponseError):
                await service.return_tags("1", "key")

    @pytest.mark.asyncio
    async def test_unrecognized_failure_becomes_unknown_error(self, service):
        with patch("pool_tags.service.fetch_page", AsyncMock(side_effect=KeyError("pools"))):
            with pytest.raises(UnknownError) as exc_info:
                await service.return_tags("1", "key")

        assert isinstance(exc_info.value.__cause__, KeyError)
        assert "Failed fetching tags for network 1" in str(exc_info.value)
