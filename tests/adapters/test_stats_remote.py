"""Tests for StatsRemote."""

from __future__ import annotations

import json
from datetime import date

import httpx

from adapters.remotes.stats import StatsRemote
from adapters.requests import DotcomRequest, HTTPMethod
from core.domain.models import StatGranularity
from tests.conftest import SITE_ID, FakeNetwork

ORDER_STATS = {
    "date": "2019-02",
    "unit": "month",
    "quantity": 1,
    "total_gross_sales": 1234.0,
    "total_orders": 7,
    "fields": ["period", "orders", "total_sales", "currency"],
    "data": [["2019-02", 7, 1234.0, "EUR"]],
}


async def test_order_stats_request() -> None:
    network = FakeNetwork(json.dumps(ORDER_STATS).encode())

    stats = await StatsRemote(network).load_order_stats(SITE_ID, StatGranularity.MONTH, date(2019, 2, 15), 1)

    request = network.last_request
    assert isinstance(request, DotcomRequest)
    assert request.method is HTTPMethod.GET
    assert request.path == f"sites/{SITE_ID}/stats/orders/"
    assert dict(request.parameters) == {"unit": "month", "date": "2019-02", "quantity": "1"}
    assert stats.total_orders == 7


async def test_site_visits_over_real_transport(make_network) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={"date": "2019-02-15", "unit": "day", "fields": ["period", "visitors"], "data": [["2019-02-15", 42]]},
        )

    async with make_network(handler) as network:
        stats = await StatsRemote(network).load_site_visit_stats(SITE_ID, StatGranularity.DAY, date(2019, 2, 15), 3)

    assert seen[0].url.path == f"/rest/v1.1/sites/{SITE_ID}/stats/visits/"
    assert seen[0].url.params["stat_fields"] == "visitors"
    assert seen[0].url.params["date"] == "2019-02-15"
    assert stats.total_visitors == 42
