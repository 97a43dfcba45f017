"""Shared pytest fixtures and test helpers for woo-remote tests."""

from __future__ import annotations

import json
from typing import Any, Callable
from urllib.parse import parse_qs

import httpx
import pytest

from adapters.http_client import HttpxNetwork
from core.config import AppSettings
from core.errors import RemoteError
from core.interfaces.request import RemoteRequest

SITE_ID = 1234
ORDER_ID = 567


def jetpack_body(data: Any) -> bytes:
    """Wrap `data` in the Jetpack tunnel envelope."""
    return json.dumps({"data": data}).encode("utf-8")


def form_fields(request: httpx.Request) -> dict[str, str]:
    """Decode an url-encoded request body into a flat dict."""
    parsed = parse_qs(request.content.decode("utf-8"))
    return {key: values[0] for key, values in parsed.items()}


class FakeNetwork:
    """In-memory `Network`: records requests and replays canned outcomes."""

    def __init__(self, *outcomes: bytes | RemoteError) -> None:
        self._outcomes = list(outcomes)
        self.requests: list[RemoteRequest] = []

    def queue(self, outcome: bytes | RemoteError) -> None:
        self._outcomes.append(outcome)

    async def response_data(self, request: RemoteRequest) -> bytes:
        self.requests.append(request)
        outcome = self._outcomes.pop(0)
        if isinstance(outcome, RemoteError):
            raise outcome
        return outcome

    @property
    def last_request(self) -> RemoteRequest:
        return self.requests[-1]


@pytest.fixture
def settings() -> AppSettings:
    """Settings isolated from env files and the user config dir."""
    return AppSettings(
        _env_file=None,
        dotcom_base_url="https://api.example.test",
        auth_token="secret-token",
        http_timeout_seconds=5,
    )


@pytest.fixture
def make_network(settings: AppSettings) -> Callable[[Callable[[httpx.Request], httpx.Response]], HttpxNetwork]:
    """Build a real `HttpxNetwork` backed by `httpx.MockTransport`."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> HttpxNetwork:
        return HttpxNetwork(settings, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def tracking_payload() -> list[dict[str, Any]]:
    return [
        {
            "tracking_id": "b1b94eb2",
            "tracking_provider": "USPS",
            "tracking_link": "https://tools.usps.com/go/TrackConfirmAction?tLabels=9405",
            "tracking_number": "9405",
            "date_shipped": "2019-02-15",
        },
        {
            "tracking_id": "3b29c43b",
            "tracking_provider": "",
            "tracking_link": "",
            "tracking_number": "ZZ-001",
            "date_shipped": "not-a-date",
        },
    ]


@pytest.fixture
def product_payload() -> dict[str, Any]:
    return {
        "id": 282,
        "name": "Book the Green Room",
        "slug": "book-the-green-room",
        "permalink": "https://example.test/product/book-the-green-room/",
        "type": "simple",
        "status": "publish",
        "sku": "GR-1",
        "price": "10",
        "regular_price": "10",
        "sale_price": "",
        "manage_stock": True,
        "stock_quantity": 12,
        "stock_status": "instock",
        "backorders": "notify",
        "sold_individually": False,
        "images": [{"id": 19, "src": "https://example.test/img/green.jpg", "name": "green"}],
        "variations": [],
    }


@pytest.fixture
def order_payload() -> dict[str, Any]:
    return {
        "id": 963,
        "parent_id": 0,
        "number": "963",
        "status": "processing",
        "currency": "USD",
        "date_created": "2019-02-15T10:00:00",
        "total": "31.20",
        "total_tax": "1.20",
        "customer_note": "",
        "line_items": [
            {"id": 1, "name": "Ninja Silhouette", "product_id": 282, "quantity": 2, "total": "30.00"},
        ],
    }
