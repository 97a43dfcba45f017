"""Tests for OrdersRemote."""

from __future__ import annotations

from adapters.remotes.orders import OrdersRemote
from adapters.requests import HTTPMethod, WooAPIVersion
from core.domain.extensible import OrderStatus
from tests.conftest import SITE_ID, FakeNetwork, jetpack_body


async def test_load_all_orders_defaults_to_any_status(order_payload) -> None:
    network = FakeNetwork(jetpack_body([order_payload]))

    orders = await OrdersRemote(network).load_all_orders(SITE_ID)

    request = network.last_request
    assert request.woo_api_version is WooAPIVersion.MARK3
    assert request.path == "orders"
    assert dict(request.parameters) == {"page": "1", "per_page": "25", "status": "any"}
    assert orders[0].status == OrderStatus.PROCESSING


async def test_load_all_orders_with_status(order_payload) -> None:
    network = FakeNetwork(jetpack_body([]))

    orders = await OrdersRemote(network).load_all_orders(SITE_ID, "on-hold", page_number=3)

    assert network.last_request.parameters["status"] == "on-hold"
    assert network.last_request.parameters["page"] == "3"
    assert orders == []


async def test_update_order_status(order_payload) -> None:
    network = FakeNetwork(jetpack_body({**order_payload, "status": "awaiting-shipment"}))

    order = await OrdersRemote(network).update_order_status(SITE_ID, 963, OrderStatus.custom("awaiting-shipment"))

    request = network.last_request
    assert request.method is HTTPMethod.POST
    assert request.path == "orders/963"
    assert dict(request.parameters) == {"status": "awaiting-shipment"}
    assert order.status.is_custom
