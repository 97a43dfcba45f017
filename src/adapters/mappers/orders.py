"""Mappers de pedidos."""

from __future__ import annotations

from typing import Any

from adapters.mappers._envelope import expect_dict, expect_list, unwrap_data
from core.domain.models import Order


def _order(raw: Any, *, site_id: int) -> Order:
    data = expect_dict(raw, "order")
    return Order.model_validate({**data, "site_id": site_id})


class OrderListMapper:
    def __init__(self, *, site_id: int) -> None:
        self.site_id = site_id

    def map(self, response: bytes) -> list[Order]:
        items = expect_list(unwrap_data(response), "orders")
        return [_order(item, site_id=self.site_id) for item in items]


class OrderMapper:
    def __init__(self, *, site_id: int) -> None:
        self.site_id = site_id

    def map(self, response: bytes) -> Order:
        return _order(unwrap_data(response), site_id=self.site_id)
