"""Mappers de productos."""

from __future__ import annotations

from typing import Any

from adapters.mappers._envelope import expect_dict, expect_list, unwrap_data
from core.domain.models import Product


def _product(raw: Any, *, site_id: int) -> Product:
    data = expect_dict(raw, "product")
    return Product.model_validate({**data, "site_id": site_id})


class ProductListMapper:
    def __init__(self, *, site_id: int) -> None:
        self.site_id = site_id

    def map(self, response: bytes) -> list[Product]:
        items = expect_list(unwrap_data(response), "products")
        return [_product(item, site_id=self.site_id) for item in items]


class ProductMapper:
    def __init__(self, *, site_id: int) -> None:
        self.site_id = site_id

    def map(self, response: bytes) -> Product:
        return _product(unwrap_data(response), site_id=self.site_id)


class ProductSkuMapper:
    """SKUs coincidentes (`_fields=sku`). Lista vacía si no hay coincidencias."""

    def map(self, response: bytes) -> list[str]:
        items = expect_list(unwrap_data(response), "product skus")
        skus: list[str] = []
        for item in items:
            sku = expect_dict(item, "product sku").get("sku")
            if not isinstance(sku, str):
                raise ValueError("product sku: 'sku' must be a string")
            if sku:
                skus.append(sku)
        return skus
