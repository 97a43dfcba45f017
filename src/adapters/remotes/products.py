"""ProductsRemote: endpoints de productos (`wc/v3`)."""

from __future__ import annotations

from typing import Any

from adapters.mappers.products import ProductListMapper, ProductMapper, ProductSkuMapper
from adapters.remotes.base import Remote
from adapters.requests import HTTPMethod, JetpackRequest, WooAPIVersion
from core.domain.models import Product, ProductInventoryEditableData

PRODUCTS_PATH = "products"

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 25


class ParameterKeys:
    PAGE = "page"
    PER_PAGE = "per_page"
    SEARCH = "search"
    SKU = "sku"
    FIELDS = "_fields"
    MANAGE_STOCK = "manage_stock"
    SOLD_INDIVIDUALLY = "sold_individually"
    STOCK_QUANTITY = "stock_quantity"
    BACKORDERS = "backorders"
    STOCK_STATUS = "stock_status"


def inventory_parameters(data: ProductInventoryEditableData) -> dict[str, Any]:
    """Cuerpo del update de inventario; los campos dependen de `manage_stock`."""

    parameters: dict[str, Any] = {
        ParameterKeys.SKU: data.sku or "",
        ParameterKeys.MANAGE_STOCK: data.manage_stock,
        ParameterKeys.SOLD_INDIVIDUALLY: data.sold_individually,
    }
    if data.manage_stock:
        parameters[ParameterKeys.STOCK_QUANTITY] = data.stock_quantity
        if data.backorders_setting is not None:
            parameters[ParameterKeys.BACKORDERS] = data.backorders_setting.raw_value
    elif data.stock_status is not None:
        parameters[ParameterKeys.STOCK_STATUS] = data.stock_status.raw_value
    return parameters


class ProductsRemote(Remote):
    async def load_all_products(
        self,
        site_id: int,
        page_number: int = DEFAULT_PAGE_NUMBER,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> list[Product]:
        parameters = {
            ParameterKeys.PAGE: str(page_number),
            ParameterKeys.PER_PAGE: str(page_size),
        }
        request = JetpackRequest(WooAPIVersion.MARK3, HTTPMethod.GET, site_id, PRODUCTS_PATH, parameters)
        return await self.enqueue(request, ProductListMapper(site_id=site_id))

    async def load_product(self, site_id: int, product_id: int) -> Product:
        request = JetpackRequest(
            WooAPIVersion.MARK3,
            HTTPMethod.GET,
            site_id,
            f"{PRODUCTS_PATH}/{product_id}",
        )
        return await self.enqueue(request, ProductMapper(site_id=site_id))

    async def search_products(
        self,
        site_id: int,
        keyword: str,
        page_number: int = DEFAULT_PAGE_NUMBER,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> list[Product]:
        parameters = {
            ParameterKeys.SEARCH: keyword,
            ParameterKeys.PAGE: str(page_number),
            ParameterKeys.PER_PAGE: str(page_size),
        }
        request = JetpackRequest(WooAPIVersion.MARK3, HTTPMethod.GET, site_id, PRODUCTS_PATH, parameters)
        return await self.enqueue(request, ProductListMapper(site_id=site_id))

    async def search_sku(self, site_id: int, sku: str) -> list[str]:
        """SKUs existentes que coinciden con `sku` (vacío si está libre)."""

        parameters = {
            ParameterKeys.SKU: sku,
            ParameterKeys.FIELDS: ParameterKeys.SKU,
        }
        request = JetpackRequest(WooAPIVersion.MARK3, HTTPMethod.GET, site_id, PRODUCTS_PATH, parameters)
        return await self.enqueue(request, ProductSkuMapper())

    async def update_product_inventory(
        self,
        site_id: int,
        product_id: int,
        data: ProductInventoryEditableData,
    ) -> Product:
        request = JetpackRequest(
            WooAPIVersion.MARK3,
            HTTPMethod.POST,
            site_id,
            f"{PRODUCTS_PATH}/{product_id}",
            inventory_parameters(data),
        )
        return await self.enqueue(request, ProductMapper(site_id=site_id))
