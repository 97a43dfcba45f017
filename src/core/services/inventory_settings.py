"""Editor de los ajustes de inventario de un producto.

Las filas se modelan como una unión etiquetada: cada variante lleva solo los
datos que necesita su renderer, y la presentación despacha por tipo de fila.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

import structlog

from adapters.remotes.products import ProductsRemote
from core.domain.extensible import ProductBackordersSetting, ProductStockStatus
from core.domain.models import Product, ProductInventoryEditableData
from core.errors import ProductUpdateError, ProductUpdateFailed

logger = structlog.get_logger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class SkuRow:
    sku: str | None


@dataclass(frozen=True)
class ManageStockRow:
    enabled: bool


@dataclass(frozen=True)
class LimitOnePerOrderRow:
    enabled: bool


@dataclass(frozen=True)
class StockQuantityRow:
    quantity: int | None


@dataclass(frozen=True)
class BackordersRow:
    setting: ProductBackordersSetting | None


@dataclass(frozen=True)
class StockStatusRow:
    status: ProductStockStatus | None


InventoryRow = Union[
    SkuRow,
    ManageStockRow,
    LimitOnePerOrderRow,
    StockQuantityRow,
    BackordersRow,
    StockStatusRow,
]


@dataclass(frozen=True)
class Section:
    rows: tuple[InventoryRow, ...]


def parse_stock_quantity(text: str | None) -> int | None:
    """Texto libre -> cantidad.

    Solo acepta un entero ASCII con signo opcional, sin espacios ni `_`;
    cualquier otra cosa da `None`.
    """

    if text is None or not _INTEGER_RE.fullmatch(text):
        return None
    return int(text)


class InventorySettingsEditor:
    """Estado editable de los ajustes de inventario de un `Product`."""

    def __init__(self, product: Product) -> None:
        self.site_id = product.site_id
        self.product_id = product.product_id
        self._original_sku = product.sku

        self.sku = product.sku
        self.manage_stock_enabled = product.manage_stock
        self.sold_individually = product.sold_individually

        self.stock_quantity = product.stock_quantity
        self.backorders_setting: ProductBackordersSetting | None = product.backorders

        self.stock_status: ProductStockStatus | None = product.stock_status

        self.sections: list[Section] = []
        self.reload_sections()

    def reload_sections(self) -> list[Section]:
        if self.manage_stock_enabled:
            stock_rows: tuple[InventoryRow, ...] = (
                ManageStockRow(self.manage_stock_enabled),
                StockQuantityRow(self.stock_quantity),
                BackordersRow(self.backorders_setting),
            )
        else:
            stock_rows = (
                ManageStockRow(self.manage_stock_enabled),
                StockStatusRow(self.stock_status),
            )

        self.sections = [
            Section((SkuRow(self.sku),)),
            Section(stock_rows),
            Section((LimitOnePerOrderRow(self.sold_individually),)),
        ]
        return self.sections

    def handle_sku_change(self, sku: str | None) -> None:
        self.sku = sku
        self.reload_sections()

    def handle_stock_quantity_change(self, text: str | None) -> None:
        if text is None:
            return
        self.stock_quantity = parse_stock_quantity(text)
        self.reload_sections()

    def handle_manage_stock_change(self, enabled: bool) -> None:
        self.manage_stock_enabled = enabled
        self.reload_sections()

    def handle_sold_individually_change(self, enabled: bool) -> None:
        self.sold_individually = enabled
        self.reload_sections()

    def handle_backorders_change(self, setting: ProductBackordersSetting) -> None:
        self.backorders_setting = setting
        self.reload_sections()

    def handle_stock_status_change(self, status: ProductStockStatus) -> None:
        self.stock_status = status
        self.reload_sections()

    def editable_data(self) -> ProductInventoryEditableData:
        return ProductInventoryEditableData(
            sku=self.sku,
            manage_stock=self.manage_stock_enabled,
            sold_individually=self.sold_individually,
            stock_quantity=self.stock_quantity,
            backorders_setting=self.backorders_setting,
            stock_status=self.stock_status,
        )

    async def is_sku_valid(self, products_remote: ProductsRemote) -> bool:
        """Un SKU vacío o sin cambios es válido sin consultar al backend."""

        if not self.sku or self.sku == self._original_sku:
            return True
        matches = await products_remote.search_sku(self.site_id, self.sku)
        return not matches

    async def complete_updating(self, products_remote: ProductsRemote) -> ProductInventoryEditableData:
        """Valida el SKU y devuelve los datos editados.

        Lanza `ProductUpdateFailed(DUPLICATED_SKU)` si el SKU ya existe; los
        fallos remotos se propagan como `RemoteError`.
        """

        if not await self.is_sku_valid(products_remote):
            logger.info("inventory.duplicated_sku", site_id=self.site_id, sku=self.sku)
            raise ProductUpdateFailed(ProductUpdateError.DUPLICATED_SKU)
        return self.editable_data()
