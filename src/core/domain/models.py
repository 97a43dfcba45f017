"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta en los campos estructurales y documentación
  autocontenida (Field) sin acoplar el Core a librerías de I/O.
- Los campos enumerados usan `ExtensibleEnum`, así un valor nuevo del backend
  no rompe la decodificación.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
- `site_id` (y `order_id` cuando aplica) no viene en el JSON: lo inyecta el
  mapper a partir del contexto de la petición.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from core.domain.extensible import (
    OrderStatus,
    ProductBackordersSetting,
    ProductStockStatus,
    ProductType,
)

_MODEL_CONFIG = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


def _number_as_str(value: Any) -> Any:
    # El backend mezcla "123" y 123 en campos de texto.
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class StatGranularity(str, Enum):
    """Granularidad de las estadísticas (parámetro `unit`)."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    def format_date(self, value: date) -> str:
        """Formato del parámetro `date` esperado por el endpoint de stats."""

        if self is StatGranularity.DAY:
            return value.isoformat()
        if self is StatGranularity.WEEK:
            iso_year, iso_week, _ = value.isocalendar()
            return f"{iso_year}-W{iso_week:02d}"
        if self is StatGranularity.MONTH:
            return f"{value.year:04d}-{value.month:02d}"
        return f"{value.year:04d}"

    @property
    def pluralized(self) -> str:
        return {
            StatGranularity.DAY: "Days",
            StatGranularity.WEEK: "Weeks",
            StatGranularity.MONTH: "Months",
            StatGranularity.YEAR: "Years",
        }[self]


class ShipmentTracking(BaseModel):
    """Registro de seguimiento de envío asociado a un pedido."""

    model_config = _MODEL_CONFIG

    site_id: int = Field(..., description="Sitio (tenant) que aloja el pedido.")
    order_id: int = Field(..., description="Pedido al que pertenece el tracking.")
    tracking_id: str = Field(..., min_length=1, description="Identificador del tracking en el backend.")
    tracking_number: str = Field(..., description="Número de seguimiento del transportista.")
    tracking_provider: str | None = Field(default=None, description="Nombre del transportista.")
    tracking_link: str | None = Field(default=None, description="URL de seguimiento (si el backend la calcula).")
    date_shipped: date | None = Field(default=None, description="Fecha de envío (YYYY-MM-DD).")

    @field_validator("tracking_id", "tracking_number", mode="before")
    @classmethod
    def _ids_as_str(cls, value: Any) -> Any:
        return _number_as_str(value)

    @field_validator("tracking_provider", "tracking_link", mode="before")
    @classmethod
    def _empty_as_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("date_shipped", mode="before")
    @classmethod
    def _parse_date_shipped(cls, value: Any) -> date | None:
        if isinstance(value, date):
            return value
        if not isinstance(value, str):
            return None
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            return None


class ShipmentTrackingProvider(BaseModel):
    model_config = _MODEL_CONFIG

    site_id: int
    name: str = Field(..., min_length=1)
    url: str = Field(default="", description="Plantilla de URL de seguimiento del transportista.")


class ShipmentTrackingProviderGroup(BaseModel):
    """Transportistas agrupados por país/región, en el orden del backend."""

    model_config = _MODEL_CONFIG

    site_id: int
    name: str = Field(..., min_length=1)
    providers: list[ShipmentTrackingProvider] = Field(default_factory=list)


class ProductImage(BaseModel):
    model_config = _MODEL_CONFIG

    image_id: int = Field(..., alias="id")
    src: str
    name: str = ""


class Product(BaseModel):
    """Producto de la tienda (subset de la API wc/v3)."""

    model_config = _MODEL_CONFIG

    site_id: int
    product_id: int = Field(..., alias="id")
    name: str
    slug: str = ""
    permalink: str = ""
    product_type: ProductType = Field(..., alias="type")
    status: str = "publish"
    sku: str | None = None
    price: str = ""
    regular_price: str = ""
    sale_price: str = ""
    manage_stock: bool = False
    stock_quantity: int | None = None
    stock_status: ProductStockStatus = Field(default=ProductStockStatus.IN_STOCK)  # type: ignore[attr-defined]
    backorders: ProductBackordersSetting = Field(default=ProductBackordersSetting.NOT_ALLOWED)  # type: ignore[attr-defined]
    sold_individually: bool = False
    images: list[ProductImage] = Field(default_factory=list)
    variations: list[int] = Field(default_factory=list)


class ProductInventoryEditableData(BaseModel):
    """Campos de inventario editables de un producto."""

    model_config = _MODEL_CONFIG

    sku: str | None = None
    manage_stock: bool = False
    sold_individually: bool = False
    # Solo con manage_stock activo.
    stock_quantity: int | None = None
    backorders_setting: ProductBackordersSetting | None = None
    # Solo con manage_stock desactivado.
    stock_status: ProductStockStatus | None = None


class OrderItem(BaseModel):
    model_config = _MODEL_CONFIG

    item_id: int = Field(..., alias="id")
    name: str
    product_id: int = 0
    quantity: int = 0
    total: str = "0"


class Order(BaseModel):
    """Pedido (subset de la API wc/v3)."""

    model_config = _MODEL_CONFIG

    site_id: int
    order_id: int = Field(..., alias="id")
    parent_id: int = 0
    number: str
    status: OrderStatus
    currency: str = ""
    date_created: datetime | None = None
    total: str = "0"
    total_tax: str = "0"
    customer_note: str = ""
    items: list[OrderItem] = Field(default_factory=list, alias="line_items")

    @field_validator("number", mode="before")
    @classmethod
    def _number_as_str(cls, value: Any) -> Any:
        return _number_as_str(value)


class OrderStatsItem(BaseModel):
    """Fila de la tabla `fields`/`data` de las stats de pedidos."""

    model_config = _MODEL_CONFIG

    period: str
    orders: int = 0
    products: int = 0
    coupons: int = 0
    coupon_discount: float = 0.0
    total_sales: float = 0.0
    total_tax: float = 0.0
    total_shipping: float = 0.0
    total_shipping_tax: float = 0.0
    total_refund: float = 0.0
    total_tax_refund: float = 0.0
    total_shipping_refund: float = 0.0
    total_shipping_tax_refund: float = 0.0
    currency: str = ""
    gross_sales: float = 0.0
    net_sales: float = 0.0
    avg_order_value: float = 0.0
    avg_products_per_order: float = 0.0

    @field_validator("period", mode="before")
    @classmethod
    def _period_as_str(cls, value: Any) -> Any:
        return _number_as_str(value)


class OrderStats(BaseModel):
    model_config = _MODEL_CONFIG

    site_id: int
    date: str
    granularity: StatGranularity = Field(..., alias="unit")
    quantity: int = 0
    total_gross_sales: float = 0.0
    total_net_sales: float = 0.0
    total_orders: int = 0
    total_products: int = 0
    avg_gross_sales: float = 0.0
    avg_net_sales: float = 0.0
    avg_orders: float = 0.0
    avg_products: float = 0.0
    items: list[OrderStatsItem] = Field(default_factory=list)


class SiteVisitStatsItem(BaseModel):
    model_config = _MODEL_CONFIG

    period: str
    visitors: int = 0

    @field_validator("period", mode="before")
    @classmethod
    def _period_as_str(cls, value: Any) -> Any:
        return _number_as_str(value)


class SiteVisitStats(BaseModel):
    model_config = _MODEL_CONFIG

    site_id: int
    date: str
    granularity: StatGranularity = Field(..., alias="unit")
    items: list[SiteVisitStatsItem] = Field(default_factory=list)

    @property
    def total_visitors(self) -> int:
        return sum(item.visitors for item in self.items)
