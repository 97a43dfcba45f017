"""View model de una fila de la lista de productos."""

from __future__ import annotations

from dataclasses import dataclass

from core.domain.extensible import ProductStockStatus
from core.domain.models import Product

DETAILS_SEPARATOR = " • "


def stock_text(product: Product) -> str:
    if (
        product.manage_stock
        and product.stock_status == ProductStockStatus.IN_STOCK  # type: ignore[attr-defined]
        and product.stock_quantity is not None
    ):
        return f"{product.stock_quantity} in stock"
    return product.stock_status.description


def variations_text(product: Product) -> str | None:
    count = len(product.variations)
    if count == 0:
        return None
    return f"{count} variant" if count == 1 else f"{count} variants"


@dataclass(frozen=True)
class ProductRowViewModel:
    name: str
    details: str
    image_url: str | None

    @classmethod
    def from_product(cls, product: Product) -> "ProductRowViewModel":
        parts = [stock_text(product)]
        variants = variations_text(product)
        if variants:
            parts.append(variants)
        image_url = product.images[0].src if product.images else None
        return cls(name=product.name, details=DETAILS_SEPARATOR.join(parts), image_url=image_url)
