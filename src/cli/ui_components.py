"""Componentes de UI para CLI (Rich).

Separa los detalles visuales de la lógica de los comandos y permite reutilizar
tablas/paneles en varios comandos.
"""

from __future__ import annotations

from typing import Callable, Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Order, Product, ShipmentTracking, ShipmentTrackingProviderGroup
from core.services.inventory_settings import (
    BackordersRow,
    InventoryRow,
    LimitOnePerOrderRow,
    ManageStockRow,
    Section,
    SkuRow,
    StockQuantityRow,
    StockStatusRow,
)
from core.services.period_summary import PeriodSummary
from core.services.product_rows import ProductRowViewModel


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("woo-remote", style="bold magenta")
    subtitle = Text("Pedidos • Productos • Envíos • Estadísticas", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="magenta", padding=(1, 4)))


def build_trackings_table(trackings: Iterable[ShipmentTracking]) -> Table:
    table = Table(title="Shipment Trackings")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Number", style="white")
    table.add_column("Provider", style="green")
    table.add_column("Shipped", style="dim")
    table.add_column("Link", style="magenta")
    for tracking in trackings:
        table.add_row(
            tracking.tracking_id,
            tracking.tracking_number,
            tracking.tracking_provider or "-",
            tracking.date_shipped.isoformat() if tracking.date_shipped else "-",
            tracking.tracking_link or "-",
        )
    return table


def build_providers_table(groups: Iterable[ShipmentTrackingProviderGroup]) -> Table:
    table = Table(title="Tracking Providers")
    table.add_column("Group", style="cyan", no_wrap=True)
    table.add_column("Provider", style="white")
    table.add_column("URL", style="magenta")
    for group in groups:
        for provider in group.providers:
            table.add_row(group.name, provider.name, provider.url)
    return table


def build_products_table(products: Iterable[Product]) -> Table:
    table = Table(title="Products")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Type", style="green")
    table.add_column("Details", style="dim")
    table.add_column("Image", style="magenta")
    for product in products:
        row = ProductRowViewModel.from_product(product)
        table.add_row(
            str(product.product_id),
            row.name,
            product.product_type.raw_value,
            row.details,
            row.image_url or "-",
        )
    return table


def build_orders_table(orders: Iterable[Order]) -> Table:
    table = Table(title="Orders")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Number", style="white")
    table.add_column("Status", style="green")
    table.add_column("Total", style="white", justify="right")
    table.add_column("Created", style="dim")
    for order in orders:
        table.add_row(
            str(order.order_id),
            order.number,
            order.status.raw_value,
            f"{order.total} {order.currency}".strip(),
            order.date_created.isoformat() if order.date_created else "-",
        )
    return table


def build_summary_panel(summary: PeriodSummary) -> Panel:
    """Panel con visitas, pedidos e ingresos del periodo."""

    body = Text()
    body.append("Visitors: ", style="bold")
    body.append(f"{summary.visitors}\n")
    body.append("Orders: ", style="bold")
    body.append(f"{summary.orders}\n")
    body.append("Revenue: ", style="bold")
    body.append(f"{summary.revenue}\n")
    body.append(f"\n{summary.updated_label}", style="dim")
    return Panel(body, title=Text(summary.title, style="bold yellow"), border_style="yellow")


def _on_off(value: bool) -> str:
    return "on" if value else "off"


_ROW_RENDERERS: dict[type, Callable[..., tuple[str, str]]] = {
    SkuRow: lambda row: ("SKU", row.sku or "-"),
    ManageStockRow: lambda row: ("Manage stock", _on_off(row.enabled)),
    LimitOnePerOrderRow: lambda row: ("Limit one per order", _on_off(row.enabled)),
    StockQuantityRow: lambda row: ("Quantity", "-" if row.quantity is None else str(row.quantity)),
    BackordersRow: lambda row: ("Backorders", row.setting.description if row.setting else "-"),
    StockStatusRow: lambda row: ("Stock status", row.status.description if row.status else "-"),
}


def render_inventory_row(row: InventoryRow) -> tuple[str, str]:
    return _ROW_RENDERERS[type(row)](row)


def build_inventory_table(sections: Iterable[Section]) -> Table:
    table = Table(title="Inventory", show_lines=False)
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for index, section in enumerate(sections):
        if index:
            table.add_section()
        for row in section.rows:
            table.add_row(*render_inventory_row(row))
    return table
