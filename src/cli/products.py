"""Comandos de productos."""

from __future__ import annotations

from pathlib import Path

import typer

from adapters.remotes.products import ProductsRemote
from cli._runtime import console, err_console, maybe_export, run_remote
from cli.ui_components import build_inventory_table, build_products_table
from core.domain.extensible import ProductBackordersSetting, ProductStockStatus
from core.errors import ProductUpdateFailed
from core.services.inventory_settings import InventorySettingsEditor

app = typer.Typer(no_args_is_help=True, help="Store products.")


@app.command("list")
def list_products(
    site_id: int = typer.Argument(...),
    page: int = typer.Option(1, "--page", min=1),
    page_size: int | None = typer.Option(None, "--page-size", min=1, max=100),
    output: Path | None = typer.Option(None, "--output", "-o"),
) -> None:
    """List products of a site."""

    products = run_remote(
        lambda network, settings: ProductsRemote(network).load_all_products(
            site_id, page, page_size or settings.default_page_size
        )
    )
    console.print(build_products_table(products))
    maybe_export(products, output)


@app.command("show")
def show_product(
    site_id: int = typer.Argument(...),
    product_id: int = typer.Argument(...),
    output: Path | None = typer.Option(None, "--output", "-o"),
) -> None:
    """Show one product."""

    product = run_remote(lambda network, _settings: ProductsRemote(network).load_product(site_id, product_id))
    console.print(build_products_table([product]))
    maybe_export(product, output)


@app.command("search")
def search_products(
    site_id: int = typer.Argument(...),
    keyword: str = typer.Argument(...),
    page: int = typer.Option(1, "--page", min=1),
) -> None:
    """Search products by keyword."""

    products = run_remote(
        lambda network, settings: ProductsRemote(network).search_products(
            site_id, keyword, page, settings.default_page_size
        )
    )
    console.print(build_products_table(products))


@app.command("validate-sku")
def validate_sku(
    site_id: int = typer.Argument(...),
    sku: str = typer.Argument(...),
) -> None:
    """Check whether a SKU is free to use."""

    matches = run_remote(lambda network, _settings: ProductsRemote(network).search_sku(site_id, sku))
    if matches:
        err_console.print(f"[red]SKU already in use:[/red] {sku}")
        raise typer.Exit(code=1)
    console.print(f"[green]SKU available:[/green] {sku}")


@app.command("inventory")
def edit_inventory(
    site_id: int = typer.Argument(...),
    product_id: int = typer.Argument(...),
    sku: str | None = typer.Option(None, "--sku"),
    manage_stock: bool | None = typer.Option(None, "--manage-stock/--no-manage-stock"),
    quantity: str | None = typer.Option(None, "--quantity"),
    backorders: str | None = typer.Option(None, "--backorders", help="no | notify | yes"),
    stock_status: str | None = typer.Option(None, "--stock-status", help="instock | outofstock | onbackorder"),
    limit_one: bool | None = typer.Option(None, "--limit-one/--no-limit-one"),
    save: bool = typer.Option(False, "--save", help="Validate and send the changes."),
) -> None:
    """Show (and optionally update) the inventory settings of a product."""

    async def _edit(network, _settings):
        remote = ProductsRemote(network)
        product = await remote.load_product(site_id, product_id)
        editor = InventorySettingsEditor(product)
        if sku is not None:
            editor.handle_sku_change(sku)
        if manage_stock is not None:
            editor.handle_manage_stock_change(manage_stock)
        if quantity is not None:
            editor.handle_stock_quantity_change(quantity)
        if backorders is not None:
            editor.handle_backorders_change(ProductBackordersSetting.from_raw_value(backorders))
        if stock_status is not None:
            editor.handle_stock_status_change(ProductStockStatus.from_raw_value(stock_status))
        if limit_one is not None:
            editor.handle_sold_individually_change(limit_one)
        if save:
            data = await editor.complete_updating(remote)
            await remote.update_product_inventory(site_id, product_id, data)
        return editor

    try:
        editor = run_remote(_edit)
    except ProductUpdateFailed as exc:
        err_console.print(f"[red]{exc.error.alert_title}:[/red] {exc.error.alert_message}")
        raise typer.Exit(code=1) from exc

    console.print(build_inventory_table(editor.sections))
    if save:
        console.print("[green]Inventory updated.[/green]")
