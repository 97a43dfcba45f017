"""Comandos de pedidos."""

from __future__ import annotations

from pathlib import Path

import typer

from adapters.remotes.orders import OrdersRemote
from cli._runtime import console, maybe_export, run_remote
from cli.ui_components import build_orders_table
from core.domain.extensible import OrderStatus

app = typer.Typer(no_args_is_help=True, help="Store orders.")


@app.command("list")
def list_orders(
    site_id: int = typer.Argument(...),
    status: str | None = typer.Option(None, "--status", help="Status key (default: any)."),
    page: int = typer.Option(1, "--page", min=1),
    output: Path | None = typer.Option(None, "--output", "-o"),
) -> None:
    """List orders of a site."""

    orders = run_remote(
        lambda network, settings: OrdersRemote(network).load_all_orders(
            site_id, status, page, settings.default_page_size
        )
    )
    console.print(build_orders_table(orders))
    maybe_export(orders, output)


@app.command("show")
def show_order(
    site_id: int = typer.Argument(...),
    order_id: int = typer.Argument(...),
) -> None:
    """Show one order."""

    order = run_remote(lambda network, _settings: OrdersRemote(network).load_order(site_id, order_id))
    console.print(build_orders_table([order]))


@app.command("set-status")
def set_status(
    site_id: int = typer.Argument(...),
    order_id: int = typer.Argument(...),
    status: str = typer.Argument(..., help="New status key (e.g. completed)."),
) -> None:
    """Change the status of an order."""

    new_status = OrderStatus.from_raw_value(status)
    order = run_remote(
        lambda network, _settings: OrdersRemote(network).update_order_status(site_id, order_id, new_status)
    )
    console.print(build_orders_table([order]))
