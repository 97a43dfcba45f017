"""Comandos de shipment trackings."""

from __future__ import annotations

from pathlib import Path

import typer

from adapters.remotes.shipments import ShipmentsRemote
from cli._runtime import console, maybe_export, run_remote
from cli.ui_components import build_providers_table, build_trackings_table

app = typer.Typer(no_args_is_help=True, help="Shipment tracking of an order.")


@app.command("list")
def list_trackings(
    site_id: int = typer.Argument(..., help="Site (tenant) identifier."),
    order_id: int = typer.Argument(..., help="Order identifier."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Export results as JSON."),
) -> None:
    """List the shipment trackings of an order."""

    trackings = run_remote(
        lambda network, _settings: ShipmentsRemote(network).load_shipment_trackings(site_id, order_id)
    )
    console.print(build_trackings_table(trackings))
    maybe_export(trackings, output)


@app.command("add")
def add_tracking(
    site_id: int = typer.Argument(...),
    order_id: int = typer.Argument(...),
    number: str = typer.Option(..., "--number", "-n", help="Tracking number."),
    provider: str = typer.Option(..., "--provider", "-p", help="Tracking provider name."),
    link: str | None = typer.Option(None, "--link", help="Tracking link (custom provider)."),
) -> None:
    """Add a shipment tracking; `--link` registers a custom provider."""

    async def _add(network, _settings):
        remote = ShipmentsRemote(network)
        if link:
            return await remote.create_shipment_tracking_with_custom_provider(
                site_id, order_id, provider, number, link
            )
        return await remote.create_shipment_tracking(site_id, order_id, provider, number)

    tracking = run_remote(_add)
    console.print(build_trackings_table([tracking]))


@app.command("delete")
def delete_tracking(
    site_id: int = typer.Argument(...),
    order_id: int = typer.Argument(...),
    tracking_id: str = typer.Argument(...),
) -> None:
    """Delete a shipment tracking."""

    tracking = run_remote(
        lambda network, _settings: ShipmentsRemote(network).delete_shipment_tracking(site_id, order_id, tracking_id)
    )
    console.print(f"[green]Deleted tracking[/green] {tracking.tracking_id} ({tracking.tracking_number})")


@app.command("providers")
def list_providers(
    site_id: int = typer.Argument(...),
    order_id: int = typer.Argument(...),
) -> None:
    """List the tracking providers known by the store."""

    groups = run_remote(
        lambda network, _settings: ShipmentsRemote(network).load_shipment_tracking_provider_groups(site_id, order_id)
    )
    console.print(build_providers_table(groups))
