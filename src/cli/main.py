"""Entry point de la CLI (Typer).

Cada grupo de comandos vive en su módulo y se registra aquí.
"""

from __future__ import annotations

import typer

from cli import doctor, orders, products, stats, trackings
from cli._runtime import console, load_settings
from cli.ui_components import print_banner
from core.log import configure_logging

app = typer.Typer(
    no_args_is_help=True,
    help="Client for WooCommerce stores: orders, products, shipment tracking and stats.",
)
app.add_typer(trackings.app, name="trackings")
app.add_typer(products.app, name="products")
app.add_typer(orders.app, name="orders")
app.add_typer(stats.app, name="stats")
app.add_typer(doctor.app, name="doctor")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    log_json: bool = typer.Option(False, "--log-json", help="Emit logs as JSON lines."),
    banner: bool = typer.Option(False, "--banner", help="Print the banner before running."),
) -> None:
    configure_logging(verbose=verbose, log_json=log_json or load_settings().log_json)
    if banner:
        print_banner(console)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
