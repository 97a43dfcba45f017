"""Comandos de estadísticas."""

from __future__ import annotations

from datetime import date

import typer

from adapters.remotes.stats import StatsRemote
from cli._runtime import console, run_remote
from cli.ui_components import build_summary_panel
from core.domain.models import StatGranularity
from core.services.period_summary import load_period_summary

app = typer.Typer(no_args_is_help=True, help="Store stats.")


@app.command("summary")
def summary(
    site_id: int = typer.Argument(...),
    granularity: StatGranularity = typer.Option(StatGranularity.DAY, "--granularity", "-g"),
    on: str | None = typer.Option(None, "--date", help="Latest date to include (YYYY-MM-DD)."),
) -> None:
    """Visitors, orders and revenue for one period."""

    try:
        today = date.fromisoformat(on) if on else date.today()
    except ValueError as exc:
        raise typer.BadParameter("expected YYYY-MM-DD", param_hint="--date") from exc
    period = run_remote(
        lambda network, _settings: load_period_summary(
            StatsRemote(network),
            site_id=site_id,
            granularity=granularity,
            today=today,
        )
    )
    console.print(build_summary_panel(period))
