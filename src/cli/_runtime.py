"""Plumbing compartido por los comandos: settings, red y salida de errores."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Awaitable, Callable, TypeVar

import typer
from pydantic import BaseModel
from rich.console import Console

from adapters.http_client import HttpxNetwork
from adapters.json_exporter import export_models_json
from core.config import AppSettings
from core.errors import RemoteError

T = TypeVar("T")

console = Console()
err_console = Console(stderr=True)


def load_settings() -> AppSettings:
    return AppSettings()


def build_network(settings: AppSettings) -> HttpxNetwork:
    return HttpxNetwork(settings)


def run_remote(operation: Callable[[HttpxNetwork, AppSettings], Awaitable[T]]) -> T:
    """Ejecuta `operation` con una red nueva; un `RemoteError` termina con código 1."""

    settings = load_settings()

    async def _main() -> T:
        async with build_network(settings) as network:
            return await operation(network, settings)

    try:
        return asyncio.run(_main())
    except RemoteError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc


def maybe_export(models: BaseModel | list, output: Path | None) -> None:
    if output is None:
        return
    path = export_models_json(models=models, output_path=output)
    console.print(f"[green]Saved JSON to:[/green] {path}")
