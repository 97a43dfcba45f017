"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.table import Table

from adapters.http_client import build_async_client
from cli._runtime import console, load_settings
from core.config import AppSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")


async def _check_http(settings: AppSettings) -> tuple[bool, str]:
    url = f"{settings.rest_root}/rest/v1.1/"
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = load_settings()

    table = Table(title="woo-remote Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    if settings.auth_token:
        table.add_row("Auth token", "OK", "Bearer token configured")
    else:
        table.add_row("Auth token", "MISSING", "Run `woo-remote doctor setup-token`")
    table.add_row("API base_url", "OK", settings.dotcom_base_url)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("User config", "OK" if get_user_env_file().exists() else "NONE", str(get_user_env_file()))

    ok_http, detail_http = asyncio.run(_check_http(settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    console.print(table)


@app.command(name="setup-token")
def setup_token() -> None:
    """Interactive token setup (stores config in the user config .env)."""

    base_url = typer.prompt(
        "API base URL",
        default="https://public-api.wordpress.com",
        show_default=True,
    ).strip()
    token = typer.prompt("WordPress.com bearer token", hide_input=True, confirmation_prompt=False).strip()

    if not base_url or not token:
        raise typer.BadParameter("base_url and token are required")

    env_path = write_user_env_vars(
        {
            "WOO_REMOTE_DOTCOM_BASE_URL": base_url,
            "WOO_REMOTE_AUTH_TOKEN": token,
        }
    )

    console.print(f"[green]Saved config to:[/green] {env_path}")
