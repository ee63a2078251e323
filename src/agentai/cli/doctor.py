"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from agentai.adapters.http_client import build_async_client
from agentai.core.config import AppSettings, write_user_env_vars
from agentai.core.domain.models import ClientConfig

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(api_key: str, config: ClientConfig) -> tuple[bool, str]:
    # Any HTTP answer means the host is reachable; the token is not checked.
    try:
        async with build_async_client(api_key, config) as client:
            response = await client.get("")
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc) or type(exc).__name__


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="agentai Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    if settings.api_key:
        table.add_row("API key", "OK", "Bearer token configured")
    else:
        table.add_row("API key", "MISSING", "Set AGENTAI_API_KEY or run `agentai doctor setup`")
    table.add_row("Base URL", "OK", settings.base_url)
    table.add_row("Timeout", "OK", f"{settings.timeout_seconds:g}s")
    table.add_row("Default model", "OK", settings.default_model)

    ok_http, detail_http = asyncio.run(_check_http(settings.api_key or "anonymous", settings.to_client_config()))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not settings.api_key or not ok_http:
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    settings = AppSettings()

    api_key = typer.prompt("Agent.ai API key", hide_input=True, confirmation_prompt=False).strip()
    base_url = typer.prompt("API base URL", default=settings.base_url, show_default=True).strip()
    model = typer.prompt("Default LLM engine", default=settings.default_model, show_default=True).strip()

    if not api_key or not base_url or not model:
        raise typer.BadParameter("api key, base_url and model are required")

    env_path = write_user_env_vars(
        {
            "AGENTAI_API_KEY": api_key,
            "AGENTAI_BASE_URL": base_url,
            "AGENTAI_DEFAULT_MODEL": model,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
