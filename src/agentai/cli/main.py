"""agentai command line.

Commands:
- `actions`: list registered actions.
- `run`: execute one action with key=value or JSON parameters.
- `chat`: shortcut for `invokeLlm`.
- `doctor`: diagnostics and interactive setup.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from agentai.adapters.agentai_client import AgentAiClient
from agentai.cli import doctor
from agentai.cli.ui_components import build_actions_table, build_result_panel, print_banner
from agentai.core.config import AppSettings
from agentai.core.domain.actions import ACTION_ENDPOINTS
from agentai.core.domain.models import ActionResult

app = typer.Typer(no_args_is_help=True, help="Client for the Agent.ai Actions API.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def parse_key_values(pairs: list[str] | None) -> dict[str, Any]:
    """Turn `key=value` strings into a dict.

    Values are decoded as JSON when they parse (`500`, `true`, `["a"]`),
    otherwise kept as plain strings.
    """

    out: dict[str, Any] = {}
    for pair in pairs or []:
        if "=" not in pair:
            raise typer.BadParameter(f"Expected key=value, got {pair!r}")
        key, raw = pair.split("=", 1)
        key = key.strip()
        if not key:
            raise typer.BadParameter(f"Empty key in {pair!r}")
        try:
            out[key] = json.loads(raw)
        except json.JSONDecodeError:
            out[key] = raw
    return out


def build_client(settings: AppSettings) -> AgentAiClient:
    if not settings.api_key:
        _err_console.print(
            "[red]No API key.[/red] Set AGENTAI_API_KEY (or AGENT_API_KEY) or run `agentai doctor setup`."
        )
        raise typer.Exit(code=2)
    return AgentAiClient(settings.api_key, settings.to_client_config())


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False)],
    )


def _render(action_id: str, result: ActionResult, *, raw: bool) -> None:
    if raw:
        typer.echo(json.dumps(result.model_dump(), ensure_ascii=False, default=str))
    else:
        _console.print(build_result_panel(action_id, result))
    if not result.ok:
        raise typer.Exit(code=1)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="DEBUG, INFO, WARNING or ERROR (defaults to AGENTAI_LOG_LEVEL).",
    ),
) -> None:
    _configure_logging(log_level or AppSettings().log_level)


@app.command()
def actions() -> None:
    """List every action identifier and its endpoint."""

    _console.print(build_actions_table(ACTION_ENDPOINTS))


@app.command(name="run")
def run_action(
    action_id: str = typer.Argument(..., help="Action identifier, e.g. grabWebText."),
    param: Optional[list[str]] = typer.Option(None, "--param", "-p", help="Parameter as key=value (repeatable)."),
    json_params: Optional[str] = typer.Option(None, "--json", help="Parameters as a JSON object."),
    raw: bool = typer.Option(False, "--raw", help="Print the result as JSON only."),
) -> None:
    """Execute one action and print its result."""

    params: dict[str, Any] = {}
    if json_params:
        try:
            decoded = json.loads(json_params)
        except json.JSONDecodeError as exc:
            raise typer.BadParameter(f"--json is not valid JSON: {exc}") from exc
        if not isinstance(decoded, dict):
            raise typer.BadParameter("--json must be a JSON object")
        params.update(decoded)
    params.update(parse_key_values(param))

    settings = AppSettings()
    client = build_client(settings)
    if not raw:
        print_banner(_console)

    async def _go() -> ActionResult:
        async with client:
            return await client.action(action_id, params)

    _render(action_id, asyncio.run(_go()), raw=raw)


@app.command()
def chat(
    prompt: str = typer.Argument(..., help="Instructions for the LLM."),
    model: Optional[str] = typer.Option(None, "--model", "-m", help="LLM engine (defaults to AGENTAI_DEFAULT_MODEL)."),
    option: Optional[list[str]] = typer.Option(None, "--option", "-o", help="Extra invokeLlm field as key=value."),
    raw: bool = typer.Option(False, "--raw", help="Print the result as JSON only."),
) -> None:
    """Send a prompt through the invokeLlm action."""

    extra = parse_key_values(option)
    settings = AppSettings()
    if model is not None:
        extra["model"] = model
    elif "model" not in extra:
        extra["model"] = settings.default_model
    client = build_client(settings)

    async def _go() -> ActionResult:
        async with client:
            return await client.chat(prompt, extra)

    _render("invokeLlm", asyncio.run(_go()), raw=raw)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
