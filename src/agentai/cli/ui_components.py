"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from presentation details.
- Tables/panels are reused by `run` and `chat`.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from agentai.core.domain.models import ActionResult


def print_banner(console: Console) -> None:
    """Print the welcome banner (skipped in `--raw` mode)."""

    title = Text("agentai", style="bold cyan")
    subtitle = Text("Agent.ai Actions API client", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_actions_table(endpoints: Mapping[str, str]) -> Table:
    table = Table(title="Available actions")
    table.add_column("Action", style="cyan", no_wrap=True)
    table.add_column("Endpoint", style="magenta")
    for action_id, path in endpoints.items():
        table.add_row(action_id, path)
    return table


def _format_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


def build_result_panel(action_id: str, result: ActionResult) -> Panel:
    """Panel for an `ActionResult`: green with results, red with the error."""

    if not result.ok:
        body = Text()
        body.append(f"HTTP {result.status}\n", style="bold")
        body.append(result.error or "", style="red")
        if result.error_kind is not None:
            body.append(f"\n\nkind: {result.error_kind.value}", style="dim")
        return Panel(body, title=Text(action_id, style="bold red"), border_style="red")

    body = Text()
    body.append(_format_value(result.results) if result.results is not None else "(no results)")
    if result.metadata is not None:
        body.append("\n\nmetadata:\n", style="bold")
        body.append(_format_value(result.metadata), style="dim")
    title = Text(f"{action_id} • HTTP {result.status}", style="bold green")
    return Panel(body, title=title, border_style="green")
