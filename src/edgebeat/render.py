"""Text snapshot of the dashboard."""

from __future__ import annotations

from rich.markup import escape

from edgebeat.config import EMPTY_MARKER
from edgebeat.formatters import fmt_num, short_address, state_color
from edgebeat.models import AppState
from edgebeat.pager import Pager

BANNER = r"""
 _                           _____    _
| |    __ _ _   _  ___ _ __| ____|__| | __ _  ___
| |   / _` | | | |/ _ \ '__|  _| / _` |/ _` |/ _ \
| |__| (_| | |_| |  __/ |  | |__| (_| | (_| |  __/
|_____\__,_|\__, |\___|_|  |_____\__,_|\__, |\___|
            |___/                      |___/
""".strip("\n")

RULE = "=" * 47


def render_banner() -> str:
    return f"[bold cyan]{escape(BANNER)}[/bold cyan]\n[blue]{RULE}[/blue]"


def render_rows(state: AppState, pager: Pager) -> list[str]:
    """Render one block per wallet on the current page."""
    lines: list[str] = []
    start, end = pager.page_bounds()
    for index in range(start, end):
        wallet = state.wallets[index]
        status = state.status(wallet)
        prefix = "[cyan]→[/cyan] " if index == pager.selected else "  "
        color = state_color(status.state)
        lines.append(f"{prefix}Wallet: [bold]{escape(short_address(wallet))}[/bold]")
        lines.append(f"   Status: [{color}]{status.state.label}[/{color}]")
        lines.append(f"   Points: [cyan]{fmt_num(status.points)}[/cyan]")
        lines.append(f"   Last heartbeat: [cyan]{status.last_ping or EMPTY_MARKER}[/cyan]")
        if status.error:
            lines.append(f"   Error: [red]{escape(status.error)}[/red]")
        lines.append("")
    return lines


def render_dashboard(state: AppState, pager: Pager, *, interval: float) -> str:
    """
    Build the full dashboard as Rich markup.

    Args:
        state: Wallet list and status table
        pager: Current page and selection
        interval: Heartbeat interval in seconds, shown in the footer

    Returns:
        Markup for the banner, the visible rows and the footer
    """
    lines = [render_banner(), ""]
    if not state.wallets:
        lines.append("[dim]No wallets loaded[/dim]")
    lines.extend(render_rows(state, pager))
    lines.append(f"[blue]Page {pager.page + 1}/{max(pager.page_count, 1)}[/blue]")
    lines.append("")
    lines.append("[bold]Configuration:[/bold]")
    lines.append(f"  Heartbeat interval: {fmt_num(interval)} seconds")
    lines.append("")
    lines.append("[bold]Controls:[/bold]")
    lines.append("  ↑/↓: Select | ←/→: Page | Enter: Check points | Ctrl+C: Quit")
    return "\n".join(lines)
