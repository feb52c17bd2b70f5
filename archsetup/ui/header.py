"""
archsetup header banner.

Two-column panel:
  Left  — program name, version, user and host
  Right — what the wizard is about to ask, in prompt order
"""

import getpass
import socket
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from archsetup.models import CATEGORIES
from archsetup.ui.theme import APP_NAME, APP_TAGLINE, APP_VERSION, ARCHSETUP_THEME, COLOR_BRAND


def build_header(dry_run: bool = False) -> Panel:
    """Return the header Panel shown before the first prompt."""
    table = Table(box=None, show_header=False, padding=(0, 2), expand=True)
    table.add_column(width=30, justify="center")
    table.add_column(justify="left")

    table.add_row(_build_left(), _build_right(dry_run))

    return Panel(table, title=f"[bold]{APP_TAGLINE}[/bold]", title_align="left",
                 border_style=COLOR_BRAND)


def _build_left() -> Text:
    t = Text(justify="center")
    t.append("\n")
    t.append(APP_NAME, style="brand")
    t.append(f"  v{APP_VERSION}", style="dim")
    t.append("\n\n")
    _append_logo(t)
    t.append("\n")
    t.append(f"{_username()}@{socket.gethostname()}", style="dim")
    t.append("\n")
    return t


def _username() -> str:
    # getuser() raises when no login name or passwd entry exists (containers, chroots)
    try:
        return getpass.getuser()
    except (OSError, KeyError):
        return "user"


def _append_logo(t: Text) -> None:
    """Append the Arch triangle in brand color."""
    for line in (
        "      ▲",
        "     ▲▲▲",
        "    ▲▲ ▲▲",
        "   ▲▲   ▲▲",
        "  ▲▲▲   ▲▲▲",
    ):
        t.append(line + "\n", style=COLOR_BRAND)


def _build_right(dry_run: bool) -> Text:
    t = Text(justify="left")
    t.append("\n")
    t.append("  You will be asked\n", style="brand")
    t.append("\n")

    for category in CATEGORIES:
        t.append("  • ", style="dim white")
        t.append(category.replace("_", " "), style="bold white")
        t.append("  pick any number\n", style="dim white")
    t.append("  • ", style="dim white")
    t.append("settings", style="bold white")
    t.append("  yes / no\n", style="dim white")

    t.append("\n")
    t.append("  ↑↓ move  ·  space select  ·  ↵ accept  ·  esc cancel\n", style="dim white")

    if dry_run:
        t.append("\n")
        t.append("  [DRY RUN] No commands will be run.\n", style="warning")

    return t


def print_header(console: Optional[Console] = None, dry_run: bool = False) -> None:
    """Render the header to the given Console (or create a themed one)."""
    if console is None:
        console = Console(theme=ARCHSETUP_THEME)
    console.print(build_header(dry_run=dry_run))
