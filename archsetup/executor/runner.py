"""
Plan runner.

Strictly sequential: each step blocks until done, and the first failure
propagates to the caller untouched. Nothing is rolled back; re-running
archsetup is the recovery path.

--dry-run walks the same plan and prints each step without running it.
"""

from __future__ import annotations

from typing import Callable, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from archsetup.executor.commands import Command, Download, download_file, run_command
from archsetup.executor.plan import Step
from archsetup.ui.theme import COLOR_BRAND, COLOR_DIM, COLOR_SUCCESS, COLOR_TEXT, ICON_SUCCESS


# ── Public API ────────────────────────────────────────────────────────────────

def run_plan(
    steps: Sequence[Step],
    console: Console,
    title: str,
    dry_run: bool = False,
) -> None:
    """
    Run *steps* in order.

    Args:
        steps:   Plan from build_bootstrap_plan / build_install_plan.
        console: Rich Console (shared with rest of tool).
        title:   Phase name shown in the header and summary panels.
        dry_run: If True, print every step instead of running it.

    Raises the first SetupError any step raises.
    """
    _print_phase_panel(console, title, len(steps), dry_run=dry_run)

    total = len(steps)
    for idx, step in enumerate(steps, 1):
        console.print(f"  [dim][{idx}/{total}][/dim]")
        if dry_run:
            console.print(f"  [dim]would run[/dim]  [command]{escape(str(step))}[/command]")
            if isinstance(step, Command) and step.cwd is not None:
                console.print(f"  [dim]   in {step.cwd}[/dim]")
            continue
        _dispatch(step, console)
        console.print()

    _print_phase_summary(console, title, total, dry_run=dry_run)


# ── Execution helpers ─────────────────────────────────────────────────────────

def _dispatch(step: Step, console: Console) -> None:
    """Route to the correct executor."""
    dispatch_map: dict[type, Callable] = {
        Command:  run_command,
        Download: download_file,
    }
    fn = dispatch_map.get(type(step))
    if fn is None:
        raise TypeError(f"no executor for step {step!r}")
    fn(step, console)


# ── UI helpers ────────────────────────────────────────────────────────────────

def _print_phase_panel(console: Console, title: str, total: int, dry_run: bool = False) -> None:
    body = Text()
    s = "s" if total != 1 else ""
    body.append(f"\n  {total} step{s}, run one at a time.", style=COLOR_TEXT)
    body.append("\n  The first failure stops the whole setup.\n", style=COLOR_DIM)
    if dry_run:
        body.append("  [DRY RUN] No changes will be made.\n", style="warning")

    console.print()
    console.print(
        Panel(body, title=f"[bold]{title}[/bold]", title_align="left",
              border_style=COLOR_BRAND)
    )
    console.print()


def _print_phase_summary(console: Console, title: str, total: int, dry_run: bool = False) -> None:
    body = Text()
    s = "s" if total != 1 else ""
    if dry_run:
        body.append(f"\n  {total} step{s} would be run.\n", style=COLOR_DIM)
        border = "dim"
    else:
        body.append(f"\n  {ICON_SUCCESS}  {total} step{s} completed.\n", style="success")
        border = COLOR_SUCCESS

    console.print()
    console.print(
        Panel(body, title=f"[bold]{title} complete[/bold]", title_align="left",
              border_style=border)
    )
    console.print()
