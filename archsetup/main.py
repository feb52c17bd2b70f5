"""
archsetup — entry point and orchestrator.

Bootstrap (rustup + paru), header, prompts, install script.
Every fatal error lands in the single handler in cli().
"""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from archsetup import __version__
from archsetup.errors import SetupError
from archsetup.ui.theme import ARCHSETUP_THEME, COLOR_DIM, COLOR_ERROR, ICON_ERROR


# ── Console (shared across the tool) ─────────────────────────────────────────

console = Console(theme=ARCHSETUP_THEME)


# ── CLI ───────────────────────────────────────────────────────────────────────

@click.command(name="archsetup", context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", prog_name="archsetup")
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Ask every question, then print the commands instead of running them.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: ~/.config/archsetup/config.toml).",
)
def cli(dry_run: bool, config_path: Optional[Path]) -> None:
    """Post-archinstall setup for x86_64 Arch Linux.

    Installs paru, asks which packages, services, fonts, languages and
    utilities you want, then installs and configures them in one pass.
    The first failing command stops everything; re-run to continue.
    """
    try:
        _run(dry_run=dry_run, config_path=config_path)
    except SetupError as e:
        _print_fatal(console, e)
        raise SystemExit(1)
    except KeyboardInterrupt:
        console.print("\n  [dim]Cancelled.[/dim]\n")
        raise SystemExit(130)


def _run(dry_run: bool, config_path: Optional[Path]) -> None:
    from archsetup.catalog import load_catalog
    from archsetup.config import load_config
    from archsetup.executor.plan import build_bootstrap_plan, build_install_plan
    from archsetup.executor.runner import run_plan
    from archsetup.prompter import Prompter
    from archsetup.ui.header import print_header
    from archsetup.wizard import collect_installer

    config = load_config(config_path)
    build_dir: Path = config["build_dir"]

    # ── Non-interactive bootstrap ─────────────────────────────────────────────
    run_plan(build_bootstrap_plan(build_dir), console, title="Bootstrap", dry_run=dry_run)

    # ── Prompts ───────────────────────────────────────────────────────────────
    print_header(console, dry_run=dry_run)
    console.print()

    catalog = load_catalog(extra=config["catalog"], services=config["services"])
    installer = collect_installer(catalog, Prompter(console))

    # ── Install script ────────────────────────────────────────────────────────
    steps = build_install_plan(installer, catalog.service_units, work_dir=build_dir)
    run_plan(steps, console, title="Install", dry_run=dry_run)


# ── Error reporting ───────────────────────────────────────────────────────────

def _print_fatal(console: Console, error: SetupError) -> None:
    """Print a red panel naming what failed."""
    body = Text()
    body.append(f"\n  {ICON_ERROR}  {error}\n", style="error")
    body.append(
        "\n  Nothing was rolled back. Fix the problem and run archsetup again.\n",
        style=COLOR_DIM,
    )
    console.print()
    console.print(
        Panel(body, title=f"[error]{escape(type(error).__name__)}[/error]",
              title_align="left", border_style=COLOR_ERROR)
    )
    console.print()


# ── Entry ─────────────────────────────────────────────────────────────────────

if __name__ == "__main__":
    cli()
