"""
Plan builders — turn an Installer record into an ordered list of steps.

Pure functions: nothing here runs a process or touches the network, so
the whole setup script can be inspected (or printed with --dry-run)
before anything happens.

Install plan order:
  upgrade → install selections → git identity → drop paru → drop rustup
  → enable services → Oh My Fish → chsh → Bedrock → tldr cache
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Optional, Union

from archsetup.executor.commands import Command, Download
from archsetup.models import CATEGORIES, Installer


Step = Union[Command, Download]


# ── Constants ─────────────────────────────────────────────────────────────────

PARU_REPO = "https://aur.archlinux.org/paru-bin"
PARU_PACKAGE = "paru-bin"

OMF_URL = "https://raw.githubusercontent.com/oh-my-fish/oh-my-fish/master/bin/install"
OMF_SCRIPT = "install"

BEDROCK_VERSION = "0.7.27"
BEDROCK_SCRIPT = f"bedrock-linux-{BEDROCK_VERSION}-x86_64.sh"
BEDROCK_URL = (
    "https://github.com/bedrocklinux/bedrocklinux-userland/releases/download/"
    f"{BEDROCK_VERSION}/{BEDROCK_SCRIPT}"
)

FISH_PATH = "/usr/bin/fish"


# ── Bootstrap ─────────────────────────────────────────────────────────────────

def build_bootstrap_plan(build_dir: Path) -> list[Step]:
    """Rust toolchain + paru, built from the AUR inside *build_dir*."""
    clone_dir = build_dir / PARU_PACKAGE
    return [
        Command.parse("sudo pacman -S rustup --noconfirm"),
        Command.parse("rustup install stable"),
        Command.parse("rustup default stable"),
        # a clone left by an earlier failed makepkg would block git clone
        Command(("rm", "-rf", str(clone_dir))),
        Command(("git", "clone", PARU_REPO, str(clone_dir))),
        Command.parse("makepkg -si", cwd=clone_dir),
        Command(("rm", "-rf", str(clone_dir))),
    ]


# ── Install script ────────────────────────────────────────────────────────────

def build_install_plan(
    installer: Installer,
    service_units: Mapping[str, Optional[str]],
    work_dir: Path | None = None,
) -> list[Step]:
    """
    Return the ordered install steps for *installer*.

    *service_units* maps package name → unit (None: no service), usually
    Catalog.service_units. *work_dir* is where downloaded installer
    scripts are written (default: current directory).
    """
    work_dir = work_dir or Path.cwd()
    packages = installer.packages
    settings = installer.settings

    steps: list[Step] = [Command.parse("paru -Syu")]

    for category in CATEGORIES:
        for name in packages.for_category(category):
            steps.append(Command(("paru", "-S", name, "--noconfirm")))

    if settings.set_git_config and installer.git_identity is not None:
        identity = installer.git_identity
        steps.append(Command(("git", "config", "--global", "user.name", identity.name)))
        steps.append(Command(("git", "config", "--global", "user.email", identity.email)))

    if not settings.install_paru:
        steps.append(Command(("sudo", "pacman", "-Rns", PARU_PACKAGE, "--noconfirm")))

    if not packages.contains("rustup"):
        steps.append(Command.parse("sudo pacman -Rns rustup --noconfirm"))

    if settings.enable_services:
        for name in packages.service:
            unit = service_unit(name, service_units)
            if unit is not None:
                steps.append(Command(("sudo", "systemctl", "enable", "--now", unit)))

    if settings.install_omf:
        steps.extend(_run_downloaded_script(OMF_URL, work_dir / OMF_SCRIPT, ("fish",)))

    if settings.change_shell:
        steps.append(Command(("chsh", "-s", FISH_PATH)))

    if settings.install_bedrock:
        steps.extend(_run_downloaded_script(
            BEDROCK_URL, work_dir / BEDROCK_SCRIPT, ("sudo", "sh"), ("--hijack",),
        ))

    if packages.contains("tealdeer"):
        steps.append(Command.parse("tldr --update"))

    return steps


def service_unit(name: str, units: Mapping[str, Optional[str]]) -> Optional[str]:
    """Unit to enable for package *name*; None when it has no service."""
    if name in units:
        return units[name] or None
    return name


def _run_downloaded_script(
    url: str,
    script: Path,
    interpreter: tuple[str, ...],
    args: tuple[str, ...] = (),
) -> list[Step]:
    """Fetch, execute, then delete a third-party installer script."""
    return [
        Download(url=url, dest=script),
        Command((*interpreter, str(script), *args)),
        Command(("rm", str(script))),
    ]
