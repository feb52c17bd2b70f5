"""
Step types and their executors.

Command  — one external program invocation, optional working directory.
Download — one HTTP GET to a local file.

Each executor:
  - Receives a step and a Rich Console
  - Echoes what it is about to do
  - Blocks until done
  - Raises a SetupError subclass on failure (never returns a status)
"""

from __future__ import annotations

import shlex
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import requests
from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    DownloadColumn,
    Progress,
    TextColumn,
    TimeRemainingColumn,
)

from archsetup.errors import CommandFailedError, CommandSpawnError, DownloadError


_DOWNLOAD_TIMEOUT = 60
_CHUNK_SIZE = 8192


# ── Step types ────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Command:
    argv: tuple[str, ...]
    cwd: Optional[Path] = None

    @classmethod
    def parse(cls, text: str, cwd: Optional[Path] = None) -> "Command":
        """Split *text* on whitespace into program + arguments."""
        argv = tuple(text.split())
        if not argv:
            raise ValueError("empty command")
        return cls(argv=argv, cwd=cwd)

    def __str__(self) -> str:
        return shlex.join(self.argv)


@dataclass(frozen=True)
class Download:
    url: str
    dest: Path

    def __str__(self) -> str:
        return f"GET {self.url} → {self.dest}"


# ── COMMAND: inherit the terminal, block until exit ─────────────────────────

def run_command(command: Command, console: Console) -> None:
    """
    Run *command* attached to the terminal.

    stdio is inherited so sudo, makepkg and paru can ask their own
    questions. The working directory is passed to the child only.
    """
    console.print(f"  [dim]$[/dim]  [command]{escape(str(command))}[/command]")
    if command.cwd is not None:
        console.print(f"  [dim]   in {command.cwd}[/dim]")

    try:
        proc = subprocess.run(list(command.argv), cwd=command.cwd, check=False)
    except OSError as e:
        # FileNotFoundError, PermissionError, or a missing cwd
        raise CommandSpawnError(str(command), e.strerror or str(e)) from e

    if proc.returncode != 0:
        raise CommandFailedError(str(command), proc.returncode)


# ── DOWNLOAD: stream to disk with a progress bar ────────────────────────────

def download_file(download: Download, console: Console) -> None:
    """
    Fetch download.url into download.dest, following redirects.

    A partial file is removed before the error propagates.
    """
    console.print(f"  [dim]↓[/dim]  [command]{escape(download.url)}[/command]")

    dest = download.dest
    try:
        with requests.get(
            download.url, stream=True, allow_redirects=True, timeout=_DOWNLOAD_TIMEOUT,
        ) as response:
            response.raise_for_status()
            total = int(response.headers.get("content-length", 0)) or None
            with (
                open(dest, "wb") as fh,
                Progress(
                    TextColumn("  [progress.description]{task.description}"),
                    BarColumn(),
                    DownloadColumn(),
                    TimeRemainingColumn(),
                    console=console,
                    transient=True,
                ) as progress,
            ):
                task = progress.add_task(dest.name, total=total)
                for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
                    if chunk:
                        fh.write(chunk)
                        progress.update(task, advance=len(chunk))
    except (requests.RequestException, OSError, ValueError) as e:
        # ValueError: malformed Content-Length header
        dest.unlink(missing_ok=True)
        raise DownloadError(download.url, str(e)) from e

    console.print(f"  [dim]   saved to {dest}[/dim]")
