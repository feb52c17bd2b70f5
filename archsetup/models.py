"""
Core data model for archsetup.

Packages  — the per-category selection sets.
Settings  — the yes/no answers that gate optional steps.
Installer — the record handed from the prompt phase to the executor.

All three are frozen: populated once by the wizard, read-only afterwards.
"""

from dataclasses import dataclass, field
from typing import Optional


# ── Categories ────────────────────────────────────────────────────────────────

# Prompt and install order.
CATEGORIES: tuple[str, ...] = (
    "software",
    "service",
    "font",
    "programming_language",
    "utility",
)


# ── Data model ────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Packages:
    software: tuple[str, ...] = ()
    service: tuple[str, ...] = ()
    font: tuple[str, ...] = ()
    programming_language: tuple[str, ...] = ()
    utility: tuple[str, ...] = ()

    def for_category(self, category: str) -> tuple[str, ...]:
        if category not in CATEGORIES:
            raise KeyError(category)
        return getattr(self, category)

    def all(self) -> tuple[str, ...]:
        """Every selected name, categories in CATEGORIES order."""
        names: list[str] = []
        for category in CATEGORIES:
            names.extend(self.for_category(category))
        return tuple(names)

    def contains(self, name: str) -> bool:
        return name in self.all()


@dataclass(frozen=True)
class Settings:
    install_paru: bool = False       # keep the AUR helper after setup
    install_bedrock: bool = False
    install_omf: bool = False        # Oh My Fish
    change_shell: bool = False       # chsh to fish
    enable_services: bool = False
    set_git_config: bool = False


@dataclass(frozen=True)
class GitIdentity:
    name: str
    email: str


@dataclass(frozen=True)
class Installer:
    packages: Packages = field(default_factory=Packages)
    settings: Settings = field(default_factory=Settings)
    git_identity: Optional[GitIdentity] = None
