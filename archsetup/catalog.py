"""
Package catalog.

The selectable names for each category and the package → systemd unit
table, loaded once from the bundled data/catalog.toml. User config can
append names per category and override unit entries; nothing is validated.
"""

from dataclasses import dataclass, field
from importlib.resources import files
from pathlib import Path
from typing import Mapping, Optional

from archsetup.models import CATEGORIES


_BUNDLED_CATALOG = "catalog.toml"


@dataclass(frozen=True)
class Catalog:
    entries: dict[str, tuple[str, ...]]
    # package name → unit name, or None when the package ships no service
    service_units: dict[str, Optional[str]] = field(default_factory=dict)

    def items(self, category: str) -> tuple[str, ...]:
        """Ordered names for one category. Unknown category → KeyError."""
        if category not in CATEGORIES:
            raise KeyError(category)
        return self.entries.get(category, ())


def load_catalog(
    path: Path | None = None,
    extra: Mapping[str, list[str]] | None = None,
    services: Mapping[str, Optional[str]] | None = None,
) -> Catalog:
    """
    Build the Catalog from the bundled TOML (or *path*).

    *extra* appends names per category after the bundled ones, skipping
    names already listed. *services* entries replace bundled unit entries.
    """
    data = _read_toml(path)

    raw_catalog = data.get("catalog", {})
    entries: dict[str, tuple[str, ...]] = {}
    for category in CATEGORIES:
        names = [str(n) for n in raw_catalog.get(category, [])]
        for name in (extra or {}).get(category, []):
            if name not in names:
                names.append(name)
        entries[category] = tuple(names)

    units: dict[str, Optional[str]] = {
        str(name): (unit if isinstance(unit, str) and unit else None)
        for name, unit in data.get("services", {}).items()
    }
    units.update(services or {})

    return Catalog(entries=entries, service_units=units)


def _read_toml(path: Path | None) -> dict:
    try:
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore[no-redef]

    if path is None:
        text = (files("archsetup") / "data" / _BUNDLED_CATALOG).read_text(encoding="utf-8")
    else:
        text = path.read_text(encoding="utf-8")
    return tomllib.loads(text)
