"""
Config file loading for archsetup.

Reads ~/.config/archsetup/config.toml and returns structured config.
Never raises — always returns a valid dict with sensible defaults.
"""

from pathlib import Path

from archsetup.models import CATEGORIES

_CONFIG_PATH = Path.home() / ".config" / "archsetup" / "config.toml"


def load_config(path: Path | None = None) -> dict:
    """
    Load and return archsetup config from TOML file.

    Returns {"build_dir": Path, "catalog": dict[str, list[str]],
             "services": dict[str, str | None]} — always valid, never raises.
    Missing file or parse errors return all defaults; a bad shape for one
    key only resets that key.
    """
    config_path = path or _CONFIG_PATH
    config: dict = _defaults()

    if not config_path.is_file():
        return config

    try:
        raw = config_path.read_bytes()
    except OSError:
        return config

    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore[no-redef]
        except ModuleNotFoundError:
            return config

    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except Exception:
        return config

    build_dir = data.get("build_dir")
    if isinstance(build_dir, str) and build_dir:
        config["build_dir"] = Path(build_dir).expanduser()

    catalog = data.get("catalog")
    if isinstance(catalog, dict):
        config["catalog"] = {
            category: [str(name) for name in names]
            for category, names in catalog.items()
            if category in CATEGORIES and isinstance(names, list)
        }

    services = data.get("services")
    if isinstance(services, dict):
        config["services"] = {
            str(name): (unit if isinstance(unit, str) and unit else None)
            for name, unit in services.items()
            if isinstance(unit, str) or unit is False
        }

    return config


def _defaults() -> dict:
    return {"build_dir": Path.cwd(), "catalog": {}, "services": {}}
