"""
archsetup visual design system.

All colors, styles, and icons as named constants.
Import from here — never hardcode markup strings in other modules.

One 24-bit palette tuned for dark terminal backgrounds (the archinstall
default console and most desktop terminals).
"""

from rich.theme import Theme


# ── Brand ─────────────────────────────────────────────────────────────────────

from archsetup import __version__

APP_NAME = "archsetup"
APP_TAGLINE = "Zolee's Post x86_64 Archinstall Setup Program"
APP_VERSION = __version__


# ── Color palette ─────────────────────────────────────────────────────────────

COLOR_ERROR    = "#E05252"      # Warm severity red
COLOR_WARNING  = "#D4870A"      # Amber
COLOR_SUCCESS  = "#4DBD74"      # Calm sage-green
COLOR_BRAND    = "#1793D1"      # Arch blue
COLOR_DIM      = "#787878"      # Medium gray
COLOR_COMMAND  = "#C0C0C0"      # Light silver, for echoed commands
COLOR_TEXT     = "#F0F0F0"      # Primary text, near-white


# ── Icons ─────────────────────────────────────────────────────────────────────

ICON_SUCCESS = "✅"
ICON_ERROR   = "❌"


# ── Rich Theme ────────────────────────────────────────────────────────────────

ARCHSETUP_THEME = Theme(
    {
        "error":    f"{COLOR_ERROR} bold",
        "warning":  f"{COLOR_WARNING} bold",
        "success":  f"{COLOR_SUCCESS} bold",
        "brand":    f"{COLOR_BRAND} bold",
        "dim":      COLOR_DIM,
        "command":  COLOR_COMMAND,
    }
)
