"""
floatsize TUI theme definitions.

Two built-in Textual themes plus ``theme_from_palette``, which derives a
theme from the colour palette the workspace host sends with its snapshot.
"""

from typing import Any, Mapping

from textual.color import Color, ColorParseError
from textual.theme import Theme

HOST_THEME_NAME = "floatsize-host"

# =============================================================================
# floatsize Dark Theme (Default)
# =============================================================================

FLOATSIZE_DARK = Theme(
    name="floatsize-dark",
    primary="#0178D4",      # Blue - cursor row
    secondary="#004578",    # Darker blue
    accent="#ffa62b",       # Orange - selected pane
    foreground="#e0e0e0",
    background="#121212",
    surface="#1e1e1e",
    panel="#252526",
    boost="#2d2d2d",        # Input bar
    success="#4EBF71",      # Green - pending sizes
    warning="#ffa62b",
    error="#ba3c5b",
    dark=True,
)

# =============================================================================
# floatsize Light Theme
# =============================================================================

FLOATSIZE_LIGHT = Theme(
    name="floatsize-light",
    primary="#0969DA",
    secondary="#8250DF",
    accent="#BF3989",
    foreground="#1F2328",
    background="#FFFFFF",
    surface="#F6F8FA",
    panel="#F0F2F5",
    boost="#DFE3E8",
    success="#1A7F37",
    warning="#9A6700",
    error="#CF222E",
    dark=False,
)

FLOATSIZE_THEMES: dict[str, Theme] = {
    FLOATSIZE_DARK.name: FLOATSIZE_DARK,
    FLOATSIZE_LIGHT.name: FLOATSIZE_LIGHT,
}

# Host palette slot -> theme field. The first slot present wins.
_PALETTE_SLOTS: dict[str, tuple[str, ...]] = {
    "primary": ("blue", "cyan"),
    "secondary": ("magenta", "blue"),
    "accent": ("orange", "yellow"),
    "foreground": ("fg", "white"),
    "background": ("bg", "black"),
    "success": ("green",),
    "warning": ("yellow", "orange"),
    "error": ("red",),
}


def register_all_themes(app: Any) -> None:
    """
    Register the built-in floatsize themes with the app.

    Args:
        app: The Textual App instance
    """
    for theme in FLOATSIZE_THEMES.values():
        app.register_theme(theme)


def get_theme_names() -> list[str]:
    return list(FLOATSIZE_THEMES.keys())


def _parse(colour: str) -> Color | None:
    try:
        return Color.parse(colour)
    except ColorParseError:
        return None


def theme_from_palette(palette: Mapping[str, str], base: Theme = FLOATSIZE_DARK) -> Theme:
    """
    Derive a Textual theme from a host palette.

    Slots the palette lacks, or gives unparseable colours for, keep the
    values of ``base``.

    Args:
        palette: Host colours keyed by name ("fg", "bg", "green", ...)
        base: Theme supplying the defaults

    Returns:
        A theme named ``floatsize-host``
    """
    values: dict[str, Any] = {}
    for field_name, slots in _PALETTE_SLOTS.items():
        for slot in slots:
            colour = _parse(palette[slot]) if slot in palette else None
            if colour is not None:
                values[field_name] = colour.hex
                break
        else:
            values[field_name] = getattr(base, field_name)

    background = _parse(values["background"]) if values["background"] else None
    dark = background.brightness < 0.5 if background is not None else base.dark

    return Theme(
        name=HOST_THEME_NAME,
        surface=base.surface if dark == base.dark else None,
        panel=base.panel if dark == base.dark else None,
        boost=base.boost if dark == base.dark else None,
        dark=dark,
        **values,
    )
