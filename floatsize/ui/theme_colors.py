"""
Overlay display roles and their theme colours.

Each piece of the overlay (cursor row, selection marker, the size being
typed, key hints) has a role. A role is backed by one field of the active
Textual theme, so a host palette restyles the whole overlay at once.
"""

from typing import NamedTuple, Optional

from textual.app import App


class Role(NamedTuple):
    theme_field: str
    # Used before the app has a theme, and by the CLI
    plain: str
    bold: bool = False
    dim: bool = False


ROLES: dict[str, Role] = {
    "header": Role("primary", "cyan", bold=True),
    "cursor": Role("primary", "cyan", bold=True),
    "marker": Role("accent", "magenta"),
    "pane_label": Role("accent", "magenta", bold=True),
    "pending_size": Role("success", "green"),
    "hint": Role("foreground", "white", dim=True),
}


def role_color(app: Optional[App], role: str) -> str:
    """Colour for ``role`` in the app's current theme."""
    entry = ROLES[role]
    theme = app.get_theme(app.theme) if app is not None else None
    colour = getattr(theme, entry.theme_field, None) if theme is not None else None
    return colour or entry.plain


def role_style(app: Optional[App], role: str) -> str:
    """Rich style string for ``role``, including bold/dim."""
    entry = ROLES[role]
    parts = ["bold"] if entry.bold else []
    if entry.dim:
        parts.append("dim")
    parts.append(role_color(app, role))
    return " ".join(parts)


def paint(app: Optional[App], role: str, text: str) -> str:
    """Wrap already-escaped ``text`` in markup for ``role``."""
    return f"[{role_style(app, role)}]{text}[/]"
