from __future__ import annotations

from dataclasses import asdict, dataclass
import re
from typing import Any, Mapping

from button_controller.controls.button import ButtonState

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")


@dataclass(frozen=True)
class ThemeTokens:
    """Background colour per visual button state."""

    button_bg_inactive: str = "#999999"
    button_bg_hover: str = "#666666"
    button_bg_press: str = "#1A1A1A"
    button_bg_cancel: str = "#4D3333"


DEFAULT_TOKENS = ThemeTokens()


def validate_theme_tokens(overrides: Mapping[str, Any] | None = None) -> ThemeTokens:
    """Validate and merge user token overrides against the defaults."""

    raw: dict[str, Any] = asdict(DEFAULT_TOKENS)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown theme token: {key}")
            raw[key] = value

    for key, value in raw.items():
        if not isinstance(value, str) or not _HEX_COLOR.match(value):
            raise ValueError(f"Token `{key}` must be a hex color (#RRGGBB or #RRGGBBAA)")

    return ThemeTokens(**raw)


def style_for_state(state: ButtonState, tokens: ThemeTokens = DEFAULT_TOKENS) -> str:
    if state == "inactive":
        return tokens.button_bg_inactive
    if state == "hover":
        return tokens.button_bg_hover
    if state == "press":
        return tokens.button_bg_press
    if state == "cancel":
        return tokens.button_bg_cancel
    raise ValueError(f"unknown button state: {state}")


def parse_hex_rgba(value: str) -> tuple[int, int, int, int]:
    raw = value.strip()
    if not _HEX_COLOR.match(raw):
        raise ValueError(f"invalid color: {value}")
    h = raw[1:]
    r = int(h[0:2], 16)
    g = int(h[2:4], 16)
    b = int(h[4:6], 16)
    a = int(h[6:8], 16) if len(h) == 8 else 255
    return (r, g, b, a)
