"""Hover/press/click tracking for a single rectangular button."""

from .config import DEFAULT_GRACE_PERIOD_S, ButtonConfig, load_button_config
from .controls.button import ButtonController, ButtonEvent, ButtonState, ButtonVisual
from .controls.interaction import parse_hdi_pointer_event, parse_hdi_touch_event
from .core.events import PRIMARY_BUTTON, InputSample, MouseButton, PointerSample, TouchPhase, TouchSample
from .core.geometry import (
    Matrix2d,
    Rectangle,
    SingularTransformError,
    identity,
    invert,
    is_inside,
    transform_pos,
)
from .style.theme import DEFAULT_TOKENS, ThemeTokens, parse_hex_rgba, style_for_state, validate_theme_tokens

__all__ = [
    "ButtonConfig",
    "ButtonController",
    "ButtonEvent",
    "ButtonState",
    "ButtonVisual",
    "DEFAULT_GRACE_PERIOD_S",
    "DEFAULT_TOKENS",
    "InputSample",
    "Matrix2d",
    "MouseButton",
    "PRIMARY_BUTTON",
    "PointerSample",
    "Rectangle",
    "SingularTransformError",
    "ThemeTokens",
    "TouchPhase",
    "TouchSample",
    "identity",
    "invert",
    "is_inside",
    "load_button_config",
    "parse_hdi_pointer_event",
    "parse_hdi_touch_event",
    "parse_hex_rgba",
    "style_for_state",
    "transform_pos",
    "validate_theme_tokens",
]
