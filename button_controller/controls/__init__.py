"""Button state machine and input adapters."""

from .button import ButtonController, ButtonEvent, ButtonState, ButtonVisual
from .interaction import parse_hdi_pointer_event, parse_hdi_touch_event

__all__ = [
    "ButtonController",
    "ButtonEvent",
    "ButtonState",
    "ButtonVisual",
    "parse_hdi_pointer_event",
    "parse_hdi_touch_event",
]
