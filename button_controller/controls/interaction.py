from __future__ import annotations

from typing import Mapping

from button_controller.core.events import MouseButton, PointerSample, TouchSample


_MOVE_EVENT_TYPES = {"pointer_move", "mouse_move", "trackpad_move"}
_BUTTON_INDEX: dict[int, MouseButton] = {0: "left", 1: "right", 2: "middle"}
_TOUCH_PHASES = {"start", "move", "end", "cancel"}


def parse_hdi_pointer_event(event_type: str, payload: object) -> PointerSample | None:
    """Parse a normalized HDI pointer event into a `PointerSample`.

    `click` events carry the pointer position along with the button phase, so
    the returned sample may hold both a cursor update and a press/release.
    """

    if not isinstance(payload, Mapping):
        return None
    cursor = _read_position(payload)
    if event_type in _MOVE_EVENT_TYPES:
        if cursor is None:
            return None
        return PointerSample(cursor=cursor)
    if event_type != "click":
        return None
    try:
        button = _BUTTON_INDEX.get(int(payload.get("button", 0)))
    except (TypeError, ValueError):
        return None
    if button is None:
        return None
    phase = payload.get("phase")
    if phase == "down":
        return PointerSample(cursor=cursor, press=button)
    if phase == "up":
        return PointerSample(cursor=cursor, release=button)
    return None


def parse_hdi_touch_event(event_type: str, payload: object) -> TouchSample | None:
    """Parse an HDI `touch` event; `x`/`y` are window-normalized and a `cancel` may omit them."""

    if event_type != "touch" or not isinstance(payload, Mapping):
        return None
    phase = payload.get("phase")
    if phase not in _TOUCH_PHASES:
        return None
    pos = _read_position(payload)
    if pos is None:
        # Hardware cancels may arrive without a position.
        if phase != "cancel":
            return None
        pos = (0.0, 0.0)
    return TouchSample(phase=phase, x=pos[0], y=pos[1])


def _read_position(payload: Mapping) -> tuple[float, float] | None:
    if "x" not in payload or "y" not in payload:
        return None
    try:
        return (float(payload["x"]), float(payload["y"]))
    except (TypeError, ValueError):
        return None
