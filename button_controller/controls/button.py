from __future__ import annotations

from dataclasses import dataclass
import logging
import time
from typing import Callable, Literal, Sequence

from button_controller.core.events import PRIMARY_BUTTON, InputSample, PointerSample, TouchSample
from button_controller.core.geometry import is_inside


LOGGER = logging.getLogger(__name__)

ButtonEvent = Literal["mouse_enter", "mouse_leave", "press", "click", "cancel"]
ButtonState = Literal["inactive", "hover", "press", "cancel"]


@dataclass(frozen=True)
class ButtonVisual:
    """Inputs of the visual state; `state()` is total over both flags."""

    appear_pressed: bool
    cursor_inside: bool

    def state(self) -> ButtonState:
        if self.appear_pressed:
            return "press" if self.cursor_inside else "cancel"
        return "hover" if self.cursor_inside else "inactive"


class ButtonController:
    """Tracks hover/press state of one rectangular button.

    Every intake call clears the pending event queue before processing, so
    `events` (and the call's return value) hold exactly the events that call
    produced. Hosts that batch several samples before reading must call
    `drain_events()` between samples.
    """

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock or time.monotonic
        self._cursor_inside = False
        self._was_inside = False
        self._pressed = False
        self._pressed_at: float | None = None
        self._events: list[ButtonEvent] = []

    @property
    def cursor_inside(self) -> bool:
        return self._cursor_inside

    @property
    def was_inside(self) -> bool:
        return self._was_inside

    @property
    def pressed(self) -> bool:
        return self._pressed

    @property
    def pressed_at(self) -> float | None:
        return self._pressed_at

    @property
    def events(self) -> tuple[ButtonEvent, ...]:
        return tuple(self._events)

    def drain_events(self) -> list[ButtonEvent]:
        out = self._events
        self._events = []
        return out

    def reset(self) -> None:
        self._cursor_inside = False
        self._was_inside = False
        self._pressed = False
        self._pressed_at = None
        self._events = []

    def handle_event(
        self,
        rect: Sequence[float],
        transform: object,
        sample: InputSample,
        window_size: tuple[int, int] | None = None,
    ) -> tuple[ButtonEvent, ...]:
        if isinstance(sample, PointerSample):
            return self.handle_pointer_event(rect, transform, sample)
        if isinstance(sample, TouchSample):
            if window_size is None:
                raise ValueError("window_size is required for touch samples")
            return self.handle_touch_event(rect, transform, window_size, sample)
        raise TypeError(f"unsupported input sample: {type(sample).__name__}")

    def handle_pointer_event(
        self,
        rect: Sequence[float],
        transform: object,
        sample: PointerSample,
    ) -> tuple[ButtonEvent, ...]:
        self._events.clear()
        if sample.cursor is not None:
            self._set_cursor_inside(is_inside(sample.cursor, transform, rect))

        if sample.press is not None:
            if sample.press != PRIMARY_BUTTON:
                LOGGER.debug("ignoring press of non-primary button %s", sample.press)
            elif self._cursor_inside:
                self._begin_press()

        if sample.release is not None:
            if sample.release != PRIMARY_BUTTON:
                LOGGER.debug("ignoring release of non-primary button %s", sample.release)
            else:
                self._end_press()
        return tuple(self._events)

    def handle_touch_event(
        self,
        rect: Sequence[float],
        transform: object,
        window_size: tuple[int, int],
        sample: TouchSample,
    ) -> tuple[ButtonEvent, ...]:
        self._events.clear()
        if sample.phase == "cancel":
            return ()
        width, height = window_size
        pos = (sample.x * float(width), sample.y * float(height))
        inside = is_inside(pos, transform, rect)

        if sample.phase == "start":
            # A touch that starts inside enters and presses in one step.
            if inside:
                self._cursor_inside = True
                self._begin_press()
        elif sample.phase == "move":
            self._set_cursor_inside(inside)
        elif sample.phase == "end":
            self._end_press()
            self._cursor_inside = False
        return tuple(self._events)

    def appear_pressed(self, grace_period_s: float) -> bool:
        """Whether the button should look pressed, holding the look for `grace_period_s` after a press."""

        if grace_period_s < 0:
            raise ValueError("grace_period_s must be >= 0")
        if self._pressed_at is not None and self._clock() - self._pressed_at < grace_period_s:
            return True
        return self._pressed

    def visual(self, grace_period_s: float) -> ButtonVisual:
        return ButtonVisual(
            appear_pressed=self.appear_pressed(grace_period_s),
            cursor_inside=self._cursor_inside,
        )

    def state(self, grace_period_s: float) -> ButtonState:
        return self.visual(grace_period_s).state()

    def _set_cursor_inside(self, inside: bool) -> None:
        if inside == self._cursor_inside:
            return
        self._cursor_inside = inside
        self._push("mouse_enter" if inside else "mouse_leave")

    def _begin_press(self) -> None:
        self._pressed = True
        self._was_inside = True
        self._pressed_at = self._clock()
        self._push("press")

    def _end_press(self) -> None:
        self._pressed = False
        if self._cursor_inside:
            self._push("click")
        elif self._was_inside:
            self._push("cancel")
        self._was_inside = False

    def _push(self, event: ButtonEvent) -> None:
        LOGGER.debug("button event %s", event)
        self._events.append(event)
