from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias


MouseButton = Literal["left", "right", "middle"]
TouchPhase = Literal["start", "move", "end", "cancel"]

PRIMARY_BUTTON: MouseButton = "left"


@dataclass(frozen=True)
class PointerSample:
    """One pointer input sample.

    Most platforms report a single change per sample, but motion, press and
    release may all be present; they are applied in that order.
    """

    cursor: tuple[float, float] | None = None
    press: MouseButton | None = None
    release: MouseButton | None = None

    @classmethod
    def moved(cls, x: float, y: float) -> PointerSample:
        return cls(cursor=(float(x), float(y)))

    @classmethod
    def pressed(cls, button: MouseButton = PRIMARY_BUTTON) -> PointerSample:
        return cls(press=button)

    @classmethod
    def released(cls, button: MouseButton = PRIMARY_BUTTON) -> PointerSample:
        return cls(release=button)


@dataclass(frozen=True)
class TouchSample:
    """Single-contact touch sample; `x`/`y` are normalized to the window (0..1)."""

    phase: TouchPhase
    x: float
    y: float


InputSample: TypeAlias = PointerSample | TouchSample
