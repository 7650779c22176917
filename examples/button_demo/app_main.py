from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
import time
from typing import Callable

import torch

from button_controller import (
    ButtonConfig,
    ButtonController,
    ButtonEvent,
    ButtonState,
    identity,
    load_button_config,
    parse_hdi_pointer_event,
    parse_hex_rgba,
    style_for_state,
)


APP_DIR = Path(__file__).resolve().parent
CONFIG_TOML = APP_DIR / "button.toml"
WINDOW_SIZE = (300, 300)
CLICK_ME_LAYOUT = (10.0, 60.0, 280.0, 180.0)
BACKGROUND = (255, 255, 255, 255)

# Scripted HDI input: hover in, press, drag out, release outside.
SCRIPT: list[tuple[str, dict[str, object]]] = [
    ("pointer_move", {"x": 50.0, "y": 100.0}),
    ("click", {"button": 0, "phase": "down"}),
    ("pointer_move", {"x": 500.0, "y": 500.0}),
    ("click", {"button": 0, "phase": "up"}),
]


@dataclass(frozen=True)
class DemoStep:
    event_type: str
    events: tuple[ButtonEvent, ...]
    state: ButtonState


def render_button(button: ButtonController, config: ButtonConfig) -> torch.Tensor:
    """Paint the button rectangle into an RGBA frame coloured by its visual state."""

    width, height = WINDOW_SIZE
    frame = torch.tensor(BACKGROUND, dtype=torch.uint8).view(1, 1, 4).expand(height, width, 4).clone()
    color = parse_hex_rgba(style_for_state(button.state(config.grace_period_s), config.theme))
    x, y, w, h = (int(v) for v in CLICK_ME_LAYOUT)
    frame[y : y + h, x : x + w] = torch.tensor(color, dtype=torch.uint8)
    return frame


def run_demo(
    button: ButtonController,
    config: ButtonConfig,
    on_event: Callable[[ButtonEvent], None] | None = None,
) -> list[DemoStep]:
    transform = identity()
    steps: list[DemoStep] = []
    for event_type, payload in SCRIPT:
        sample = parse_hdi_pointer_event(event_type, payload)
        if sample is None:
            continue
        button.handle_pointer_event(CLICK_ME_LAYOUT, transform, sample)
        events = tuple(button.drain_events())
        if on_event is not None:
            for event in events:
                on_event(event)
        steps.append(DemoStep(event_type=event_type, events=events, state=button.state(config.grace_period_s)))
    return steps


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    config = load_button_config(CONFIG_TOML)
    button = ButtonController()
    steps = run_demo(button, config, on_event=print)
    print(f"[button-demo] state after release: {steps[-1].state}")
    time.sleep(config.grace_period_s)
    frame = render_button(button, config)
    print(
        "[button-demo]",
        f"state={button.state(config.grace_period_s)}",
        f"frame={tuple(frame.shape)}",
        f"button_pixel={frame[100, 100].tolist()}",
    )


if __name__ == "__main__":
    main()
