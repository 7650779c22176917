from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
import tomllib

from button_controller.style.theme import ThemeTokens, validate_theme_tokens


LOGGER = logging.getLogger(__name__)

DEFAULT_GRACE_PERIOD_S = 0.2


@dataclass(frozen=True)
class ButtonConfig:
    """Host defaults; the grace period is still passed to each visual-state query."""

    grace_period_s: float = DEFAULT_GRACE_PERIOD_S
    theme: ThemeTokens = field(default_factory=ThemeTokens)

    def __post_init__(self) -> None:
        if self.grace_period_s < 0:
            raise ValueError("grace_period_s must be >= 0")


def load_button_config(path: str | Path) -> ButtonConfig:
    """Load `[button]` and optional `[theme]` tables from a TOML file."""

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"button config not found: {config_path}")
    with config_path.open("rb") as f:
        raw = tomllib.load(f)

    button = raw.get("button", {})
    if not isinstance(button, dict):
        raise ValueError("`button` must be a table")
    grace = button.get("grace_period_s", DEFAULT_GRACE_PERIOD_S)
    if isinstance(grace, bool) or not isinstance(grace, (int, float)):
        raise ValueError("`button.grace_period_s` must be a number")

    theme_raw = raw.get("theme", {})
    if not isinstance(theme_raw, dict):
        raise ValueError("`theme` must be a table")
    config = ButtonConfig(grace_period_s=float(grace), theme=validate_theme_tokens(theme_raw))
    LOGGER.info("loaded button config from %s (grace_period_s=%s)", config_path, config.grace_period_s)
    return config
