from __future__ import annotations

from pathlib import Path
import tempfile
import unittest

from button_controller.config import DEFAULT_GRACE_PERIOD_S, ButtonConfig, load_button_config
from button_controller.style.theme import (
    DEFAULT_TOKENS,
    parse_hex_rgba,
    style_for_state,
    validate_theme_tokens,
)


class ThemeTests(unittest.TestCase):
    def test_style_per_state(self) -> None:
        self.assertEqual(style_for_state("inactive"), "#999999")
        self.assertEqual(style_for_state("hover"), "#666666")
        self.assertEqual(style_for_state("press"), "#1A1A1A")
        self.assertEqual(style_for_state("cancel"), "#4D3333")
        with self.assertRaises(ValueError):
            style_for_state("disabled")  # type: ignore[arg-type]

    def test_overrides_are_validated(self) -> None:
        tokens = validate_theme_tokens({"button_bg_hover": "#00FF0080"})
        self.assertEqual(tokens.button_bg_hover, "#00FF0080")
        self.assertEqual(tokens.button_bg_press, DEFAULT_TOKENS.button_bg_press)
        with self.assertRaises(ValueError):
            validate_theme_tokens({"button_bg_focus": "#000000"})
        with self.assertRaises(ValueError):
            validate_theme_tokens({"button_bg_press": "black"})

    def test_parse_hex_rgba(self) -> None:
        self.assertEqual(parse_hex_rgba("#112233"), (17, 34, 51, 255))
        self.assertEqual(parse_hex_rgba("#11223344"), (17, 34, 51, 68))
        with self.assertRaises(ValueError):
            parse_hex_rgba("112233")


class ButtonConfigTests(unittest.TestCase):
    def _write(self, text: str) -> Path:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        path = Path(tmp.name) / "button.toml"
        path.write_text(text)
        return path

    def test_load_config_with_theme(self) -> None:
        path = self._write('[button]\ngrace_period_s = 0.5\n\n[theme]\nbutton_bg_press = "#000000"\n')
        config = load_button_config(path)
        self.assertEqual(config.grace_period_s, 0.5)
        self.assertEqual(config.theme.button_bg_press, "#000000")

    def test_defaults_when_tables_missing(self) -> None:
        config = load_button_config(self._write(""))
        self.assertEqual(config.grace_period_s, DEFAULT_GRACE_PERIOD_S)
        self.assertEqual(config.theme, DEFAULT_TOKENS)

    def test_invalid_values_rejected(self) -> None:
        with self.assertRaises(ValueError):
            load_button_config(self._write('[button]\ngrace_period_s = "fast"\n'))
        with self.assertRaises(ValueError):
            load_button_config(self._write("[button]\ngrace_period_s = -1\n"))
        with self.assertRaises(ValueError):
            load_button_config(self._write('theme = "dark"\n'))
        with self.assertRaises(ValueError):
            ButtonConfig(grace_period_s=-0.1)

    def test_missing_file(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_button_config(Path(tempfile.gettempdir()) / "does-not-exist" / "button.toml")


if __name__ == "__main__":
    unittest.main()
