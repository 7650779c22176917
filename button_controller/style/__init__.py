from .theme import DEFAULT_TOKENS, ThemeTokens, parse_hex_rgba, style_for_state, validate_theme_tokens

__all__ = [
    "DEFAULT_TOKENS",
    "ThemeTokens",
    "parse_hex_rgba",
    "style_for_state",
    "validate_theme_tokens",
]
