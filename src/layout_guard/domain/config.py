"""Configuration for layout-guard. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from layout_guard.domain.constants import (
    DEFAULT_EXCLUDES,
    DEFAULT_EXTENSIONS,
    DEFAULT_INDENT_STYLE,
    DEFAULT_MAX_FIX_PASSES,
    INDENT_STYLES,
)

logger = logging.getLogger(__name__)

KNOWN_KEYS = frozenset(
    {"indent_style", "extensions", "exclude", "disable", "max_fix_passes", "rules"})


class ConfigurationLoader:
    """
    Immutable configuration read from [tool.layout-guard].

    Domain does not read the filesystem; Infrastructure calls
    ConfigFileLoader.load_config() and constructs ConfigurationLoader(config_dict)
    at the composition root. Invalid values fall back to defaults with a warning.
    """

    def __init__(self, config_dict: Mapping[str, object] | None = None) -> None:
        self._config: dict[str, object] = dict(config_dict or {})
        if self._config:
            self.validate_config(self._config)

    def validate_config(self, config: Mapping[str, object]) -> None:
        """Warn about keys this version does not understand."""
        for key in config:
            if key not in KNOWN_KEYS:
                logger.warning("Configuration Warning: unknown key '%s' in [tool.layout-guard].", key)

    @property
    def config(self) -> dict[str, object]:
        """Return the loaded configuration."""
        return self._config

    @property
    def indent_style(self) -> str:
        raw = self._config.get("indent_style", DEFAULT_INDENT_STYLE)
        if raw not in INDENT_STYLES:
            logger.warning(
                "Configuration Warning: indent_style must be one of %s, got %r; using '%s'.",
                sorted(INDENT_STYLES), raw, DEFAULT_INDENT_STYLE)
            return DEFAULT_INDENT_STYLE
        return str(raw)

    @property
    def indent_unit(self) -> str:
        """Literal whitespace of one indentation level."""
        return INDENT_STYLES[self.indent_style]

    @property
    def extensions(self) -> tuple[str, ...]:
        raw = self._string_list("extensions")
        if raw is None:
            return DEFAULT_EXTENSIONS
        return tuple(ext if ext.startswith(".") else f".{ext}" for ext in raw)

    @property
    def exclude(self) -> tuple[str, ...]:
        raw = self._string_list("exclude")
        return DEFAULT_EXCLUDES if raw is None else tuple(raw)

    @property
    def disabled_rules(self) -> tuple[str, ...]:
        """Rule codes or symbols switched off in configuration."""
        raw = self._string_list("disable")
        return () if raw is None else tuple(raw)

    @property
    def max_fix_passes(self) -> int:
        raw = self._config.get("max_fix_passes", DEFAULT_MAX_FIX_PASSES)
        if isinstance(raw, bool) or not isinstance(raw, int) or raw < 1:
            logger.warning(
                "Configuration Warning: max_fix_passes must be a positive integer, got %r.", raw)
            return DEFAULT_MAX_FIX_PASSES
        return raw

    @property
    def rule_options(self) -> dict[str, dict[str, object]]:
        """Per-rule option tables keyed by rule symbol or code."""
        raw = self._config.get("rules", {})
        if not isinstance(raw, dict):
            logger.warning("Configuration Warning: [tool.layout-guard.rules] must be a table.")
            return {}
        return {
            str(name): dict(options)
            for name, options in raw.items()
            if isinstance(options, dict)
        }

    def _string_list(self, key: str) -> list[str] | None:
        if key not in self._config:
            return None
        raw = self._config[key]
        if not isinstance(raw, list) or not all(isinstance(x, str) for x in raw):
            logger.warning("Configuration Warning: '%s' must be a list of strings; using default.", key)
            return None
        return list(raw)
