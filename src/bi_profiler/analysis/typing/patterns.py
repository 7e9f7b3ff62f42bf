"""Value patterns for temporal detection.

Patterns are defined in config/patterns/default.yaml. A string value counts as
a calendar date/time only when it matches a pattern AND parses with one of the
pattern's formats, so "2024-02-30" matches iso_date but is not a timestamp.

IMPORTANT: Detection is based ONLY on values, NOT column names.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from functools import lru_cache
from pathlib import Path
from typing import Any, cast

import yaml

from bi_profiler.core.config import get_settings

# Format marker for datetime.fromisoformat
ISO_FORMAT = "iso"


class PatternConfigError(Exception):
    """Raised when the pattern configuration cannot be loaded."""


@dataclass
class DatePattern:
    """A single date pattern definition.

    Patterns match against actual cell values (not column names).
    """

    name: str
    pattern: str
    formats: list[str]
    case_sensitive: bool = True
    examples: list[str] | None = None

    # Compiled regex (set in __post_init__)
    _regex: re.Pattern[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Compile regex pattern."""
        flags = 0 if self.case_sensitive else re.IGNORECASE
        self._regex = re.compile(self.pattern, flags)

    def matches(self, value: str) -> bool:
        """Check if value matches this pattern.

        Args:
            value: String value to check

        Returns:
            True if pattern matches
        """
        if not value:
            return False
        return self._regex.match(value) is not None

    def parse(self, value: str) -> datetime | None:
        """Parse a matching value with the first format that accepts it.

        Args:
            value: String value to parse

        Returns:
            Parsed datetime, or None if the value does not match or no format parses
        """
        if not self.matches(value):
            return None
        for fmt in self.formats:
            try:
                if fmt == ISO_FORMAT:
                    return datetime.fromisoformat(value)
                return datetime.strptime(value, fmt)
            except ValueError:
                continue
        return None


class PatternConfig:
    """Date pattern configuration.

    Loads patterns from YAML configuration and provides matching functionality.
    """

    def __init__(self, config_dict: dict[str, object]):
        self._config = config_dict
        self._patterns: list[DatePattern] = []
        self._load_patterns()

    def _load_patterns(self) -> None:
        """Load all date patterns from configuration."""
        patterns_list = cast(list[dict[str, Any]], self._config.get("date_patterns") or [])
        for pattern_dict in patterns_list:
            try:
                pattern = DatePattern(
                    name=pattern_dict["name"],
                    pattern=pattern_dict["pattern"],
                    formats=list(pattern_dict["formats"]),
                    case_sensitive=pattern_dict.get("case_sensitive", True),
                    examples=pattern_dict.get("examples"),
                )
            except KeyError:
                # Skip invalid patterns
                continue
            self._patterns.append(pattern)

    def get_patterns(self) -> list[DatePattern]:
        """Get all date patterns."""
        return self._patterns

    def match_value(self, value: str) -> list[DatePattern]:
        """Find all patterns that match a value.

        Args:
            value: String value to match

        Returns:
            List of matching DatePattern objects
        """
        return [pattern for pattern in self._patterns if pattern.matches(value)]

    def parse_datetime(self, value: str) -> datetime | None:
        """Parse a value with the first pattern that accepts it."""
        for pattern in self.match_value(value):
            parsed = pattern.parse(value)
            if parsed is not None:
                return parsed
        return None


def load_pattern_config(config_path: Path | None = None) -> PatternConfig:
    """Load pattern configuration from YAML.

    Args:
        config_path: Optional path to config file. If None, uses default from settings.

    Returns:
        PatternConfig instance

    Raises:
        PatternConfigError: If the file is missing or is not a YAML mapping
    """
    if config_path is None:
        settings = get_settings()
        config_path = settings.config_path / "patterns" / "default.yaml"

    try:
        with open(config_path) as f:
            config_dict = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise PatternConfigError(f"Failed to load patterns from {config_path}: {e}") from e

    if not isinstance(config_dict, dict):
        raise PatternConfigError(f"Pattern config must be a mapping: {config_path}")

    return PatternConfig(config_dict)


@lru_cache
def get_pattern_config() -> PatternConfig:
    """Get the cached default pattern configuration."""
    return load_pattern_config()
