"""Tests for date pattern detection.

Tests the value-based pattern matching used for temporal detection.
Column name patterns are intentionally NOT supported.
"""

from datetime import datetime

import pytest

from bi_profiler.analysis.typing.patterns import (
    DatePattern,
    PatternConfig,
    PatternConfigError,
    load_pattern_config,
)


class TestDatePattern:
    """Tests for the DatePattern class."""

    def test_pattern_matches_date_iso(self):
        """Test ISO date pattern matching."""
        pattern = DatePattern(
            name="iso_date",
            pattern=r"^\d{4}-\d{2}-\d{2}$",
            formats=["%Y-%m-%d"],
        )
        assert pattern.matches("2024-01-15")
        assert pattern.matches("2023-12-31")
        assert not pattern.matches("01-15-2024")
        assert not pattern.matches("not a date")

    def test_pattern_case_insensitive(self):
        """Test case-insensitive pattern matching."""
        pattern = DatePattern(
            name="month_name",
            pattern=r"^[a-z]{3} \d{1,2}, \d{4}$",
            formats=["%b %d, %Y"],
            case_sensitive=False,
        )
        assert pattern.matches("jan 15, 2024")
        assert pattern.matches("JAN 15, 2024")
        assert pattern.parse("Jan 15, 2024") == datetime(2024, 1, 15)

    def test_pattern_empty_value(self):
        """Test that empty values don't match."""
        pattern = DatePattern(name="any", pattern=r".*", formats=["%Y"])
        assert not pattern.matches("")
        assert not pattern.matches(None)  # type: ignore[arg-type]

    def test_parse_tries_formats_in_order(self):
        """Day-first format is used when month-first fails."""
        pattern = DatePattern(
            name="slash",
            pattern=r"^\d{1,2}/\d{1,2}/\d{4}$",
            formats=["%m/%d/%Y", "%d/%m/%Y"],
        )
        assert pattern.parse("01/02/2024") == datetime(2024, 1, 2)
        assert pattern.parse("25/12/2024") == datetime(2024, 12, 25)

    def test_parse_rejects_impossible_date(self):
        pattern = DatePattern(name="iso_date", pattern=r"^\d{4}-\d{2}-\d{2}$", formats=["%Y-%m-%d"])
        assert pattern.matches("2024-02-30")
        assert pattern.parse("2024-02-30") is None

    def test_iso_format_marker(self):
        pattern = DatePattern(name="iso", pattern=r"^\d{4}-\d{2}-\d{2}T.*$", formats=["iso"])
        assert pattern.parse("2024-01-15T10:30:00") == datetime(2024, 1, 15, 10, 30)


class TestPatternConfig:
    """Tests for the PatternConfig class."""

    def test_load_config_from_dict(self):
        """Test loading patterns from a dictionary."""
        config_dict = {
            "date_patterns": [
                {"name": "iso_date", "pattern": r"^\d{4}-\d{2}-\d{2}$", "formats": ["%Y-%m-%d"]},
                {"name": "dotted", "pattern": r"^\d{2}\.\d{2}\.\d{4}$", "formats": ["%d.%m.%Y"]},
            ]
        }
        config = PatternConfig(config_dict)
        patterns = config.get_patterns()

        assert len(patterns) == 2
        assert patterns[0].name == "iso_date"
        assert patterns[1].name == "dotted"

    def test_invalid_entries_are_skipped(self):
        """Entries without formats are ignored."""
        config = PatternConfig(
            {
                "date_patterns": [
                    {"name": "broken", "pattern": r"^x$"},
                    {"name": "ok", "pattern": r"^\d{4}$", "formats": ["%Y"]},
                ]
            }
        )
        assert [p.name for p in config.get_patterns()] == ["ok"]

    def test_unknown_keys_are_ignored(self):
        config = PatternConfig(
            {
                "date_patterns": [
                    {
                        "name": "dotted",
                        "pattern": r"^\d{2}\.\d{2}\.\d{4}$",
                        "formats": ["%d.%m.%Y"],
                        "locale": "de_DE",
                    }
                ]
            }
        )
        assert config.parse_datetime("15.01.2024") == datetime(2024, 1, 15)

    def test_match_value_returns_all_matches(self):
        """Test that match_value returns all matching patterns."""
        config = PatternConfig(
            {
                "date_patterns": [
                    {"name": "us", "pattern": r"^\d{2}/\d{2}/\d{4}$", "formats": ["%m/%d/%Y"]},
                    {"name": "eu", "pattern": r"^\d{2}/\d{2}/\d{4}$", "formats": ["%d/%m/%Y"]},
                ]
            }
        )
        assert len(config.match_value("01/02/2024")) == 2
        assert config.match_value("2024-01-02") == []

    def test_parse_datetime_uses_first_accepting_pattern(self):
        config = PatternConfig(
            {
                "date_patterns": [
                    {"name": "us", "pattern": r"^\d{2}/\d{2}/\d{4}$", "formats": ["%m/%d/%Y"]},
                    {"name": "eu", "pattern": r"^\d{2}/\d{2}/\d{4}$", "formats": ["%d/%m/%Y"]},
                ]
            }
        )
        assert config.parse_datetime("01/02/2024") == datetime(2024, 1, 2)
        assert config.parse_datetime("31/01/2024") == datetime(2024, 1, 31)
        assert config.parse_datetime("nope") is None

    def test_no_column_name_patterns(self):
        """PatternConfig does not support column name patterns."""
        config = PatternConfig({"column_name_patterns": [{"pattern": ".*_date$"}]})

        assert config.get_patterns() == []
        assert not hasattr(config, "match_column_name")


class TestLoadPatternConfig:
    """Tests for the load_pattern_config function."""

    def test_load_default_config(self):
        """Test loading the packaged pattern configuration."""
        config = load_pattern_config()
        pattern_names = {p.name for p in config.get_patterns()}

        assert "iso_date" in pattern_names
        assert "iso_datetime" in pattern_names

    def test_default_examples_parse(self):
        """Every example in the packaged config parses with its own pattern."""
        config = load_pattern_config()
        for pattern in config.get_patterns():
            for example in pattern.examples or []:
                assert pattern.parse(example) is not None, f"{pattern.name}: {example}"

    def test_slash_dates_read_month_first(self):
        """Format order decides ambiguous slash dates: month-first, then day-first."""
        config = load_pattern_config()

        assert config.parse_datetime("01/02/2024") == datetime(2024, 1, 2)
        assert config.parse_datetime("13/02/2024") == datetime(2024, 2, 13)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(PatternConfigError):
            load_pattern_config(tmp_path / "missing.yaml")

    def test_non_mapping_raises(self, tmp_path):
        path = tmp_path / "patterns.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(PatternConfigError):
            load_pattern_config(path)

    def test_custom_config_path_from_settings(self, tmp_path, monkeypatch):
        """BI_PROFILER_CONFIG_PATH points the loader at another directory."""
        (tmp_path / "patterns").mkdir()
        (tmp_path / "patterns" / "default.yaml").write_text(
            "date_patterns:\n"
            "  - name: compact\n"
            "    pattern: '^\\d{8}$'\n"
            "    formats: ['%Y%m%d']\n"
        )
        monkeypatch.setenv("BI_PROFILER_CONFIG_PATH", str(tmp_path))

        config = load_pattern_config()

        assert [p.name for p in config.get_patterns()] == ["compact"]
        assert config.parse_datetime("20240115") == datetime(2024, 1, 15)
