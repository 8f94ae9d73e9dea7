"""Unit tests for LogOptions and Severity."""

import pytest

from prologger.domain.entities import LogOptions, Severity


class TestLogOptions:
    """Tests for LogOptions."""

    def test_defaults(self):
        options = LogOptions()
        assert options.level is None
        assert options.noconvert is False
        assert options.prefix is False

    def test_from_mapping(self):
        options = LogOptions.from_mapping(
            {"level": "db", "noconvert": 1, "prefix": True}
        )
        assert options == LogOptions(level="db", noconvert=True, prefix=True)

    def test_from_mapping_ignores_unknown_keys(self):
        assert LogOptions.from_mapping({"colour": "red"}) == LogOptions()

    def test_from_mapping_empty_level_is_none(self):
        assert LogOptions.from_mapping({"level": ""}).level is None

    def test_merged_overrides(self):
        merged = LogOptions(level="db").merged(prefix=True)
        assert merged == LogOptions(level="db", prefix=True)

    def test_merged_without_overrides_returns_self(self):
        options = LogOptions(level="db")
        assert options.merged() is options

    def test_is_immutable(self):
        with pytest.raises(Exception):  # FrozenInstanceError
            LogOptions().level = "db"


class TestSeverity:
    """Tests for Severity."""

    @pytest.mark.parametrize(
        ("severity", "tag", "color", "stderr"),
        [
            (Severity.LOG, "[LOG]", "cyan", False),
            (Severity.WARN, "[WARN]", "yellow", True),
            (Severity.ERROR, "[ERROR]", "red", True),
            (Severity.INFO, "[INFO]", "blue", False),
            (Severity.SUCCESS, "[SUCCESS]", "green", False),
        ],
    )
    def test_attributes(self, severity, tag, color, stderr):
        assert severity.tag == tag
        assert severity.color == color
        assert severity.stderr is stderr

    def test_value_is_event_name(self):
        assert [s.value for s in Severity] == [
            "log",
            "warn",
            "error",
            "info",
            "success",
        ]
        assert Severity.ERROR == "error"
