"""Tests for severity level conversion."""

import pytest

from editor_adapters import levels


class TestToNumeric:
    @pytest.mark.parametrize("name,rank", [
        ("trace", 0), ("debug", 1), ("info", 2), ("warn", 3), ("error", 4),
    ])
    def test_names(self, name, rank):
        assert levels.to_numeric(name) == rank

    def test_case_insensitive(self):
        assert levels.to_numeric("WARN") == levels.WARN
        assert levels.to_numeric("Error") == levels.ERROR

    def test_numeric_passthrough(self):
        assert levels.to_numeric(3) == 3
        assert levels.to_numeric(42) == 42

    def test_unknown_name_is_info(self):
        assert levels.to_numeric("critical") == levels.INFO

    def test_other_types_are_info(self):
        assert levels.to_numeric(None) == levels.INFO
        assert levels.to_numeric(True) == levels.INFO


class TestToString:
    @pytest.mark.parametrize("rank,name", [
        (0, "trace"), (1, "debug"), (2, "info"), (3, "warn"), (4, "error"),
    ])
    def test_ranks(self, rank, name):
        assert levels.to_string(rank) == name

    def test_string_is_lowercased(self):
        assert levels.to_string("WARN") == "warn"

    def test_unknown_rank_is_info(self):
        assert levels.to_string(99) == "info"
        assert levels.to_string(-1) == "info"

    def test_float_ranks(self):
        assert levels.to_string(3.0) == "warn"
        assert levels.to_string(0.0) == "trace"
        assert levels.to_numeric(4.0) == levels.ERROR

    def test_other_types_are_info(self):
        assert levels.to_string(None) == "info"


class TestForBackend:
    def test_numeric_kind(self):
        assert levels.for_backend("warn", levels.NUMERIC) == levels.WARN

    def test_string_kind(self):
        assert levels.for_backend(levels.WARN, levels.STRING) == "warn"
