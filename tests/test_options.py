"""
Unit tests for option schema and argument parsing

Tests short and long flags, positional ordering and the parse failures
reported for unknown or malformed flags.
"""

import pytest

from crawlrunner.browser import default_catalog
from crawlrunner.cli.options import (BROWSER, DEPTH, HELP, MAXSTATES, OVERRIDE, PARALLEL,
                                     VERSION, OptionSchema, OptionSpec, RawOptions,
                                     default_schema, parse_arguments)
from crawlrunner.errors import ErrorKind


class TestOptionSchema:
    """Test cases for the option schema"""

    @pytest.fixture
    def schema(self):
        return default_schema(default_catalog())

    def test_recognised_flags(self, schema):
        """Every documented flag is declared with its short name"""
        expected = {
            HELP: ("h", False),
            VERSION: ("v", False),
            BROWSER: ("b", True),
            DEPTH: ("d", True),
            MAXSTATES: ("s", True),
            PARALLEL: ("p", True),
            OVERRIDE: ("o", False),
        }
        assert len(schema) == len(expected)
        for key, (short, takes_value) in expected.items():
            spec = schema[key]
            assert spec.short == short
            assert spec.long == key
            assert spec.takes_value is takes_value

    def test_browser_description_lists_catalog(self, schema):
        description = schema[BROWSER].description
        for name in default_catalog().names():
            assert name in description
        assert "Default is Firefox" in description

    def test_duplicate_keys_rejected(self):
        spec = OptionSpec("depth", "d", "depth", True, "depth")
        with pytest.raises(ValueError):
            OptionSchema([spec, spec])


class TestParseArguments:
    """Test cases for parse_arguments"""

    @pytest.fixture
    def schema(self):
        return default_schema(default_catalog())

    def test_positionals_only(self, schema):
        result = parse_arguments(schema, ["http://example.com", "/tmp/out"])
        assert result.is_ok
        assert result.value.positionals == ("http://example.com", "/tmp/out")
        assert dict(result.value.values) == {}

    def test_short_and_long_forms(self, schema):
        """Short, long and --flag=value forms give the same values"""
        argv_variants = [
            ["-b", "chrome", "-d", "3", "-s", "10", "-p", "2", "-o"],
            ["--browser", "chrome", "--depth", "3", "--maxstates", "10",
             "--parallel", "2", "--override"],
            ["--browser=chrome", "--depth=3", "--maxstates=10", "--parallel=2", "--override"],
        ]
        for argv in argv_variants:
            result = parse_arguments(schema, argv + ["http://example.com", "out"])
            assert result.is_ok, f"Failed for {argv}: {result.error}"
            raw = result.value
            assert raw.get(BROWSER) == "chrome"
            assert raw.get(DEPTH) == "3"
            assert raw.get(MAXSTATES) == "10"
            assert raw.get(PARALLEL) == "2"
            assert raw.has(OVERRIDE)
            assert raw.get(OVERRIDE) is None

    def test_boolean_flags_absent_by_default(self, schema):
        raw = parse_arguments(schema, ["a", "b"]).value
        for key in (HELP, VERSION, OVERRIDE):
            assert not raw.has(key)

    def test_positionals_keep_order_when_interleaved(self, schema):
        result = parse_arguments(schema, ["http://example.com", "--depth", "3", "/tmp/out"])
        assert result.is_ok
        assert result.value.positionals == ("http://example.com", "/tmp/out")
        assert result.value.get(DEPTH) == "3"

    def test_negative_number_is_a_value(self, schema):
        """A negative number after a value flag is kept for validation"""
        result = parse_arguments(schema, ["-d", "-1", "http://example.com", "out"])
        assert result.is_ok
        assert result.value.get(DEPTH) == "-1"

    def test_unknown_flags_fail(self, schema):
        for token in ["--bogus", "-x", "--dep", "-ox", "-vx"]:
            result = parse_arguments(schema, ["http://example.com", token, "out"])
            assert not result.is_ok, f"Should fail: {token}"
            assert result.error.kind == ErrorKind.PARSE_FAILURE
            assert result.error.token == token

    def test_missing_value_fails(self, schema):
        result = parse_arguments(schema, ["http://example.com", "out", "--depth"])
        assert not result.is_ok
        assert result.error.kind == ErrorKind.PARSE_FAILURE
        assert result.error.token == "--depth"

    def test_value_given_to_boolean_flag_fails(self, schema):
        result = parse_arguments(schema, ["--override=yes", "http://example.com", "out"])
        assert not result.is_ok
        assert result.error.token == "--override=yes"

    def test_end_of_options_marker(self, schema):
        """Arguments after "--" are positionals, wherever the marker appears"""
        cases = [
            (["http://x.com", "--", "-out"], ("http://x.com", "-out"), {}),
            (["--", "http://x.com", "-out"], ("http://x.com", "-out"), {}),
            (["-d", "3", "--", "http://x.com", "-out"], ("http://x.com", "-out"), {DEPTH: "3"}),
            (["http://x.com", "out", "--"], ("http://x.com", "out"), {}),
            (["--", "-o", "--", "x"], ("-o", "--", "x"), {}),
        ]
        for argv, positionals, values in cases:
            result = parse_arguments(schema, argv)
            assert result.is_ok, f"Failed for {argv}: {result.error}"
            assert result.value.positionals == positionals, f"Wrong positionals for {argv}"
            assert dict(result.value.values) == values, f"Wrong values for {argv}"

    def test_empty_argv(self, schema):
        result = parse_arguments(schema, [])
        assert result.is_ok
        assert result.value.positionals == ()


def test_raw_options_are_read_only():
    raw = RawOptions(values={"depth": "3"}, positionals=["a", "b"])
    assert raw.positionals == ("a", "b")
    with pytest.raises(TypeError):
        raw.values["depth"] = "4"
