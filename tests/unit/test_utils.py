"""Tests for debug output helpers."""

import io
import re

import pytest

from caseconv.utils import (
    DebugContext,
    debug_print,
    describe_value,
    get_debug_enabled,
    set_debug_enabled,
)

DEBUG_LINE = re.compile(r"^\[DEBUG\] \d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} (.*)$")


class TestDebugContext:
    def test_writes_prefixed_line_to_given_stream(self):
        stream = io.StringIO()
        DebugContext(enabled=True, stream=stream).print("hello", "world")
        match = DEBUG_LINE.match(stream.getvalue().rstrip("\n"))
        assert match
        assert match.group(1) == "hello world"

    def test_prefix_only_without_arguments(self):
        stream = io.StringIO()
        DebugContext(enabled=True, stream=stream).print()
        assert re.fullmatch(r"\[DEBUG\] [\d\- :]+\n", stream.getvalue())

    def test_disabled_context_writes_nothing(self):
        stream = io.StringIO()
        DebugContext(stream=stream).print("hello")
        assert stream.getvalue() == ""

    def test_enable_and_disable(self):
        stream = io.StringIO()
        context = DebugContext(stream=stream)
        context.enable()
        context.print("first")
        context.disable()
        context.print("second")
        assert "first" in stream.getvalue()
        assert "second" not in stream.getvalue()

    def test_defaults_to_current_stderr(self, capsys):
        DebugContext(enabled=True).print("to stderr")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "to stderr" in captured.err


class TestGlobalDebugSwitch:
    def test_disabled_by_default(self):
        assert get_debug_enabled() is False

    def test_set_debug_enabled_round_trip(self):
        set_debug_enabled(True)
        assert get_debug_enabled() is True
        set_debug_enabled(False)
        assert get_debug_enabled() is False

    def test_debug_print_follows_switch(self, capsys):
        debug_print("hidden")
        set_debug_enabled(True)
        debug_print("shown")
        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "[DEBUG]" in err
        assert "shown" in err


class TestDescribeValue:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("short", "'short'"),
            ("x" * 40, repr("x" * 40)),
            ("x" * 41, repr("x" * 37 + "...")),
            (42, "<int>"),
            (None, "<NoneType>"),
        ],
    )
    def test_describes_values(self, value, expected):
        assert describe_value(value) == expected
