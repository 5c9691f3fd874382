"""Debug output helpers shared by the converters and the CLI."""

import datetime
import sys


class DebugContext:
    """Holds the debug switch and writes debug lines to stderr."""

    def __init__(self, enabled=False, stream=None):
        self.enabled = enabled
        self._stream = stream

    @property
    def stream(self):
        # Looked up per call so a replaced sys.stderr is honoured
        return self._stream if self._stream is not None else sys.stderr

    def print(self, *args, **kwargs):
        """Print a line with a [DEBUG] prefix and timestamp when enabled"""
        if not self.enabled:
            return

        timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        prefix = f"[DEBUG] {timestamp}"

        if args:
            print(f"{prefix} {args[0]}", *args[1:], file=self.stream, **kwargs)
        else:
            print(prefix, file=self.stream, **kwargs)

    def enable(self):
        self.enabled = True

    def disable(self):
        self.enabled = False


_debug_context = DebugContext()


def debug_print(*args, **kwargs):
    """Print debug messages when debug mode is enabled"""
    _debug_context.print(*args, **kwargs)


def set_debug_enabled(value):
    """Turn debug mode on or off"""
    if value:
        _debug_context.enable()
    else:
        _debug_context.disable()


def get_debug_enabled():
    return _debug_context.enabled


def describe_value(value):
    """Short, log-safe description of an arbitrary input value."""
    if isinstance(value, str):
        if len(value) > 40:
            return repr(value[:37] + "...")
        return repr(value)
    return f"<{type(value).__name__}>"
