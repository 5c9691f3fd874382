"""Exceptions raised by the case converters.

Every error subclasses :class:`CaseConversionError` and also the matching
builtin (``TypeError`` or ``ValueError``), so callers can catch either.
"""


class CaseConversionError(Exception):
    """Base class for all conversion failures."""


class InvalidTypeError(CaseConversionError, TypeError):
    """Input is not a ``str`` (``None`` included)."""


class EmptyInputError(CaseConversionError, ValueError):
    """Input is empty or whitespace only."""


class LeadingDigitError(CaseConversionError, ValueError):
    """Trimmed input starts with a decimal digit (strict policy only)."""


class NoWordCharactersError(CaseConversionError, ValueError):
    """Tokenization left no words."""


class UnknownStyleError(CaseConversionError, ValueError):
    """Requested output style is not registered."""

    def __init__(self, style, available):
        self.style = style
        self.available = list(available)
        super().__init__(
            f"Unknown style '{style}'. Available styles: {', '.join(self.available)}"
        )
