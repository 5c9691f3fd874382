"""
caseconv - convert free-form text to camelCase, dot.case, kebab-case and more.

This package provides a word tokenizer with two explicit splitting policies,
the case converters built on it, and a small command-line front end.
"""

from .case_utils import STYLES, camel_case, convert, dot_case, kebab_case, pascal_case, snake_case
from .errors import (
    CaseConversionError,
    EmptyInputError,
    InvalidTypeError,
    LeadingDigitError,
    NoWordCharactersError,
    UnknownStyleError,
)
from .tokenizer import ALNUM, STRICT, split_words

__version__ = "1.0.0"
__all__ = [
    "ALNUM",
    "STRICT",
    "STYLES",
    "CaseConversionError",
    "EmptyInputError",
    "InvalidTypeError",
    "LeadingDigitError",
    "NoWordCharactersError",
    "UnknownStyleError",
    "camel_case",
    "convert",
    "dot_case",
    "kebab_case",
    "pascal_case",
    "snake_case",
    "split_words",
]
