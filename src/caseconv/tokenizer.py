"""Split free-form text into words.

Two policies are available:

``STRICT``
    Identifier-oriented. Rejects text starting with a digit, drops punctuation
    outright (``"don't"`` -> ``"dont"``) and splits on whitespace and
    underscores only.

``ALNUM``
    Anything that is not an ASCII letter or digit separates words, so
    hyphens, dots and punctuation all act as boundaries.
"""

import re
from typing import List

from .errors import EmptyInputError, InvalidTypeError, LeadingDigitError, NoWordCharactersError
from .utils import debug_print, describe_value

STRICT = "strict"
ALNUM = "alnum"
POLICIES = (STRICT, ALNUM)

# Word characters are ASCII letters, digits and underscore; everything else
# except whitespace is dropped before splitting.
_NON_WORD_NON_SPACE = re.compile(r"[^A-Za-z0-9_\s]")
SPACE_OR_UNDERSCORE = re.compile(r"[\s_]+")
_NON_ALNUM = re.compile(r"[^A-Za-z0-9]+")
_LEADING_DIGIT = re.compile(r"^[0-9]")


def require_text(value) -> str:
    """Return ``value`` trimmed, raising if it is not usable text."""
    if not isinstance(value, str):
        raise InvalidTypeError("Input must be a string")

    trimmed = value.strip()
    if not trimmed:
        raise EmptyInputError("Input cannot be an empty string")
    return trimmed


def _split_strict(trimmed: str) -> List[str]:
    if _LEADING_DIGIT.match(trimmed):
        raise LeadingDigitError("Input cannot start with a number")

    cleaned = _NON_WORD_NON_SPACE.sub("", trimmed)
    return [word for word in SPACE_OR_UNDERSCORE.split(cleaned) if word]


def _split_alnum(trimmed: str) -> List[str]:
    return [word for word in _NON_ALNUM.split(trimmed) if word]


_SPLITTERS = {
    STRICT: _split_strict,
    ALNUM: _split_alnum,
}


def split_words(text, policy: str = STRICT) -> List[str]:
    """Split text into an ordered list of non-empty words.

    Args:
        text: Input text, must be a ``str``
        policy: ``STRICT`` or ``ALNUM``

    Returns:
        Words in their original order and case

    Raises:
        InvalidTypeError: text is not a string
        EmptyInputError: text is empty or whitespace only
        LeadingDigitError: text starts with a digit (``STRICT`` only)
        NoWordCharactersError: nothing but separators was found

    Examples:
        >>> split_words('the quick brown fox')
        ['the', 'quick', 'brown', 'fox']
        >>> split_words('hello_world!')
        ['hello', 'world']
        >>> split_words('config.max-retries', policy=ALNUM)
        ['config', 'max', 'retries']
    """
    try:
        splitter = _SPLITTERS[policy]
    except KeyError:
        raise ValueError(
            f"Unknown tokenization policy '{policy}'. Expected one of: {', '.join(POLICIES)}"
        ) from None

    trimmed = require_text(text)
    words = splitter(trimmed)
    if not words:
        raise NoWordCharactersError("Input must contain at least one valid word character")

    debug_print(f"Split {describe_value(text)} with {policy} policy: {words}")  # pragma: no mutate
    return words
