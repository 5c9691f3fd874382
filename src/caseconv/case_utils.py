"""Case conversion for free-form text.

camelCase and dot.case are built from words produced by the tokenizer;
kebab-case is produced by pattern substitution over the whole string.
"""

import re
from collections import OrderedDict

from .errors import EmptyInputError, InvalidTypeError, UnknownStyleError
from .tokenizer import ALNUM, SPACE_OR_UNDERSCORE, STRICT, split_words
from .utils import debug_print, describe_value

_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_HYPHEN_RUN = re.compile(r"-+")
_EDGE_HYPHENS = re.compile(r"^-+|-+$")


def _capitalize(word: str) -> str:
    # upper(), not str.capitalize(), which titlecases the first character
    return word[:1].upper() + word[1:].lower()


def camel_case(text) -> str:
    """Convert text to camelCase.

    Uses the strict tokenizer: the text may not start with a digit,
    punctuation is dropped and words are split on whitespace and underscores.

    Args:
        text: Input string

    Returns:
        camelCase string

    Examples:
        >>> camel_case('Hello World')
        'helloWorld'
        >>> camel_case('hello_world')
        'helloWorld'
        >>> camel_case('  hello  WORLD  ')
        'helloWorld'
    """
    words = split_words(text, policy=STRICT)
    first, rest = words[0], words[1:]
    result = first.lower() + "".join(_capitalize(word) for word in rest)
    debug_print(f"camel_case({describe_value(text)}) -> {result!r}")  # pragma: no mutate
    return result


def dot_case(text) -> str:
    """Convert text to dot.case.

    Every run of characters other than ASCII letters and digits separates
    words, so already dotted text converts to itself.

    Examples:
        >>> dot_case('  hello  WORLD  ')
        'hello.world'
        >>> dot_case('max-retries_count')
        'max.retries.count'
        >>> dot_case('hello.world')
        'hello.world'
    """
    result = ".".join(word.lower() for word in split_words(text, policy=ALNUM))
    debug_print(f"dot_case({describe_value(text)}) -> {result!r}")  # pragma: no mutate
    return result


def kebab_case(text) -> str:
    """Convert text to kebab-case.

    camelCase boundaries are hyphenated before the text is lowercased, then
    whitespace and underscores become hyphens. Other punctuation is kept.
    Text made only of separators (``"___"``) gives an empty string.

    Args:
        text: Input string

    Returns:
        kebab-case string

    Raises:
        InvalidTypeError: text is None or not a string
        EmptyInputError: text is empty or whitespace only

    Examples:
        >>> kebab_case('HelloWorld')
        'hello-world'
        >>> kebab_case('hello world_test')
        'hello-world-test'
        >>> kebab_case('  spaces  and_underscores  ')
        'spaces-and-underscores'
    """
    if text is None:
        raise InvalidTypeError("Input must be a non-null string")
    if not isinstance(text, str):
        raise InvalidTypeError("Input must be a string")

    trimmed = text.strip()
    if not trimmed:
        raise EmptyInputError("Input cannot be empty or whitespace only")

    s1 = _CAMEL_BOUNDARY.sub(r"\1-\2", trimmed).lower()
    s2 = SPACE_OR_UNDERSCORE.sub("-", s1)
    s3 = _HYPHEN_RUN.sub("-", s2)
    result = _EDGE_HYPHENS.sub("", s3)

    debug_print(f"kebab_case({describe_value(text)}) -> {result!r}")  # pragma: no mutate
    return result


def snake_case(text) -> str:
    """Convert text to snake_case.

    Examples:
        >>> snake_case('Max Retries-Count')
        'max_retries_count'
    """
    return "_".join(word.lower() for word in split_words(text, policy=ALNUM))


def pascal_case(text) -> str:
    """Convert text to PascalCase.

    Examples:
        >>> pascal_case('describe-instances')
        'DescribeInstances'
    """
    return "".join(_capitalize(word) for word in split_words(text, policy=ALNUM))


STYLES = OrderedDict(
    [
        ("camel", camel_case),
        ("dot", dot_case),
        ("kebab", kebab_case),
        ("snake", snake_case),
        ("pascal", pascal_case),
    ]
)


def normalize_style_name(style: str) -> str:
    """Reduce a style name to its registry key.

    Examples:
        >>> normalize_style_name('camelCase')
        'camel'
        >>> normalize_style_name('kebab-case')
        'kebab'
        >>> normalize_style_name('DOT')
        'dot'
    """
    name = style.strip().lower()
    if name.endswith("case") and name != "case":
        name = name[: -len("case")]
    return name.rstrip("-_. ")


def convert(text, style: str) -> str:
    """Convert text to the named style.

    Raises:
        UnknownStyleError: style is not one of ``STYLES``
    """
    if not isinstance(style, str):
        raise UnknownStyleError(style, STYLES)
    formatter = STYLES.get(normalize_style_name(style))
    if formatter is None:
        raise UnknownStyleError(style, STYLES)
    return formatter(text)
