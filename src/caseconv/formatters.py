"""Output formatting for the caseconv command line."""

from __future__ import annotations

import json
from typing import Dict, List, Optional

from tabulate import tabulate

from .case_utils import STYLES, normalize_style_name
from .errors import CaseConversionError, UnknownStyleError
from .utils import debug_print


def _resolve_styles(styles):
    if styles is None:
        return list(STYLES)

    resolved = []
    for style in styles:
        key = normalize_style_name(style) if isinstance(style, str) else None
        if key not in STYLES:
            raise UnknownStyleError(style, STYLES)
        resolved.append(key)
    return resolved


def convert_all(text, styles: Optional[List[str]] = None) -> List[Dict[str, str]]:
    """Run text through several styles, collecting failures instead of raising.

    Args:
        text: Input string
        styles: Style names to use, all of ``STYLES`` when None

    Returns:
        One dict per style with ``style`` and either ``output`` or ``error``

    Raises:
        UnknownStyleError: a requested style is not registered
    """
    results = []
    for style in _resolve_styles(styles):
        formatter = STYLES[style]
        try:
            results.append({"style": style, "output": formatter(text)})
        except CaseConversionError as e:
            debug_print(f"Style {style} rejected input: {e}")  # pragma: no mutate
            results.append({"style": style, "error": str(e)})
    return results


def format_table_output(results: List[Dict[str, str]]) -> str:
    """Render conversion results as a two-column table."""
    if not results:
        return "No results found."

    rows = []
    for result in results:
        if "error" in result:
            rows.append([result["style"], f"ERROR: {result['error']}"])
        else:
            rows.append([result["style"], result["output"]])

    return tabulate(rows, headers=["Style", "Output"], tablefmt="grid")


def format_json_output(text, results: List[Dict[str, str]]) -> str:
    """Render conversion results as JSON."""
    return json.dumps({"input": text, "results": results}, indent=2)
