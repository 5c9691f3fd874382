"""Command-line interface for caseconv."""

import argparse
import sys

import argcomplete

from .case_utils import STYLES, convert, normalize_style_name
from .errors import CaseConversionError
from .formatters import convert_all, format_json_output, format_table_output
from .utils import debug_print, set_debug_enabled

ALL_STYLES = "all"


def style_completer(prefix, parsed_args, **kwargs):
    """Autocomplete style names"""
    return [s for s in list(STYLES) + [ALL_STYLES] if s.startswith(prefix.lower())]


def build_parser():
    parser = argparse.ArgumentParser(
        prog="caseconv",
        description="Convert text to camelCase, dot.case, kebab-case and friends",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  caseconv camel "Hello World"          (helloWorld)
  caseconv dot "  hello  WORLD  "       (hello.world)
  caseconv kebab HelloWorld             (hello-world)
  caseconv all "max retries count"      (table of every style)
  caseconv all "max retries" --json     (JSON output)
  caseconv kebab -- -leading-           (use -- when TEXT starts with a hyphen)

Autocomplete Setup:
  eval "$(register-python-argcomplete caseconv)"
        """,
    )

    parser.add_argument(
        "-j", "--json", action="store_true", help="Output results in JSON format instead of text"
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug output")

    style_arg = parser.add_argument(
        "style", nargs="?", help=f"Output style: {', '.join(STYLES)} or {ALL_STYLES}"
    )
    style_arg.completer = style_completer  # type: ignore[attr-defined]

    parser.add_argument("text", nargs="?", help="Text to convert")
    return parser


def main(argv=None):
    parser = build_parser()
    argcomplete.autocomplete(parser)
    args = parser.parse_args(argv)

    set_debug_enabled(args.debug)

    if not args.style or args.text is None:
        print("Available styles:", ", ".join(list(STYLES) + [ALL_STYLES]))
        sys.exit(0)

    debug_print(f"Converting {args.text!r} to style {args.style!r}")  # pragma: no mutate

    try:
        if normalize_style_name(args.style) == ALL_STYLES:
            results = convert_all(args.text)
            if args.json:
                print(format_json_output(args.text, results))
            else:
                print(format_table_output(results))
            return

        output = convert(args.text, args.style)
        if args.json:
            style = normalize_style_name(args.style)
            print(format_json_output(args.text, [{"style": style, "output": output}]))
        else:
            print(output)

    except CaseConversionError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
