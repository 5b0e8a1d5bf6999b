import argparse
import logging
import sys

from asciiref.catalog import CATALOG
from asciiref.chart import render_chart
from asciiref.matcher import search, tokenize
from asciiref.render import EMPTY_MESSAGE, format_rows, format_table
from asciiref.terminal import get_terminal_size, supports_colour

LOG = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="ASCII character reference")
    parser.add_argument(
        "terms",
        nargs="*",
        help="Search terms; a character is listed when every term appears in its code, glyph, name or key",
    )
    parser.add_argument(
        "-w", "--width", type=int, default=None, help="Output width in columns (default: terminal width)"
    )
    parser.add_argument(
        "-c",
        "--colour",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Bold category headers (default: on when writing to a terminal)",
    )
    parser.add_argument("--chart", default=None, help="Also write a chart image to this path")
    parser.add_argument("--font", default=None, help="TrueType font for the chart (default: Pillow's built-in font)")
    parser.add_argument("--font-size", type=int, default=14, help="Chart font size (default: 14)")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug messages")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.width is not None and args.width < 1:
        parser.error(f"width must be at least 1, got {args.width}")
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    width = args.width if args.width is not None else get_terminal_size()[0]
    colour = args.colour if args.colour is not None else supports_colour()
    text = " ".join(args.terms)
    filtered = bool(tokenize(text))
    records = search(CATALOG.records, text)

    if args.chart is not None:
        highlight = {record.code for record in records} if filtered else set()
        try:
            image, _, _ = render_chart(
                CATALOG.records, font_path=args.font, font_size=args.font_size, highlight=highlight
            )
        except OSError as e:
            print(f"Cannot load font {args.font}: {e}", file=sys.stderr)
            return 2
        try:
            image.save(args.chart)
        except (OSError, ValueError) as e:
            print(f"Cannot write chart {args.chart}: {e}", file=sys.stderr)
            return 2
        LOG.debug("Wrote chart to %s", args.chart)

    if not filtered:
        print(format_table(CATALOG, width=width, colour=colour))
        return 0

    if not records:
        print(EMPTY_MESSAGE, file=sys.stderr)
        return 1
    print(format_rows(records, width=width))
    return 0


if __name__ == "__main__":
    sys.exit(main())
