from collections.abc import Iterable

from asciiref.catalog import Catalog
from asciiref.model import CharacterRecord

GLYPH_WIDTH = 5
MIN_GAP = 2
EMPTY_MESSAGE = "No matching characters"

BOLD = "\033[1m"
RESET = "\033[0m"


def fit_line(line: str, width: int | None) -> str:
    if width is not None and len(line) > width:
        return line[:width]
    return line


def format_row(record: CharacterRecord, width: int | None = None) -> str:
    """One table row: hex, decimal, glyph and name on the left, escape and control key on the right."""
    left = f"{record.code:02X}  {record.code:3d}  {record.glyph:<{GLYPH_WIDTH}} {record.name or ''}".rstrip()
    right = " ".join(part for part in (record.escape_sequence, record.control_form) if part)
    if not right:
        return fit_line(left, width)
    gap = MIN_GAP if width is None else max(MIN_GAP, width - len(left) - len(right))
    return fit_line(left + " " * gap + right, width)


def format_header(label: str, width: int | None = None, colour: bool = False) -> str:
    label = fit_line(label, width)
    if colour:
        return f"{BOLD}{label}{RESET}"
    return label


def format_rows(records: Iterable[CharacterRecord], width: int | None = None) -> str:
    return "\n".join(format_row(record, width) for record in records)


def format_table(catalog: Catalog, width: int | None = None, colour: bool = False) -> str:
    """Render every category as a header followed by its rows, sections separated by a blank line."""
    sections = []
    for category in catalog.categories:
        lines = [format_header(category.label, width, colour)]
        lines.extend(format_row(record, width) for record in catalog.records_in(category))
        sections.append("\n".join(lines))
    return "\n\n".join(sections)
