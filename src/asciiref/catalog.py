import logging
from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from asciiref import charsets
from asciiref.model import CODE_COUNT, CONTROL_CODES, ESCAPE_CODES, Category, CharacterRecord

LOG = logging.getLogger(__name__)


class CatalogIntegrityError(ValueError):
    """Raised when the character data or its category partition is inconsistent."""


def validate_records(records: Sequence[CharacterRecord]) -> None:
    if len(records) != CODE_COUNT:
        raise CatalogIntegrityError(f"Expected {CODE_COUNT} records, got {len(records)}")

    counts = Counter(record.code for record in records)
    duplicates = sorted(code for code, n in counts.items() if n > 1)
    if duplicates:
        raise CatalogIntegrityError(f"Duplicate codes: {duplicates}")
    missing = sorted(set(range(CODE_COUNT)) - counts.keys())
    if missing:
        raise CatalogIntegrityError(f"Missing codes: {missing}")

    for position, record in enumerate(records):
        code = record.code
        if code != position:
            raise CatalogIntegrityError(f"Record for code {code} is at position {position}")
        if not record.glyph:
            raise CatalogIntegrityError(f"Code {code} has an empty glyph")
        if (record.control_key is not None) != (code in CONTROL_CODES):
            raise CatalogIntegrityError(f"Code {code} has an unexpected control key: {record.control_key!r}")
        if record.control_key is not None and len(record.control_key) != 1:
            raise CatalogIntegrityError(f"Code {code} control key must be one character: {record.control_key!r}")
        if record.escape_sequence is not None and code not in ESCAPE_CODES:
            raise CatalogIntegrityError(f"Code {code} cannot have an escape sequence: {record.escape_sequence!r}")


def validate_categories(categories: Sequence[Category]) -> None:
    if not categories:
        raise CatalogIntegrityError("No categories defined")

    expected = 0
    for category in categories:
        if category.low > category.high:
            raise CatalogIntegrityError(f"Category {category.label!r} has low > high")
        if category.low < expected:
            raise CatalogIntegrityError(f"Category {category.label!r} overlaps the previous one at {category.low}")
        if category.low > expected:
            raise CatalogIntegrityError(f"Codes {expected}-{category.low - 1} are not in any category")
        expected = category.high + 1

    if expected != CODE_COUNT:
        raise CatalogIntegrityError(f"Categories end at {expected - 1}, expected {CODE_COUNT - 1}")


@dataclass(frozen=True)
class Catalog:
    records: tuple[CharacterRecord, ...]
    categories: tuple[Category, ...]

    def __post_init__(self):
        # Accept any sequence but store tuples so the catalog can't be mutated
        object.__setattr__(self, "records", tuple(self.records))
        object.__setattr__(self, "categories", tuple(self.categories))
        validate_records(self.records)
        validate_categories(self.categories)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[CharacterRecord]:
        return iter(self.records)

    def __getitem__(self, code: int) -> CharacterRecord:
        return self.records[code]

    def records_in(self, category: Category) -> tuple[CharacterRecord, ...]:
        if category.low < 0 or category.high >= len(self.records) or category.low > category.high:
            raise IndexError(f"Category {category.label!r} range {category.low}-{category.high} is out of range")
        return self.records[category.low : category.high + 1]


def _rows() -> Iterable[tuple[int, str, str]]:
    yield from charsets.CONTROL
    yield from charsets.PUNCTUATION
    yield from charsets.DIGITS
    yield from charsets.UPPERCASE
    yield from charsets.LOWERCASE
    yield charsets.DELETE


def _control_key(code: int) -> str | None:
    if code == charsets.DELETE[0]:
        return charsets.DELETE_CONTROL_KEY
    if code in CONTROL_CODES:
        return chr(code + 64)
    return None


def build_catalog() -> Catalog:
    """Build and validate the catalog from the literal tables in ``charsets``."""
    records = [
        CharacterRecord(
            code=code,
            glyph=glyph,
            name=name,
            control_key=_control_key(code),
            escape_sequence=charsets.ESCAPES.get(code),
        )
        for code, glyph, name in sorted(_rows())
    ]
    categories = [Category(label, low, high) for label, low, high in charsets.CATEGORIES]
    catalog = Catalog(records, categories)
    LOG.debug("Built catalog with %d records in %d categories", len(catalog.records), len(catalog.categories))
    return catalog


CATALOG = build_catalog()


def list_all() -> tuple[CharacterRecord, ...]:
    return CATALOG.records


def list_categories() -> tuple[Category, ...]:
    return CATALOG.categories


def records_in_category(category: Category) -> tuple[CharacterRecord, ...]:
    return CATALOG.records_in(category)
