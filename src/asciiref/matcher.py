"""Free-text search over character records.

A search string is split on whitespace into terms. A record matches when every
term is a case-insensitive substring of at least one of its representations:
hex code, decimal code, glyph, name, caret control form or escape sequence.
"""

import logging
from collections.abc import Iterable, Sequence

from asciiref.catalog import list_all
from asciiref.model import CharacterRecord

LOG = logging.getLogger(__name__)


def tokenize(text: str) -> list[str]:
    return text.split()


def representations(record: CharacterRecord) -> list[str]:
    forms = [f"{record.code:02X}", str(record.code), record.glyph]
    for optional in (record.name, record.control_form, record.escape_sequence):
        if optional is not None:
            forms.append(optional)
    return forms


def matches_one(record: CharacterRecord, term: str) -> bool:
    # lower() is locale independent and, unlike casefold(), keeps "ß" from matching "ss"
    needle = term.lower()
    return any(needle in form.lower() for form in representations(record))


def matches_all(record: CharacterRecord, terms: Iterable[str]) -> bool:
    return all(matches_one(record, term) for term in terms)


def search(records: Sequence[CharacterRecord], text: str) -> list[CharacterRecord]:
    """Return a new list of the records matching every term in ``text``, in their original order.

    Blank text applies no filter and returns a copy of every record.
    """
    terms = tokenize(text)
    if not terms:
        return list(records)
    found = [record for record in records if matches_all(record, terms)]
    LOG.debug("Search %r (%d terms) matched %d of %d records", text, len(terms), len(found), len(records))
    return found


def find(text: str) -> list[CharacterRecord]:
    """Search the built-in catalog."""
    return search(list_all(), text)
