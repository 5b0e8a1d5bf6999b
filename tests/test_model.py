import dataclasses

import pytest

from asciiref.model import Category, CharacterRecord


def test_control_form_uses_caret_notation():
    bell = CharacterRecord(code=7, glyph="BEL", name="Bell", control_key="G", escape_sequence=r"\a")
    assert bell.control_form == "^G"


def test_control_form_absent_without_key():
    assert CharacterRecord(code=65, glyph="A").control_form is None


def test_optional_fields_default_to_none():
    record = CharacterRecord(code=33, glyph="!")
    assert record.name is None
    assert record.control_key is None
    assert record.escape_sequence is None


def test_records_are_immutable():
    record = CharacterRecord(code=33, glyph="!")
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.code = 34


def test_category_codes_are_inclusive():
    digits = Category("Digits (30-39)", 48, 57)
    assert list(digits.codes) == list(range(48, 58))
    assert 48 in digits
    assert 57 in digits
    assert 58 not in digits
    assert "48" not in digits


def test_single_code_category():
    delete = Category("Control Characters (7F)", 127, 127)
    assert list(delete.codes) == [127]
