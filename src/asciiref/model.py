from dataclasses import dataclass

CODE_COUNT = 128

# Codes typed as Ctrl plus a key: 0x00-0x1F and DEL
CONTROL_CODES = frozenset(range(0, 32)) | {127}

# BEL BS HT LF VT FF CR
ESCAPE_CODES = frozenset(range(7, 14))


@dataclass(frozen=True)
class CharacterRecord:
    code: int
    glyph: str
    name: str | None = None
    control_key: str | None = None
    escape_sequence: str | None = None

    @property
    def control_form(self) -> str | None:
        """Caret notation for the control key, e.g. ``^G`` for BEL."""
        if self.control_key is None:
            return None
        return f"^{self.control_key}"


@dataclass(frozen=True)
class Category:
    label: str
    low: int
    high: int

    @property
    def codes(self) -> range:
        return range(self.low, self.high + 1)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, int) and self.low <= code <= self.high
