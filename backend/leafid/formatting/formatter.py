"""Free-text analysis → ordered DisplayRecords.

Rules, per line:
  1. Drop emphasis characters (* _ # `), trim, skip if empty.
  2. "<digits>." prefix            → SectionHeader (prefix removed)
  3. "-" prefix and contains ":"   → LabeledField (split on first colon)
  4. "-" prefix                    → Bullet
  5. anything else                 → Paragraph

The formatter never raises: text that matches no pattern becomes paragraphs.
"""

from __future__ import annotations

from leafid.models.display import Bullet, DisplayRecord, LabeledField, Paragraph, SectionHeader

_EMPHASIS_CHARS = "*_#`"
_ASCII_DIGITS = "0123456789"
_EMPHASIS_TABLE = str.maketrans("", "", _EMPHASIS_CHARS)
_BOM = "\ufeff"


def _trim(text: str) -> str:
    """Strip whitespace and byte-order marks from both ends."""
    while True:
        trimmed = text.strip().strip(_BOM)
        if trimmed == text:
            return text
        text = trimmed


def clean_line(line: str) -> str:
    return _trim(line.translate(_EMPHASIS_TABLE))


def _numeric_prefix_length(line: str) -> int:
    """Length of the leading run of ASCII digits."""
    n = 0
    while n < len(line) and line[n] in _ASCII_DIGITS:
        n += 1
    return n


def is_section_header(line: str) -> bool:
    n = _numeric_prefix_length(line)
    return n > 0 and line[n : n + 1] == "."


def strip_section_number(line: str) -> str:
    n = _numeric_prefix_length(line)
    return _trim(line[n + 1 :])


def is_labeled_field(line: str) -> bool:
    return line.startswith("-") and ":" in line


def is_bullet(line: str) -> bool:
    return line.startswith("-")


def format_line(line: str) -> DisplayRecord | None:
    """Classify one raw line. Returns None for lines that are empty once cleaned."""
    text = clean_line(line)
    if not text:
        return None

    if is_section_header(text):
        return SectionHeader(title=strip_section_number(text))

    if is_labeled_field(text):
        label, _, value = text[1:].partition(":")
        return LabeledField(label=_trim(label), value=_trim(value))

    if is_bullet(text):
        return Bullet(text=_trim(text[1:]))

    return Paragraph(text=text)


def format_analysis(text: str) -> list[DisplayRecord]:
    records: list[DisplayRecord] = []
    for line in text.split("\n"):
        record = format_line(line)
        if record is not None:
            records.append(record)
    return records
