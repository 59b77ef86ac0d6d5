"""Decode field rows into per-column integer series.

Rows come in two encodings. Most are whitespace separated:

    " WSP   1  1  1  1  2  2  2  3"

Ceiling and visibility rows may run together as right-justified 3-character
slots because their values can be negative or three digits wide:

    " CIG -88210220200200200-88-88"

The encoding is detected per row, not per field.
"""

import re

from windplot.models.forecast import FieldSeries, StationSection

LABEL_WIDTH = 3
SLOT_WIDTH = 3
MISSING_VALUE = -99
NOT_GUIDED = "NG"

_WHITESPACE_RE = re.compile(r"\s")
_ADJACENT_SLOTS_RE = re.compile(r"[-\d]{3}[-\d]{3}")
# " 12-99": a negative value packed against the previous slot
_PACKED_NEGATIVE_RE = re.compile(r"\d-\d")
_INT_RE = re.compile(r"-?\d+")


def index_rows(section: StationSection) -> dict[str, str]:
    """Map each row label to the text following it. First occurrence wins."""
    rows: dict[str, str] = {}
    for line in section.body:
        row = line.lstrip()
        label = row[:LABEL_WIDTH]
        if len(label) == LABEL_WIDTH and label not in rows:
            rows[label] = row[LABEL_WIDTH:]
    return rows


def decode_field(rows: dict[str, str], label: str) -> FieldSeries:
    """Values for `label`, or an empty series when the row is absent."""
    data = rows.get(label)
    if data is None:
        return ()
    return decode_row(data)


def decode_row(data: str) -> FieldSeries:
    if is_fixed_width(data):
        return decode_fixed_width(data)
    return tuple(parse_token(tok) for tok in data.split())


def is_fixed_width(data: str) -> bool:
    """Checks run in order; the first that matches decides."""
    body = data.strip()
    if not body:
        return False
    if _WHITESPACE_RE.search(body) is None:
        return True
    if _ADJACENT_SLOTS_RE.search(body) is not None:
        return True
    return _PACKED_NEGATIVE_RE.search(body) is not None


def decode_fixed_width(data: str, width: int = SLOT_WIDTH) -> FieldSeries:
    """Slice `data` into `width`-character slots aligned on its right edge.

    Values are right-justified, so aligning on the last character keeps the
    slots correct even when the first value is padded with spaces.
    """
    body = data.rstrip()
    body = " " * (-len(body) % width) + body
    slots = [body[i:i + width].strip() for i in range(0, len(body), width)]
    while slots and not slots[0]:
        slots.pop(0)
    return tuple(parse_token(slot) for slot in slots)


def parse_token(token: str) -> int | None:
    """Parse one raw value. -99, NG and anything non-numeric are missing."""
    if token == NOT_GUIDED or _INT_RE.fullmatch(token) is None:
        return None
    value = int(token)
    if value == MISSING_VALUE:
        return None
    return value
