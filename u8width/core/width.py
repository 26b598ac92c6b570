"""Terminal column widths for codepoints and UTF-8 byte strings.

Follows Markus Kuhn's ``wcwidth``:

* C0/C1 control characters and DEL have no width (-1).
* Non-spacing and enclosing marks, format characters, Hangul medial
  vowels/final consonants and ZERO WIDTH SPACE take 0 columns.
* East Asian Wide and Fullwidth characters take 2 columns.
* Everything else takes 1 column.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .codepoint import _decode, iter_codepoints
from .errors import InvalidArgument, UndisplayableControl
from .sequence import BytesLike, buffer_view
from .tables import COMBINING, MAX_CODEPOINT, WIDE

Interval = Tuple[int, int]


def bisearch(cp: int, table: Sequence[Interval]) -> bool:
    """Return True if ``cp`` falls inside one of the sorted ``table`` intervals."""
    lo = 0
    hi = len(table) - 1
    if hi < 0 or cp < table[0][0] or cp > table[hi][1]:
        return False

    while hi >= lo:
        mid = (lo + hi) // 2
        if cp > table[mid][1]:
            lo = mid + 1
        elif cp < table[mid][0]:
            hi = mid - 1
        else:
            return True
    return False


def codepoint_width(cp: int) -> int:
    """Return the number of columns ``cp`` occupies: -1, 0, 1 or 2."""
    if isinstance(cp, bool) or not isinstance(cp, int):
        raise InvalidArgument(f"codepoint must be an int, got {type(cp).__name__}")
    if not 0 <= cp <= MAX_CODEPOINT:
        raise InvalidArgument(f"codepoint {cp:#x} is outside the Unicode range")

    # 8-bit control characters
    if cp < 32 or 0x7F <= cp < 0xA0:
        return -1
    if bisearch(cp, COMBINING):
        return 0
    if bisearch(cp, WIDE):
        return 2
    return 1


def char_width(buffer: BytesLike, length: Optional[int] = None) -> int:
    """Decode the first character of ``buffer`` and return its width.

    Unlike :func:`string_width`, control characters (including a leading
    NUL) are reported as -1 rather than raised.
    """
    view = buffer_view(buffer, length)
    cp, _ = _decode(view, 0, len(view))
    return codepoint_width(cp)


def string_width(buffer: BytesLike, length: Optional[int] = None) -> int:
    """Return the total column width of the UTF-8 text in ``buffer``.

    Measuring stops at a NUL byte or after ``length`` bytes.  The first
    malformed sequence raises :class:`IllegalSequence` and the first
    control character raises :class:`UndisplayableControl`; both carry the
    byte offset where measuring stopped.
    """
    # A leading NUL is a terminator and measures 0; neo4j_u8cswidth decoded it
    # as a control character and failed instead.
    total = 0
    for offset, cp, _ in iter_codepoints(buffer, length):
        w = codepoint_width(cp)
        if w < 0:
            raise UndisplayableControl(cp, offset)
        total += w
    return total
