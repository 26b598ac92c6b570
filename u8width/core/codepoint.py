"""Decode validated UTF-8 sequences into Unicode scalar values."""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

from .sequence import BytesLike, _sequence_length, buffer_view


def _decode(view: memoryview, pos: int, end: int) -> Tuple[int, int]:
    nbytes = _sequence_length(view, pos, end)
    if nbytes < 2:
        return (view[pos] if nbytes else 0), nbytes

    # lead byte keeps its low (7 - nbytes) bits
    cp = view[pos] & (0x7F >> nbytes)
    for i in range(pos + 1, pos + nbytes):
        cp = (cp << 6) | (view[i] & 0x3F)
    return cp, nbytes


def decode_codepoint(buffer: BytesLike, length: Optional[int] = None) -> Tuple[int, int]:
    """Decode the first character of ``buffer``.

    Returns ``(codepoint, bytes_consumed)``.  A leading NUL decodes to
    ``(0, 0)`` so callers can treat it as a terminator.
    """
    view = buffer_view(buffer, length)
    return _decode(view, 0, len(view))


def iter_codepoints(
    buffer: BytesLike, length: Optional[int] = None
) -> Iterator[Tuple[int, int, int]]:
    """Yield ``(offset, codepoint, bytes_consumed)`` for each character.

    Iteration stops at a NUL byte or once ``length`` bytes are consumed.
    An :class:`IllegalSequence` raised here reports the offset of the bad
    sequence within ``buffer``.  Buffer arguments are checked on the call,
    before the first item is requested.
    """
    return _iter_view(buffer_view(buffer, length))


def _iter_view(view: memoryview) -> Iterator[Tuple[int, int, int]]:
    end = len(view)
    pos = 0
    while pos < end:
        cp, nbytes = _decode(view, pos, end)
        if nbytes == 0:
            return
        yield pos, cp, nbytes
        pos += nbytes
