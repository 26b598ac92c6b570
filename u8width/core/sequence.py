"""UTF-8 sequence validation.

Inspects the lead byte of a buffer and at most three continuation bytes to
decide how many bytes encode the first character.  Overlong encodings,
UTF-16 surrogates (U+D800..U+DFFF), values above U+10FFFF and the obsolete
5/6-byte lead bytes are all rejected, as is any sequence cut short by the
available length.
"""

from __future__ import annotations

from typing import Optional, Union

from .errors import IllegalSequence, InvalidArgument

BytesLike = Union[bytes, bytearray, memoryview]


def buffer_view(buffer: BytesLike, length: Optional[int] = None) -> memoryview:
    """Return an unsigned-byte view over the first ``length`` bytes of ``buffer``.

    ``length`` defaults to the whole buffer and must be at least 1.
    """
    if buffer is None:
        raise InvalidArgument("buffer is None")
    if isinstance(buffer, str):
        raise InvalidArgument("expected a bytes-like buffer, got str")
    try:
        view = memoryview(buffer)
    except TypeError as exc:
        raise InvalidArgument(
            f"expected a bytes-like buffer, got {type(buffer).__name__}"
        ) from exc
    if view.ndim != 1 or view.format != "B":
        view = view.cast("B")

    if length is None:
        length = len(view)
    if length <= 0:
        raise InvalidArgument("at least one byte is required")
    if length > len(view):
        raise InvalidArgument(
            f"length {length} exceeds buffer of {len(view)} bytes"
        )
    return view[:length]


def _continues(view: memoryview, start: int, stop: int) -> bool:
    return all(view[i] & 0xC0 == 0x80 for i in range(start, stop))


def _illegal(view: memoryview, pos: int, end: int, need: int) -> IllegalSequence:
    return IllegalSequence(view[pos:min(end, pos + need)].tobytes(), pos)


def _sequence_length(view: memoryview, pos: int, end: int) -> int:
    c = view[pos]
    if c == 0:
        return 0
    if c < 0x80:
        # 0xxxxxxx
        return 1
    if c < 0xC2:
        # continuation byte, or 1100000x (overlong)
        raise _illegal(view, pos, end, 1)

    if c < 0xE0:
        need = 2
    elif c < 0xF0:
        need = 3
    elif c < 0xF8:
        need = 4
    else:
        raise _illegal(view, pos, end, 1)

    if end - pos < need or not _continues(view, pos + 1, pos + need):
        raise _illegal(view, pos, end, need)

    b1 = view[pos + 1]
    if need == 3:
        if c == 0xE0 and b1 < 0xA0:
            # 11100000 100xxxxx (overlong)
            raise _illegal(view, pos, end, need)
        if c == 0xED and b1 >= 0xA0:
            # 11101101 101xxxxx (U+D800..U+DFFF)
            raise _illegal(view, pos, end, need)
    elif need == 4:
        if c == 0xF0 and b1 < 0x90:
            # 11110000 1000xxxx (overlong)
            raise _illegal(view, pos, end, need)
        if c > 0xF4 or (c == 0xF4 and b1 >= 0x90):
            # beyond U+10FFFF
            raise _illegal(view, pos, end, need)
    return need


def sequence_length(buffer: BytesLike, length: Optional[int] = None) -> int:
    """Return how many bytes encode the first character of ``buffer``.

    Returns 0 when the first byte is NUL.  Raises :class:`IllegalSequence`
    for malformed or truncated input and :class:`InvalidArgument` when no
    byte is available.
    """
    view = buffer_view(buffer, length)
    return _sequence_length(view, 0, len(view))
