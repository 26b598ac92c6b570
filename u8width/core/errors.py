"""Errors raised while validating, decoding and measuring UTF-8 input."""

from errno import EILSEQ
from typing import Optional


class U8Error(ValueError):
    """Base class for every u8width failure."""


class InvalidArgument(U8Error):
    """The caller passed a missing buffer, a bad length or a bad codepoint."""


class IllegalSequence(U8Error):
    """Malformed, truncated, overlong, surrogate or out-of-range UTF-8."""

    errno = EILSEQ

    def __init__(self, sequence: bytes, offset: int = 0) -> None:
        self.sequence = bytes(sequence)
        self.offset = offset
        super().__init__(
            f"illegal byte sequence {self.sequence.hex(' ')!r} at byte {offset}"
        )


class UndisplayableControl(U8Error):
    """A control character has no column width."""

    def __init__(self, codepoint: int, offset: Optional[int] = None) -> None:
        self.codepoint = codepoint
        self.offset = offset
        where = f" at byte {offset}" if offset is not None else ""
        super().__init__(f"undisplayable control character U+{codepoint:04X}{where}")
