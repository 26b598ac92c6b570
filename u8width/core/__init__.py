"""Core modules for UTF-8 validation, decoding and column width."""

from .codepoint import decode_codepoint, iter_codepoints  # noqa: F401
from .errors import (  # noqa: F401
    IllegalSequence,
    InvalidArgument,
    U8Error,
    UndisplayableControl,
)
from .sequence import buffer_view, sequence_length  # noqa: F401
from .tables import COMBINING, MAX_CODEPOINT, WIDE  # noqa: F401
from .trace import TraceEntry, TraceLogger  # noqa: F401
from .width import bisearch, char_width, codepoint_width, string_width  # noqa: F401
