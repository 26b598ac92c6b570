# Column width checks for codepoints, single characters and strings.
# Run: pytest -q

import pytest

from u8width.core import (
    COMBINING,
    WIDE,
    IllegalSequence,
    InvalidArgument,
    UndisplayableControl,
    bisearch,
    char_width,
    codepoint_width,
    string_width,
)


@pytest.mark.parametrize(
    "cp, expected",
    [
        (0x41, 1),
        (0x20, 1),
        (0xA0, 1),
        (0xAD, 1),  # soft hyphen is spacing
        (0xE9, 1),
        (0x0301, 0),
        (0x200B, 0),
        (0x1160, 0),  # Hangul medial vowel
        (0xFEFF, 0),
        (0xE0001, 0),
        (0x1100, 2),
        (0x115F, 2),
        (0x2329, 2),
        (0x3000, 2),
        (0x303F, 1),
        (0x302A, 0),  # combining mark inside the CJK span
        (0x4E2D, 2),
        (0xAC00, 2),
        (0xD7A3, 2),
        (0xD7A4, 1),
        (0xFF01, 2),
        (0xFF61, 1),  # halfwidth katakana punctuation
        (0xFFE6, 2),
        (0x20000, 2),
        (0x2FFFD, 2),
        (0x2FFFE, 1),
        (0x3FFFD, 2),
        (0x1F600, 1),
        (0x10FFFF, 1),
    ],
)
def test_codepoint_width(cp, expected):
    assert codepoint_width(cp) == expected


@pytest.mark.parametrize("cp", [0x00, 0x07, 0x0A, 0x1B, 0x1F, 0x7F, 0x80, 0x9F])
def test_control_characters_are_undisplayable(cp):
    assert codepoint_width(cp) == -1


@pytest.mark.parametrize("cp", [-1, 0x110000, "A", 1.0, True, None])
def test_codepoint_width_rejects_bad_values(cp):
    with pytest.raises(InvalidArgument):
        codepoint_width(cp)


def test_tables_are_sorted_and_disjoint():
    for table in (COMBINING, WIDE):
        for first, last in table:
            assert first <= last
        for (_, prev_last), (next_first, _) in zip(table, table[1:]):
            assert prev_last < next_first


def test_bisearch_matches_linear_scan():
    for cp in range(0, 0xE0200, 31):
        expected = any(first <= cp <= last for first, last in COMBINING)
        assert bisearch(cp, COMBINING) is expected, hex(cp)


def test_bisearch_bounds_and_empty_table():
    assert bisearch(0x0300, COMBINING)
    assert bisearch(0xE01EF, COMBINING)
    assert not bisearch(0x02FF, COMBINING)
    assert not bisearch(0xE01F0, COMBINING)
    assert not bisearch(0x41, ())


def test_char_width():
    assert char_width(b"A") == 1
    assert char_width("中".encode("utf-8")) == 2
    assert char_width(b"\xcc\x81") == 0
    assert char_width(b"\x07") == -1
    assert char_width(b"\x00") == -1
    with pytest.raises(IllegalSequence):
        char_width(b"\xe4\xb8")


def test_string_width_mixed_text():
    assert string_width("A中".encode("utf-8")) == 3
    assert string_width("é".encode("utf-8")) == 1
    assert string_width("한국어 text".encode("utf-8")) == 11
    assert string_width("ｆｕｌｌ".encode("utf-8")) == 8


def test_string_width_stops_at_terminator():
    assert string_width(b"abc\x00\xff\xff") == 3
    assert string_width(b"\x00abc") == 0


def test_string_width_respects_length():
    data = "中文字".encode("utf-8")
    assert string_width(data, 6) == 4
    with pytest.raises(IllegalSequence):
        string_width(data, 7)


def test_string_width_control_character():
    with pytest.raises(UndisplayableControl) as info:
        string_width(b"ab\tcd")
    assert info.value.codepoint == 0x09
    assert info.value.offset == 2


def test_string_width_illegal_sequence_offset():
    with pytest.raises(IllegalSequence) as info:
        string_width("中".encode("utf-8") + b"\xc0\x80")
    assert info.value.offset == 3


def test_string_width_rejects_empty_buffer():
    with pytest.raises(InvalidArgument):
        string_width(b"")
