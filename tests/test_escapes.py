import pytest

from termcontrol import (
    Color,
    SetColor,
    Bold,
    Reset,
    ClearLine,
    CursorUp,
    CarriageReturn,
    Newline,
    wrap,
)
from termcontrol import _escapes


def test_color_codes():
    assert Color.NO_COLOR.code is None
    codes = [c.code for c in Color if c is not Color.NO_COLOR]
    assert codes == [30, 31, 32, 33, 34, 35, 36, 37, 39]
    assert len(set(codes)) == len(codes)
    assert Color.RED.code == 31
    assert Color.GREEN.code == 32


def test_encodings():
    assert SetColor(Color.RED).encode() == "\x1b[31m"
    assert SetColor(Color.GREEN).encode() == "\x1b[32m"
    assert Bold().encode() == "\x1b[1m"
    assert Reset().encode() == "\x1b[0m"
    assert ClearLine().encode() == "\x1b[2K"
    assert CarriageReturn().encode() == "\r"
    assert Newline().encode() == "\r\n"
    assert CursorUp(3).encode() == "\x1b[3A"
    assert CursorUp(0).encode() == "\x1b[0A"
    assert CursorUp(12).encode() == "\x1b[12A"


def test_functional_api():
    assert _escapes.set_color(Color.CYAN) == "\x1b[36m"
    assert _escapes.bold() == "\x1b[1m"
    assert _escapes.reset() == "\x1b[0m"
    assert _escapes.clear_line() == "\x1b[2K"
    assert _escapes.carriage_return() == "\r"
    assert _escapes.end_line() == "\r\n"
    assert _escapes.cursor_up(5) == "\x1b[5A"


def test_invalid_sequences():
    with pytest.raises(ValueError):
        CursorUp(-1)
    with pytest.raises(ValueError):
        CursorUp(1.5)
    with pytest.raises(ValueError):
        CursorUp(True)
    with pytest.raises(ValueError):
        SetColor(Color.NO_COLOR)
    with pytest.raises(ValueError):
        SetColor(99)


def test_sequences_are_values():
    assert SetColor(Color.RED) == SetColor(Color.RED)
    assert SetColor(Color.RED) == SetColor(31)
    assert SetColor(Color.RED) != SetColor(Color.GREEN)
    assert CursorUp(2) == CursorUp(2)
    assert CursorUp(2) != CursorUp(3)
    assert Reset() == Reset()
    assert Reset() != ClearLine()
    assert len({Reset(), Reset(), ClearLine(), CursorUp(1), CursorUp(1)}) == 3
    assert repr(CursorUp(2)) == "CursorUp(2)"

    seq = CursorUp(2)
    with pytest.raises(AttributeError):
        seq._n = 3
    assert seq.n == 2


def test_wrap():
    assert wrap("hello", Color.RED) == "\x1b[31mhello\x1b[0m"
    assert wrap("green", Color.GREEN) == "\x1b[32mgreen\x1b[0m"
    assert wrap("hello", Color.NO_COLOR) == "hello"
    assert wrap("hello") == "hello"
    assert wrap("", Color.RED) == "\x1b[31m\x1b[0m"
    assert wrap("", Color.NO_COLOR) == ""
    assert wrap("x", Color.RED, bold=True) == "\x1b[1m\x1b[31mx\x1b[0m"
    assert wrap("x", Color.NO_COLOR, bold=True) == "\x1b[1mx\x1b[0m"


def test_wrap_all_colors():
    for color in Color:
        if color is Color.NO_COLOR:
            continue
        for text in ["", "a", "some text\n"]:
            result = wrap(text, color)
            assert result == f"\x1b[{color.code}m{text}\x1b[0m"
