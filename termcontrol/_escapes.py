"""
Encoding of the vt100 escape sequences that we emit.

We only use a small subset: select graphic rendition (color, bold, reset),
erase line and cursor up. These are supported by every terminal that we
care about, including Windows 10+ consoles and xterm.js.
"""

import enum


ESC = "\x1b"
CSI = ESC + "["


class Color(enum.Enum):
    """Foreground colors, with their SGR code.

    NO_COLOR means pass-through: no escape codes are emitted for it.
    """

    NO_COLOR = None
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37
    DEFAULT = 39

    @property
    def code(self):
        return self.value


class EscapeSequence:
    """Base class for a single control operation.

    Instances are immutable values that compare by type and arguments.
    """

    __slots__ = ()

    def _args(self):
        return ()

    def encode(self) -> str:
        raise NotImplementedError()

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable.")

    def __eq__(self, other):
        return type(self) is type(other) and self._args() == other._args()

    def __hash__(self):
        return hash((type(self).__name__,) + self._args())

    def __repr__(self):
        args = ", ".join(repr(a) for a in self._args())
        return f"{type(self).__name__}({args})"


class SetColor(EscapeSequence):
    __slots__ = ("_color",)

    def __init__(self, color):
        color = Color(color)
        if color is Color.NO_COLOR:
            raise ValueError("SetColor needs a color, not NO_COLOR.")
        object.__setattr__(self, "_color", color)

    @property
    def color(self):
        return self._color

    def _args(self):
        return (self._color,)

    def encode(self):
        return f"{CSI}{self._color.code}m"


class Bold(EscapeSequence):
    __slots__ = ()

    def encode(self):
        return CSI + "1m"


class Reset(EscapeSequence):
    __slots__ = ()

    def encode(self):
        return CSI + "0m"


class ClearLine(EscapeSequence):
    __slots__ = ()

    def encode(self):
        return CSI + "2K"


class CursorUp(EscapeSequence):
    __slots__ = ("_n",)

    def __init__(self, n):
        # bool is an int, but CursorUp(True) is surely a mistake
        if not isinstance(n, int) or isinstance(n, bool):
            raise ValueError(f"Cursor count must be an int, not {n!r}.")
        if n < 0:
            raise ValueError(f"Cursor count must be non-negative, not {n}.")
        object.__setattr__(self, "_n", n)

    @property
    def n(self):
        return self._n

    def _args(self):
        return (self._n,)

    def encode(self):
        # Zero is not elided, we emit what was asked for
        return f"{CSI}{self._n}A"


class CarriageReturn(EscapeSequence):
    __slots__ = ()

    def encode(self):
        return "\r"


class Newline(EscapeSequence):
    """End of line: carriage return plus line feed."""

    __slots__ = ()

    def encode(self):
        return "\r\n"


# %% Functional API


def set_color(color) -> str:
    return SetColor(color).encode()


def bold() -> str:
    return Bold().encode()


def reset() -> str:
    return Reset().encode()


def clear_line() -> str:
    return ClearLine().encode()


def carriage_return() -> str:
    return CarriageReturn().encode()


def end_line() -> str:
    return Newline().encode()


def cursor_up(n) -> str:
    return CursorUp(n).encode()


def wrap(text, color=Color.NO_COLOR, bold=False) -> str:
    """Wrap text in the escape codes for the given color (and boldness).

    The result is always closed with a reset, also for empty text, so that
    no styling leaks into subsequent output. For NO_COLOR without bold the
    text is returned unchanged.
    """
    color = Color(color)
    prefix = ""
    if bold:
        prefix += Bold().encode()
    if color is not Color.NO_COLOR:
        prefix += SetColor(color).encode()
    if not prefix:
        return text
    return prefix + text + Reset().encode()
