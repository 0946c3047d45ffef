"""
termcontrol - colored text and cursor control on the terminal.

Output is written with a small subset of vt100 escape sequences, which is
supported by practically all terminals, including Windows 10+ and
xterm.js. When the output is not a terminal (a file, a pipe), no color
codes are written.
"""

from ._escapes import (  # noqa
    Color,
    EscapeSequence,
    SetColor,
    Bold,
    Reset,
    ClearLine,
    CursorUp,
    CarriageReturn,
    Newline,
    wrap,
)
from ._capability import (  # noqa
    TerminalType,
    terminal_type,
    is_color_capable,
    terminal_width,
)
from ._decoder import EscapeSequenceDecoder  # noqa
from ._controller import TerminalController, TerminalError  # noqa
from ._strings import (  # noqa
    chomp,
    chuzzle,
    split_around,
    drop_suffix,
    drop_git_suffix,
    multiline_indent,
    edit_distance,
    best_match,
)
from ._cli import cli  # noqa

__version__ = "0.1.0"
version_info = tuple(map(int, __version__.split(".")))
