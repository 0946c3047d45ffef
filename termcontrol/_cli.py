import sys

from ._escapes import Color
from ._controller import TerminalController
from .utils import listen_to_logs


def demo(stream=None):
    """Show the colors and line control on the given stream (default stdout)."""
    stream = sys.stdout if stream is None else stream
    term = TerminalController.for_stream(stream)
    if term is None:
        sys.stderr.write(f"Cannot write to {stream!r}\n")
        return 1

    for color in Color:
        if color is Color.NO_COLOR:
            continue
        term.write(color.name.lower().ljust(10), color)
        term.write("bold", color, bold=True)
        term.end_line()
    term.write("this line will be cleared")
    term.clear_line()
    term.write("color: " + ("yes" if term.is_color_capable else "no"))
    term.write(f", width: {term.width}")
    term.end_line()
    return 0


def cli(argv=None):
    argv = sys.argv if argv is None else argv
    if "--version" in argv or "version" in argv[1:]:
        from . import __version__

        print("termcontrol", __version__)
        return 0
    elif "--listen" in argv:
        listen_to_logs()
        return 0
    else:
        return demo()
