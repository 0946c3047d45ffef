"""
Detect whether a stream is attached to a terminal that understands our
escape sequences.

This is a query only: we never change the mode of a Unix terminal. On
Windows we do switch on virtual terminal processing for the console,
because without it the console prints escape codes literally.
"""

import os
import sys
import enum
import logging


logger = logging.getLogger("termcontrol")

ENABLE_VIRTUAL_TERMINAL_PROCESSING = 0x0004


class TerminalType(enum.Enum):
    """What kind of output a stream is attached to."""

    TTY = "tty"
    DUMB = "dumb"
    FILE = "file"


def get_fileno(stream):
    """Get the file descriptor of a stream, or None if it has none."""
    try:
        return stream.fileno()
    except (AttributeError, OSError, ValueError) as err:
        # io.UnsupportedOperation for e.g. StringIO, ValueError if closed
        logger.debug(f"stream {stream!r} has no usable fileno: {err}")
        return None


def terminal_type(stream, environ=None) -> TerminalType:
    """Determine the terminal type of the given stream."""
    environ = os.environ if environ is None else environ
    fd = get_fileno(stream)
    if fd is None:
        return TerminalType.FILE
    try:
        isatty = os.isatty(fd)
    except OSError as err:
        logger.debug(f"isatty query failed for fd {fd}: {err}")
        return TerminalType.FILE
    if not isatty:
        return TerminalType.FILE
    if environ.get("TERM", "") == "dumb":
        return TerminalType.DUMB
    return TerminalType.TTY


def is_color_capable(stream, environ=None) -> bool:
    """Get whether we can emit color escape codes to the given stream.

    Only a real (non-dumb) terminal qualifies. If anything goes wrong
    while finding out, the answer is False.

    On Windows this has a side effect: virtual terminal processing is
    switched on for the console (via SetConsoleMode), if it was not on
    already. On Unix the terminal is only queried.
    """
    if terminal_type(stream, environ) is not TerminalType.TTY:
        return False
    if sys.platform.startswith("win"):
        return _enable_windows_vt_processing(get_fileno(stream))
    return True


def terminal_width(stream, default=80) -> int:
    """Get the width of the terminal the stream is attached to.

    Returns default if the stream is not a terminal.
    """
    fd = get_fileno(stream)
    if fd is None:
        return default
    try:
        columns = os.get_terminal_size(fd).columns
    except OSError:
        return default
    return columns if columns > 0 else default


def _enable_windows_vt_processing(fd) -> bool:
    """Make sure the console for fd interprets vt100 sequences."""
    try:
        import msvcrt
        import ctypes
        from ctypes import wintypes

        kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)  # type: ignore
        handle = msvcrt.get_osfhandle(fd)  # type: ignore
        mode = wintypes.DWORD()
        if not kernel32.GetConsoleMode(handle, ctypes.byref(mode)):
            return False
        if mode.value & ENABLE_VIRTUAL_TERMINAL_PROCESSING:
            return True
        new_mode = mode.value | ENABLE_VIRTUAL_TERMINAL_PROCESSING
        return bool(kernel32.SetConsoleMode(handle, new_mode))
    except Exception as err:
        logger.debug(f"could not enable vt processing on fd {fd}: {err}")
        return False
