import io
import os
import logging

from ._escapes import Color, ClearLine, CarriageReturn, Newline, CursorUp, wrap
from ._capability import get_fileno, is_color_capable, terminal_width


logger = logging.getLogger("termcontrol")


class TerminalError(Exception):
    """Raised when a stream cannot be bound to a TerminalController."""


class TerminalController:
    """Write colored text and control the cursor on one output stream.

    Whether the stream can show colors is determined once, at construction,
    using the given detector. When it can't, text is written without any
    color codes. Clearing the line and moving the cursor are emitted
    unconditionally, so a file or pipe will contain these codes literally.

    The stream can be a text stream or a binary stream. Text written to a
    binary stream is encoded as UTF-8.

    The controller does not own the stream: closing it is up to the caller.
    Each operation writes and then flushes, so that bytes appear on the
    stream in the order of the calls. Errors from the stream propagate.

    Use ``TerminalController.for_stream()`` to get None instead of an
    exception when the stream cannot be used.
    """

    def __init__(self, stream, detector=is_color_capable):
        if not callable(getattr(stream, "write", None)):
            raise TerminalError(f"Cannot write to {stream!r}.")
        if getattr(stream, "closed", False):
            raise TerminalError(f"Stream {stream!r} is closed.")
        writable = getattr(stream, "writable", None)
        if writable is not None and not writable():
            raise TerminalError(f"Stream {stream!r} is not writable.")
        fd = get_fileno(stream)
        if fd is not None:
            try:
                os.fstat(fd)
            except OSError as err:
                raise TerminalError(f"Stream {stream!r} has an invalid fd: {err}")

        self._stream = stream
        self._flush = getattr(stream, "flush", None)
        self._is_binary = is_binary_stream(stream)
        self._is_color_capable = bool(detector(stream))
        logger.info(
            f"bound terminal controller to {stream!r}, color={self._is_color_capable}"
        )

    @classmethod
    def for_stream(cls, stream, detector=is_color_capable):
        """Create a controller for the given stream, or None if it's unusable."""
        try:
            return cls(stream, detector)
        except TerminalError as err:
            logger.debug(str(err))
            return None

    @property
    def stream(self):
        """The stream that this controller writes to."""
        return self._stream

    @property
    def is_color_capable(self):
        """Whether color codes are emitted. Fixed for the controller's lifetime."""
        return self._is_color_capable

    @property
    def width(self):
        """The width of the terminal (or a sensible default)."""
        return terminal_width(self._stream)

    def wrap(self, text, color=Color.NO_COLOR, bold=False):
        """Get the text wrapped in color codes, if the stream can show them."""
        if not self._is_color_capable:
            return text
        return wrap(text, color, bold)

    def write(self, text, color=Color.NO_COLOR, bold=False):
        """Write text, in the given color if the stream can show it."""
        self._write(self.wrap(text, color, bold))

    def clear_line(self):
        """Clear the current line and move the cursor to its start."""
        self._write(ClearLine().encode() + CarriageReturn().encode())

    def end_line(self):
        self._write(Newline().encode())

    def move_cursor(self, up):
        """Move the cursor up by the given number of lines.

        Zero is written as-is. A negative count raises ValueError.
        """
        self._write(CursorUp(up).encode())

    def _write(self, text):
        if self._is_binary:
            self._stream.write(text.encode("utf-8"))
        else:
            self._stream.write(text)
        if self._flush is not None:
            self._flush()


def is_binary_stream(stream):
    """Get whether the stream wants bytes rather than str."""
    if isinstance(stream, io.TextIOBase):
        return False
    return isinstance(stream, (io.RawIOBase, io.BufferedIOBase))
