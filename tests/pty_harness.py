"""
A pseudo terminal to test what is written to a terminal, without needing a
real one. Where there is no pty (Windows) we use an in-memory substitute.
"""

import io
import os
import select

try:
    import pty  # noqa - Unix
    import termios  # Unix
except ImportError:
    pty = termios = None


HAS_PTY = pty is not None


def patch_oflag(attrs: int) -> int:
    # No output processing, so that e.g. "\n" is not turned into "\r\n"
    return attrs & ~termios.OPOST


class PseudoTerminal:
    """A master/slave pty pair.

    The slave side is available as ``out_stream``, to give to a
    TerminalController. What is written to it can be obtained with
    ``read_master()``.
    """

    def __init__(self):
        self.master_fd, self.slave_fd = os.openpty()
        attrs = termios.tcgetattr(self.slave_fd)
        attrs[1] = patch_oflag(attrs[1])
        termios.tcsetattr(self.slave_fd, termios.TCSANOW, attrs)
        self.out_stream = open(self.slave_fd, "w", encoding="utf-8", closefd=False)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def read_master(self, timeout=2.0):
        """Read what has been written to the slave, as text."""
        chunks = []
        wait = timeout
        while True:
            ready, _, _ = select.select([self.master_fd], [], [], wait)
            if not ready:
                break
            chunks.append(os.read(self.master_fd, 1024))
            wait = 0.05  # get the remainder, if any
        return b"".join(chunks).decode("utf-8")

    def close(self):
        self.out_stream.close()
        os.close(self.slave_fd)
        os.close(self.master_fd)


class MemoryTerminal:
    """In-memory substitute for a PseudoTerminal.

    A StringIO has no file descriptor, so the controller must be given a
    detector that says it is a terminal.
    """

    def __init__(self):
        self.out_stream = io.StringIO()
        self._pos = 0

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def read_master(self, timeout=None):
        text = self.out_stream.getvalue()[self._pos :]
        self._pos += len(text)
        return text

    def close(self):
        self.out_stream.close()


def open_terminal():
    """Open a pty pair, or the in-memory substitute if there is no pty."""
    if HAS_PTY:
        return PseudoTerminal()
    return MemoryTerminal()
