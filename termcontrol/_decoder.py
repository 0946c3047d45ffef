from collections import deque

from ._escapes import (
    ESC,
    Color,
    SetColor,
    Bold,
    Reset,
    ClearLine,
    CursorUp,
    CarriageReturn,
    Newline,
)


COLOR_CODES = {c.code: c for c in Color if c.code is not None}


class EscapeSequenceDecoder:
    """A streaming decoder for the output that we produce.

    Turns text into a list of plain-text runs (str) and EscapeSequence
    objects. This is what a terminal does when it "reads" our output, and
    is mainly useful to verify what was written.
    """

    def __init__(self):
        self._chars = deque()
        self._pending = ""

    def decode(self, text, flush=False):
        """Decode the given string.

        Escape sequences can be split between multiple calls to decode.
        When flush is True, this is not the case, and any partial escape
        sequence is ignored. Without a flush, a trailing partial sequence
        (or a lone carriage return) is held until more text is decoded.
        """

        self._chars.extend(text)
        result = []

        while True:

            # Get a char
            try:
                c = self._chars.popleft()
            except IndexError:
                break  # empty

            pending = self._pending
            if not pending:
                if c == ESC or c == "\r":
                    self._pending = c
                else:
                    _add_text(result, c)
            elif pending == "\r":
                self._pending = ""
                if c == "\n":
                    result.append(Newline())
                else:
                    result.append(CarriageReturn())
                    self._chars.appendleft(c)
            elif pending == ESC:
                if c == "[":
                    self._pending += c
                else:
                    # Not a CSI sequence, pass the escape char through
                    self._pending = ""
                    _add_text(result, ESC)
                    self._chars.appendleft(c)
            elif c.isdigit() or c == ";":
                self._pending += c
            elif "\x40" <= c <= "\x7e":
                # Final byte of a CSI sequence
                self._pending = ""
                seq = parse_csi(pending[2:], c)
                if seq is None:
                    _add_text(result, pending + c)
                else:
                    result.append(seq)
            else:
                # Malformed, pass through as text
                self._pending = ""
                _add_text(result, pending)
                self._chars.appendleft(c)

        # Flush the pending sequence
        if flush and self._pending:
            if self._pending == "\r":
                result.append(CarriageReturn())
            self._pending = ""

        return result


def parse_csi(params, final):
    """Get the EscapeSequence for a CSI sequence, or None if we don't emit it."""
    if not all(p.isdigit() for p in params.split(";") if p):
        return None
    if final == "m":
        if params in ("", "0"):
            return Reset()
        elif params == "1":
            return Bold()
        elif params.isdigit() and int(params) in COLOR_CODES:
            return SetColor(COLOR_CODES[int(params)])
    elif final == "K":
        if params == "2":
            return ClearLine()
    elif final == "A":
        if params == "":
            return CursorUp(1)
        elif params.isdigit():
            return CursorUp(int(params))
    return None


def _add_text(result, text):
    if result and isinstance(result[-1], str):
        result[-1] += text
    else:
        result.append(text)
