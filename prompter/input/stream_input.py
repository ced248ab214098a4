import sys
from typing import Optional, TextIO

from prompter.input.base import InputSource


class StreamInput(InputSource):
    """Scanner over a text stream, stdin by default.

    Keeps the unread remainder of the current line so that a token read
    followed by a line read behaves like a console scanner: the line read
    returns whatever followed the token.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream if stream is not None else sys.stdin
        self._pending: Optional[str] = None

    def _next_raw_line(self) -> str:
        line = self._stream.readline()
        if line == "":
            raise EOFError("end of input")
        if line.endswith("\r\n"):
            return line[:-2]
        if line.endswith(("\n", "\r")):
            return line[:-1]
        return line

    def read_line(self) -> str:
        if self._pending is not None:
            line, self._pending = self._pending, None
            return line
        return self._next_raw_line()

    def next_token(self) -> str:
        while True:
            if self._pending is None:
                self._pending = self._next_raw_line()
            rest = self._pending.lstrip()
            if not rest:
                # Blank line: keep waiting for a token
                self._pending = None
                continue
            token = rest.split(None, 1)[0]
            self._pending = rest[len(token):]
            return token
