from abc import ABC, abstractmethod


class InputSource(ABC):
    """Abstract line-oriented input source. Raises EOFError when exhausted."""

    @abstractmethod
    def read_line(self) -> str:
        """Return the rest of the current line, or the next whole line."""
        ...

    @abstractmethod
    def next_token(self) -> str:
        """Skip whitespace (across lines) and return the next token.

        The remainder of the token's line stays unread.
        """
        ...
