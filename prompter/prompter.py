import logging
from typing import Callable, Optional, Sequence, TypeVar

from rich.console import Console

from prompter.config import PrompterConfig
from prompter.input.base import InputSource
from prompter.input.stream_input import StreamInput
from prompter.parsing.numbers import NumberParser
from prompter.parsing.prompt_text import normalize_prompt, yes_no_prompt
from prompter.ui.console import console as default_console

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Prompter:
    """Prompts on the console and reads typed values, re-prompting until valid.

    Every read blocks until the input source supplies an acceptable value;
    there is no retry limit. When the source is exhausted the ``EOFError``
    it raises propagates to the caller. Not safe to share across threads.

    A custom console must carry the "prompt" and "error" styles from
    ``prompter.ui.console.theme``.
    """

    def __init__(
        self,
        source: Optional[InputSource] = None,
        console: Optional[Console] = None,
        config: Optional[PrompterConfig] = None,
    ):
        self._source = source if source is not None else StreamInput()
        self._console = console if console is not None else default_console
        self._config = config or PrompterConfig()
        self._numbers = NumberParser(
            grouping_separator=self._config.grouping_separator,
            decimal_separator=self._config.decimal_separator,
        )

    def _show_prompt(self, prompt: Optional[str]) -> None:
        # Plain text, no newline: the answer is typed on the same line
        self._console.print(
            normalize_prompt(prompt, self._config),
            end="",
            style="prompt",
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )

    def _show_error(self, message: str) -> None:
        self._console.print(
            message, style="error", markup=False, emoji=False, highlight=False
        )

    def read_line_allow_empty(self, prompt: Optional[str]) -> str:
        """Read one line, returned verbatim. An empty line is valid."""
        self._show_prompt(prompt)
        return self._source.read_line()

    def read_line_non_empty(self, prompt: Optional[str]) -> str:
        """Read lines until one is not empty. Whitespace counts as content."""
        while True:
            line = self.read_line_allow_empty(prompt)
            if line:
                return line
            logger.debug("Empty response to %r, asking again", prompt)

    def read_yes_no(self, prompt: Optional[str]) -> str:
        """Ask until the answer starts with y or n (any case); return "y" or "n".

        " (y/n): " is appended unless the prompt already ends with a
        parenthesized hint and a colon.
        """
        prompt = yes_no_prompt(prompt, self._config)
        while True:
            answer = self.read_line_non_empty(prompt).lower()
            first = answer[:1]
            if first in ("y", "n"):
                return first
            logger.debug("Not a yes/no answer: %r", answer)

    def read_from_options(self, prompt: Optional[str], options: Sequence[str]) -> str:
        """Ask until the answer exactly matches one of ``options``."""
        while True:
            answer = self.read_line_non_empty(prompt)
            if answer in options:
                return answer
            logger.debug("%r is not one of %r", answer, list(options))

    def _read_number(
        self, prompt: Optional[str], parse: Callable[[str], T], error: str
    ) -> T:
        while True:
            self._show_prompt(prompt)
            token = self._source.next_token()
            try:
                value = parse(token)
            except ValueError as exc:
                logger.debug("Rejected numeric input: %s", exc)
                self._show_error(error)
                # Drop the rest of the bad line before asking again
                self._source.read_line()
                continue
            self._source.read_line()
            return value

    def read_int(self, prompt: Optional[str]) -> int:
        """Read a 32-bit integer; digit grouping such as ``1,234`` is accepted."""
        return self._read_number(prompt, self._numbers.parse_int, self._config.int_error)

    def read_long(self, prompt: Optional[str]) -> int:
        """Read a 64-bit integer; digit grouping is accepted."""
        return self._read_number(
            prompt, self._numbers.parse_long, self._config.long_error
        )

    def read_double(self, prompt: Optional[str]) -> float:
        return self._read_number(
            prompt, self._numbers.parse_double, self._config.double_error
        )

    def pause(self) -> None:
        """Show "Press <Enter> to continue: " and wait for any line."""
        self.read_line_allow_empty("")
