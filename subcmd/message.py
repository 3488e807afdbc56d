"""Buffered terminal messages with optional error coloring."""

from typing import Literal

from rich.console import Console

ColorMode = Literal['auto', 'always', 'never']

ERROR_STYLE = 'red'


def make_console(*, stderr: bool = False, color: ColorMode = 'auto') -> Console:
    """Build a rich console for stdout or stderr honoring the color mode.

    In ``auto`` mode rich decides: color is used only when the stream is
    a terminal and neither ``NO_COLOR`` nor ``TERM=dumb`` is set.
    """
    if color == 'always':
        return Console(stderr=stderr, force_terminal=True, highlight=False, emoji=False)
    if color == 'never':
        return Console(stderr=stderr, color_system=None, highlight=False, emoji=False)
    return Console(stderr=stderr, highlight=False, emoji=False)


class Message:
    """A block of text to be printed, optionally flagged as an error."""

    def __init__(self, text: str = '', *, is_error: bool = False) -> None:
        self._lines: list[str] = [text] if text else []
        self.is_error = is_error

    def add_line(self, line: str = '') -> 'Message':
        """Append a line and return the message for chaining."""
        self._lines.append(line)
        return self

    def extend(self, text: str) -> 'Message':
        """Append every line of a multi-line block."""
        self._lines.extend(text.splitlines())
        return self

    @property
    def text(self) -> str:
        return '\n'.join(self._lines)

    def __str__(self) -> str:
        return self.text

    def print(self, console: Console) -> None:
        """Write the message, in red when it is an error and color is available."""
        console.print(
            self.text,
            style=ERROR_STYLE if self.is_error else None,
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
