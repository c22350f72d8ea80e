"""Line rendering for suite output using Rich."""

from __future__ import annotations

from enum import Enum
from typing import IO, TYPE_CHECKING

from rich.console import Console
from rich.text import Text


if TYPE_CHECKING:
    from rushb.config import SuiteSettings


class Style(Enum):
    """Semantic style of an output line."""

    TITLE = "title"
    OK = "ok"
    FAIL = "fail"
    SKIP = "skip"
    INFO = "info"
    PLAIN_BOLD = "plain_bold"


# style -> (tag, tag style, text style)
_STYLE_CONFIG: dict[Style, tuple[str | None, str | None, str | None]] = {
    Style.TITLE: (None, None, "bold"),
    Style.OK: ("Done", "bright_green", None),
    Style.FAIL: ("Fail", "bright_red", None),
    Style.SKIP: ("Skip", "bright_blue", "bright_black"),
    Style.INFO: (None, None, "bright_black"),
    Style.PLAIN_BOLD: (None, None, "bold"),
}


class Printer:
    """Writes indented, styled lines to the output stream.

    Parameters
    ----------
    console : Console | None
        Console to write to. Built from ``color``/``width``/``file`` when omitted.
    color : bool
        Emit ANSI styling even when the stream is not a terminal.
    width : int | None
        Console width override.
    file : IO[str] | None
        Stream to write to, stdout by default.
    """

    def __init__(
        self,
        console: Console | None = None,
        *,
        color: bool = True,
        width: int | None = None,
        file: IO[str] | None = None,
    ) -> None:
        if console is None:
            console = Console(
                file=file,
                force_terminal=True if color else None,
                color_system="standard" if color else None,
                highlight=False,
                width=width,
            )
        self.console = console

    @classmethod
    def from_settings(cls, settings: SuiteSettings, *, file: IO[str] | None = None) -> Printer:
        return cls(color=settings.color, width=settings.width, file=file)

    def format(self, text: str, style: Style, indent: int = 0) -> Text:
        """Build the styled line for ``text`` at ``indent`` spaces."""
        tag, tag_style, text_style = _STYLE_CONFIG[style]
        line = Text(" " * indent)
        if tag:
            line.append("[")
            line.append(tag, style=tag_style)
            line.append("] ")
        line.append(text, style=text_style)
        return line

    def render(self, text: str, style: Style, indent: int = 0) -> None:
        self._write(self.format(text, style, indent))

    def plain(self, text: str, indent: int = 0) -> None:
        self._write(Text(" " * indent + text))

    def counter(self, label: str, value: int, color: str | None, indent: int = 0) -> None:
        line = Text(" " * indent)
        line.append(label, style=color)
        line.append(f": {value}")
        self._write(line)

    def blank(self) -> None:
        self._write(Text(""))

    def _write(self, line: Text) -> None:
        self.console.print(line, soft_wrap=True)
