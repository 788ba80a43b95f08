"""Core data models for idioma."""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

import click


class Stream(Enum):
    """Terminal stream a message is written to."""

    STDOUT = "stdout"
    STDERR = "stderr"

    @property
    def err(self) -> bool:
        return self is Stream.STDERR

    def resolve(self) -> TextIO:
        """Return the live stream object.

        Looked up on every call so that redirection (and pytest capture)
        of ``sys.stdout`` / ``sys.stderr`` is honoured.
        """
        return sys.stderr if self.err else sys.stdout


@dataclass(frozen=True)
class Label:
    """The display prefix of a message and where it goes."""

    text: str
    fg: str | None = None
    stream: Stream = Stream.STDOUT

    def __post_init__(self) -> None:
        # click.style raises TypeError for an unknown colour.
        self.styled()

    def styled(self) -> str:
        """Return ``"<text>:"`` with the text coloured and bold."""
        return click.style(self.text, fg=self.fg, bold=True) + click.style(":", bold=True)

    def plain(self) -> str:
        return f"{self.text}:"


class MessageKind(Enum):
    """Closed set of built-in message kinds.

    Every kind maps to exactly one label, and so to exactly one stream.
    """

    SUCCESS = Label("success", "green", Stream.STDOUT)
    INFO = Label("info", "magenta", Stream.STDOUT)
    DEBUG = Label("debug", "blue", Stream.STDOUT)
    WARNING = Label("warning", "yellow", Stream.STDERR)
    ERROR = Label("error", "red", Stream.STDERR)
    FATAL = Label("fatal", "red", Stream.STDERR)

    @property
    def label(self) -> Label:
        return self.value

    @property
    def prefix(self) -> str:
        return self.value.text

    @property
    def stream(self) -> Stream:
        return self.value.stream
