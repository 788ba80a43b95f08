"""Message reporting: print labelled messages and optionally exit.

Every public function here funnels into :func:`report` (print a line) or
:func:`exit_with` (print a line, then terminate). Nothing is cached between
calls; the kind-to-stream mapping lives on :class:`MessageKind`.
"""

import sys
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import NoReturn

import click

from .models import Label, MessageKind, Stream

DEFAULT_EXIT_CODE = 1

# Errors a write to a closed or broken terminal stream can raise.
_WRITE_ERRORS = (OSError, ValueError)


def _label_of(kind: MessageKind | Label) -> Label:
    if isinstance(kind, MessageKind):
        return kind.label
    if isinstance(kind, Label):
        return kind
    raise TypeError(f"Expected a MessageKind or Label, got {type(kind).__name__}")


@dataclass(frozen=True)
class Message:
    """A label plus an already-formatted text payload."""

    label: Label
    text: str

    def render(self, color: bool = False) -> str:
        """Return the message line without its trailing newline.

        An empty text renders as the prefix alone.
        """
        prefix = self.label.styled() if color else self.label.plain()
        if not self.text:
            return prefix
        return f"{prefix} {self.text}"

    def print(self, color: bool | None = None) -> bool:
        return report(self.label, self.text, color=color)

    def exit(self, code: int = DEFAULT_EXIT_CODE, color: bool | None = None) -> NoReturn:
        exit_with(self.label, self.text, code, color=color)


def message(kind: MessageKind | Label, text: object) -> Message:
    """Build a :class:`Message` without printing it."""
    return Message(_label_of(kind), str(text))


def report(kind: MessageKind | Label, text: object, *, color: bool | None = None) -> bool:
    """Write ``"<prefix>: <text>"`` to the stream mapped from ``kind``.

    Parameters
    ----------
    kind:
        A built-in :class:`MessageKind` or a custom :class:`Label`.
    text:
        The payload. Converted with ``str()``; multi-line text is written
        as-is.
    color:
        ``None`` styles the prefix only when the stream is a terminal.
        ``True`` / ``False`` force styling on or off.

    Returns
    -------
    bool
        ``True`` if the line was written, ``False`` if the stream was closed
        or broken. Write failures are never raised.
    """
    msg = message(kind, text)
    stream = msg.label.stream.resolve()
    try:
        click.echo(msg.render(color=True), file=stream, color=color)
    except _WRITE_ERRORS:
        return False
    return True


def exit_with(
    kind: MessageKind | Label,
    text: object,
    code: int = DEFAULT_EXIT_CODE,
    *,
    color: bool | None = None,
) -> NoReturn:
    """Report ``text`` and terminate the process with ``code``.

    ``click.echo`` flushes after writing, so the message is out before the
    process exits. A failed write does not prevent the exit.

    The exit is a :class:`SystemExit`, so the caller's ``finally`` blocks
    and ``except BaseException`` handlers still run on the way out.
    """
    report(kind, text, color=color)
    sys.exit(code)


# ---------------------------------------------------------------------------
# Convenience wrappers
# ---------------------------------------------------------------------------

def success(text: object, *, color: bool | None = None) -> bool:
    return report(MessageKind.SUCCESS, text, color=color)


def info(text: object, *, color: bool | None = None) -> bool:
    return report(MessageKind.INFO, text, color=color)


def debug(text: object, *, color: bool | None = None) -> bool:
    return report(MessageKind.DEBUG, text, color=color)


def warning(text: object, *, color: bool | None = None) -> bool:
    return report(MessageKind.WARNING, text, color=color)


def error(text: object, *, color: bool | None = None) -> bool:
    return report(MessageKind.ERROR, text, color=color)


def fatal(text: object, code: int = DEFAULT_EXIT_CODE, *, color: bool | None = None) -> NoReturn:
    exit_with(MessageKind.FATAL, text, code, color=color)


def custom(text: str, fg: str | None = None, *, err: bool = False) -> Callable[[object], Message]:
    """Declare a reusable custom label.

    >>> lol = custom("lol", fg="cyan")
    >>> lol("Did you expect something serious here?").print()
    """
    label = Label(text, fg, Stream.STDERR if err else Stream.STDOUT)

    def make(payload: object) -> Message:
        return message(label, payload)

    return make


@contextmanager
def exit_on_error(
    *exc_types: type[BaseException],
    code: int = DEFAULT_EXIT_CODE,
) -> Iterator[None]:
    """Turn the given exceptions into an ``error`` message and an exit.

    Works as a context manager or a decorator. Exceptions not listed in
    ``exc_types`` (default: :class:`Exception`) propagate unchanged. An
    exit already requested inside the block always keeps its own code, even
    when ``exc_types`` includes :class:`BaseException`.

    >>> with exit_on_error(FileNotFoundError):
    ...     data = Path("missing.txt").read_text()
    """
    caught = exc_types or (Exception,)
    try:
        yield
    except SystemExit:
        raise
    except caught as exc:
        exit_with(MessageKind.ERROR, exc, code)
