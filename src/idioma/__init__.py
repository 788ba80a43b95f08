"""idioma: consistent, idiomatic terminal messages for command-line tools."""

from .models import Label, MessageKind, Stream
from .report import (
    DEFAULT_EXIT_CODE,
    Message,
    custom,
    debug,
    error,
    exit_on_error,
    exit_with,
    fatal,
    info,
    message,
    report,
    success,
    warning,
)

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_EXIT_CODE",
    "Label",
    "Message",
    "MessageKind",
    "Stream",
    "custom",
    "debug",
    "error",
    "exit_on_error",
    "exit_with",
    "fatal",
    "info",
    "message",
    "report",
    "success",
    "warning",
]
