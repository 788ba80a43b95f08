"""Command-line demo for idioma."""

import click

from .models import MessageKind
from .report import DEFAULT_EXIT_CODE, custom, debug, exit_with, info, success, warning

# ---------------------------------------------------------------------------
# Demo script
# ---------------------------------------------------------------------------

def _showcase(color: bool | None) -> None:
    success("Yay, you actually managed to install this!", color=color)
    info("This is just a demo of what idioma can do.", color=color)
    custom("custom", fg="blue")("This is a custom label. You can make one too!").print(color=color)
    warning("This program will shut down with an error very soon!", color=color)
    debug("But you shouldn't worry, it's normal.", color=color)


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

@click.command()
@click.option(
    "--code", type=int, default=DEFAULT_EXIT_CODE, show_default=True,
    help="Exit code of the final fatal message.",
)
@click.option(
    "--no-exit", is_flag=True, default=False,
    help="Skip the final fatal message and exit successfully.",
)
@click.option(
    "--color/--no-color", default=None,
    help="Force coloured labels on or off (default: only on a terminal).",
)
@click.version_option(package_name="idioma")
def main(code: int, no_exit: bool, color: bool | None) -> None:
    """Print one message of every kind, then exit through a fatal error.

    \b
    Examples
    --------
    Default run (exits with status 1):

        idioma

    Custom exit code:

        idioma --code 3

    Keep going:

        idioma --no-exit
    """
    _showcase(color)
    if no_exit:
        return
    exit_with(MessageKind.FATAL, "Time to say bye-bye...", code, color=color)


if __name__ == "__main__":
    main()
