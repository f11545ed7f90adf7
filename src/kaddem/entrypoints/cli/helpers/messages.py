"""Terminal message helpers for the KADDEM CLI.

Status lines go to stderr so stdout stays machine-readable (e.g. with
``kaddem contrats list --json``). Each line starts with an emoji glyph, or an
ASCII fallback when stderr cannot encode it.
"""

import click

CAUTION = ("⚠️", "[!]")
SUCCESS = ("✅", "[OK]")
FAILURE = ("❌", "[X]")


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(pair: tuple[str, str]) -> str:
    """Pick the emoji of an (emoji, fallback) pair if stderr supports it.

    Args:
        pair: One of `CAUTION`, `SUCCESS`, `FAILURE`.

    Returns:
        str: The emoji, or its ASCII fallback.
    """
    emoji, fallback = pair
    return emoji if _supports_character(emoji) else fallback


def _emit(pair: tuple[str, str], msg: str, color: str) -> None:
    click.secho(f"{glyph(pair)}  {msg}", fg=color, bold=True, err=True)


def warn(msg: str) -> None:
    """Emit a yellow warning line, e.g. ``⚠️  This will modify your database.``"""
    _emit(CAUTION, msg, "yellow")


def success(msg: str) -> None:
    """Emit a green success line, e.g. ``✅  Contrat 3 removed.``"""
    _emit(SUCCESS, msg, "green")


def error(msg: str) -> None:
    """Emit a red error line, e.g. ``❌  Cannot connect to database.``"""
    _emit(FAILURE, msg, "red")
