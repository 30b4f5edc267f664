"""Terminal message helpers for the CONTACTBOOK CLI.

Status lines go to stderr so stdout stays reserved for contact listings that
may be piped into other tools. Each line starts with an emoji glyph, or an
ASCII stand-in when stderr cannot encode the emoji.
"""

import click

# kind -> (emoji, ascii fallback, color)
_STYLES: dict[str, tuple[str, str, str]] = {
    "warn": ("⚠️", "[!]", "yellow"),  # pragma: no mutate
    "success": ("✅", "[OK]", "green"),  # pragma: no mutate
    "error": ("❌", "[X]", "red"),  # pragma: no mutate
}


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded by the current stderr stream.

    The stream is looked up on every call; tests and pagers may swap it.
    """
    encoding = getattr(click.get_text_stream("stderr"), "encoding")
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(kind: str) -> str:
    """Return the marker for a message *kind* ("warn", "success" or "error")."""
    emoji, fallback, _ = _STYLES[kind]
    return emoji if _supports_character(emoji) else fallback


def _emit(kind: str, msg: str) -> None:
    color = _STYLES[kind][2]
    click.secho(f"{glyph(kind)}  {msg}", fg=color, bold=True, err=True)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to stderr."""
    _emit("warn", msg)


def success(msg: str) -> None:
    """Emit a green, bold success line to stderr.

    Example:
        ``✅  Loaded 3 contacts.``
    """
    _emit("success", msg)


def error(msg: str) -> None:
    """Emit a red, bold error line to stderr."""
    _emit("error", msg)
