"""OSC-8 terminal hyperlinks for CONTACTBOOK status lines.

Status lines point at the CSV file they describe. Terminals that understand
OSC-8 get a clickable ``file://`` link; everything else (pipes, CI logs,
unknown terminals) gets the plain label.
"""

import os
import sys
from typing import TextIO

# TERM_PROGRAM values known to render OSC-8 links
OSC8_TERMINAL_PROGRAMS = frozenset(
    {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}
)
OSC8_TERM_PREFIXES = ("alacritty", "konsole", "xterm-kitty")


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Best-effort check that `stream` is a terminal that renders OSC-8 links.

    Args:
        stream: Stream the link will be written to; defaults to ``sys.stderr``
            where CONTACTBOOK status lines go.

    Returns:
        bool: False for anything that is not a TTY or not a known terminal.
    """
    stream = stream or sys.stderr
    isatty = getattr(stream, "isatty", None)
    if isatty is None or not isatty():
        return False
    if (os.getenv("TERM_PROGRAM") or "").lower() in OSC8_TERMINAL_PROGRAMS:
        return True
    # Windows Terminal, then VTE-based terminals (GNOME Terminal, Tilix, ...)
    if os.getenv("WT_SESSION") or os.getenv("VTE_VERSION"):
        return True
    return (os.getenv("TERM") or "").startswith(OSC8_TERM_PREFIXES)


def hyperlink(
    url: str, label: str | None = None, stream: TextIO | None = None
) -> str:
    """Render `label` as a link to `url` when the terminal supports it.

    Args:
        url: Link target.
        label: Visible text; defaults to `url`.
        stream: Stream the result will be written to (see `supports_osc8`).

    Returns:
        str: The OSC-8 wrapped label (BEL terminated), or the bare label.
    """
    text = url if label is None else label
    if not supports_osc8(stream):
        return text
    return f"\x1b]8;;{url}\x07{text}\x1b]8;;\x07"
