"""ANSI SGR escape code utilities."""

import re

# SGR escape code regex pattern
SGR_REGEX = re.compile(
    r"""
    \x1b        # ESC character (0x1b)
    \[          # CSI - Control Sequence Introducer
    ([0-9;]*)   # Parameters: numeric codes separated by semicolons
    m           # Final byte: Select Graphic Rendition
    """,
    re.VERBOSE,
)


def has_ansi(text: str) -> bool:
    """Check if text contains at least one SGR escape sequence."""
    return SGR_REGEX.search(text) is not None


def strip_ansi(text: str) -> str:
    """Remove SGR escape codes from text.

    Only sequences terminated by ``m`` are removed, an escape without its
    terminator is left in place as ordinary text. Codes are not validated:
    ESC[999m is stripped just like ESC[31m.

    Removal repeats until no sequence is left, as removing one sequence can
    join the pieces of another around it.
    """
    text, count = SGR_REGEX.subn("", text)
    while count:
        text, count = SGR_REGEX.subn("", text)
    return text
