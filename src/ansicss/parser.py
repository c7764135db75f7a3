"""Parser turning ANSI styled text into a %c format string and CSS styles.

Browser consoles do not interpret escape codes, but their printf-style
formatting accepts a ``%c`` directive that applies the next argument as CSS
to the text that follows it. The parser splits text into segments sharing
one style, and emits each one as ``%c`` followed by its text.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field

from ansicss.ansi import SGR_REGEX, has_ansi
from ansicss.style import (
    EMPTY_STYLE,
    StyleAttributes,
    apply_sgr,
    render_style,
)

PLACEHOLDER = "%c"


@dataclass(frozen=True)
class Segment:
    """Run of text displayed with a single style."""

    text: str
    style: StyleAttributes


@dataclass
class ParseResult:
    """Format string with one placeholder per entry in styles."""

    format_string: str
    styles: list[str] = field(default_factory=list)

    def to_params(self) -> list[str]:
        """Arguments for a printf-style sink, format string first."""
        return [self.format_string, *self.styles]


def iter_segments(text: str) -> Iterator[Segment]:
    """Split text at escape sequences, yielding non-empty styled segments.

    Text before an escape sequence is styled by the state preceding it, the
    escape only affects the text that follows.
    """
    style = EMPTY_STYLE
    last_index = 0
    for match in SGR_REGEX.finditer(text):
        if match.start() > last_index:
            yield Segment(text[last_index : match.start()], style)
        style = apply_sgr(style, match.group(1))
        last_index = match.end()
    if last_index < len(text):
        yield Segment(text[last_index:], style)


def parse(text: str) -> ParseResult:
    """Convert ANSI styled text to a format string and a list of CSS styles.

    Text without any escape sequence is returned unchanged with no styles.
    Otherwise every segment gets a placeholder, including unstyled ones which
    get an empty style, so that a previous style does not carry over.

    >>> parse("\\x1b[31mRed text\\x1b[0m")
    ParseResult(format_string='%cRed text', styles=['color: #e74c3c'])
    """
    if not has_ansi(text):
        return ParseResult(text)
    parts = []
    styles = []
    for segment in iter_segments(text):
        parts.append(PLACEHOLDER + segment.text)
        styles.append(render_style(segment.style))
    return ParseResult("".join(parts), styles)
