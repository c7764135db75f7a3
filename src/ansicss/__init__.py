"""Ansicss, ANSI escape codes to CSS for %c styled consoles."""

from ansicss.ansi import has_ansi, strip_ansi
from ansicss.params import assemble_params
from ansicss.parser import ParseResult, Segment, iter_segments, parse
from ansicss.sink import log_ansi, wrap_methods, wrap_sink
from ansicss.style import StyleAttributes, apply_sgr, render_style

__all__ = [
    "ParseResult",
    "Segment",
    "StyleAttributes",
    "apply_sgr",
    "assemble_params",
    "has_ansi",
    "iter_segments",
    "log_ansi",
    "parse",
    "render_style",
    "strip_ansi",
    "wrap_methods",
    "wrap_sink",
]
