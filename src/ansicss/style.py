"""Style state machine for SGR codes, and CSS rendering of its states.

A style is the cumulative effect of the SGR codes seen since the last reset.
Each escape sequence moves the state machine from one style to the next;
styles are immutable, so a transition always builds a new value.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, fields, replace
from typing import TypeAlias

from ansicss.colors import (
    ANSI_COLORS,
    BACKGROUND_CODES,
    FOREGROUND_CODES,
    INVERSE_BACKGROUND,
    INVERSE_COLOR,
)


@dataclass(frozen=True)
class StyleAttributes:
    """Active style attributes, None when not set.

    Field order is the CSS rendering order.
    """

    background_color: str | None = None
    color: str | None = None
    font_weight: str | None = None
    font_style: str | None = None
    text_decoration: str | None = None
    opacity: str | None = None

    def is_empty(self) -> bool:
        """Check if no attribute is set."""
        return self == EMPTY_STYLE


EMPTY_STYLE = StyleAttributes()

Transition: TypeAlias = Callable[[StyleAttributes], StyleAttributes]


# Underline and strikethrough are two values of the same text-decoration
# property: they cannot be active together, and 24 or 29 clears both.
TRANSITIONS: dict[int, Transition] = {
    0: lambda _: EMPTY_STYLE,
    1: lambda s: replace(s, font_weight="bold"),
    2: lambda s: replace(s, opacity="0.5"),
    3: lambda s: replace(s, font_style="italic"),
    4: lambda s: replace(s, text_decoration="underline"),
    7: lambda s: replace(
        s, color=INVERSE_COLOR, background_color=INVERSE_BACKGROUND
    ),
    9: lambda s: replace(s, text_decoration="line-through"),
    22: lambda s: replace(s, font_weight=None, opacity=None),
    23: lambda s: replace(s, font_style=None),
    24: lambda s: replace(s, text_decoration=None),
    27: lambda s: replace(s, color=None, background_color=None),
    29: lambda s: replace(s, text_decoration=None),
    39: lambda s: replace(s, color=None),
    49: lambda s: replace(s, background_color=None),
}


def apply_code(style: StyleAttributes, code: int) -> StyleAttributes:
    """Apply a single SGR code. Unknown codes leave the style unchanged."""
    if code in FOREGROUND_CODES:
        return replace(style, color=ANSI_COLORS.get(code))
    if code in BACKGROUND_CODES:
        return replace(style, background_color=ANSI_COLORS.get(code))
    transition = TRANSITIONS.get(code)
    if transition is None:
        return style
    return transition(style)


def apply_codes(
    style: StyleAttributes, codes: Iterable[int]
) -> StyleAttributes:
    """Apply SGR codes from left to right.

    A reset (code 0) discards everything before it, but codes after it in the
    same sequence still apply: ``0;31`` is plain red.
    """
    for code in codes:
        style = apply_code(style, code)
    return style


def apply_sgr(style: StyleAttributes, params: str) -> StyleAttributes:
    """Apply the parameters of one escape sequence, as in ESC[<params>m.

    Empty parameters are an implicit reset. Empty fields between semicolons
    are ignored.
    """
    if not params:
        return EMPTY_STYLE
    codes = (int(part) for part in params.split(";") if part.isdecimal())
    return apply_codes(style, codes)


def _css_property(field_name: str) -> str:
    return field_name.replace("_", "-")


CSS_PROPERTIES = tuple(
    (field.name, _css_property(field.name)) for field in fields(StyleAttributes)
)


def render_style(style: StyleAttributes) -> str:
    """Render a style as CSS declarations, e.g. "color: #e74c3c; opacity: 0.5".

    The empty style renders as the empty string.
    """
    if style.is_empty():
        return ""
    return "; ".join(
        f"{css_name}: {value}"
        for name, css_name in CSS_PROPERTIES
        if (value := getattr(style, name)) is not None
    )
