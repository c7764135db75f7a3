"""Assemble the arguments of a variadic logging call for a %c sink."""

from typing import Any

from ansicss.parser import PLACEHOLDER, parse

# Separator between string arguments, the console would otherwise insert a
# space that inherits the style of the previous argument.
SEPARATOR = PLACEHOLDER + " "
SEPARATOR_STYLE = ""


def assemble_params(*args: Any) -> list[Any]:  # noqa: ANN401
    """Build the argument list to pass to a printf-style logging sink.

    String arguments are converted and merged into a single format string,
    followed by their styles, then by the non-string arguments in their
    original order. When no string carries an escape sequence, the arguments
    are returned unchanged so plain calls are not altered.

    >>> assemble_params("\\x1b[31mError:\\x1b[0m", "\\x1b[33mWarning\\x1b[0m")
    ['%cError:%c %cWarning', 'color: #e74c3c', '', 'color: #f39c12']
    """
    if len(args) == 1 and isinstance(args[0], str):
        result = parse(args[0])
        if not result.styles:
            return [args[0]]
        return result.to_params()

    strings = [arg for arg in args if isinstance(arg, str)]
    others = [arg for arg in args if not isinstance(arg, str)]
    if not strings:
        return list(args)

    parts: list[str] = []
    styles: list[str] = []
    has_styles = False
    for i, text in enumerate(strings):
        if i > 0:
            parts.append(SEPARATOR)
            styles.append(SEPARATOR_STYLE)
        result = parse(text)
        parts.append(result.format_string)
        styles.extend(result.styles)
        has_styles = has_styles or bool(result.styles)

    if not has_styles:
        return list(args)
    return ["".join(parts), *styles, *others]
