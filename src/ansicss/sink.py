"""Wrap logging sinks so that they accept ANSI styled arguments.

Nothing here patches global state: callers compose the wrapped sinks once,
where they set up their output, and use them in place of the originals.
"""

import functools
from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

from ansicss.params import assemble_params

Sink: TypeAlias = Callable[..., Any]

LOG_METHODS = ("log", "info", "warn", "error", "debug", "trace")


def wrap_sink(sink: Sink) -> Sink:
    """Return a sink that converts its positional arguments before forwarding.

    Arguments are passed through as objects, never stringified. Keyword
    arguments are forwarded untouched.
    """

    @functools.wraps(sink)
    def wrapper(*args: Any, **kwargs: Any) -> Any:  # noqa: ANN401
        if not args:
            return sink(**kwargs)
        return sink(*assemble_params(*args), **kwargs)

    return wrapper


def _noop(*_args: Any, **_kwargs: Any) -> None:  # noqa: ANN401
    pass


def _lookup(target: object, name: str) -> Sink | None:
    if isinstance(target, Mapping):
        method = target.get(name)
    else:
        method = getattr(target, name, None)
    return method if callable(method) else None


def wrap_methods(
    target: object,
    names: tuple[str, ...] = LOG_METHODS,
    fallback: str = "log",
) -> dict[str, Sink]:
    """Wrap the named logging methods of a console-like object.

    Target may be an object with methods or a mapping of callables. A name
    missing from the target falls back to the fallback method, then to a
    function that does nothing. The target itself is not modified.
    """
    default = _lookup(target, fallback) or _noop
    return {
        name: wrap_sink(_lookup(target, name) or default) for name in names
    }


def log_ansi(*args: Any, sink: Sink) -> Any:  # noqa: ANN401
    """Convert arguments and send them to sink in one call."""
    return wrap_sink(sink)(*args)
