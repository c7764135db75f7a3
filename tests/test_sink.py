"""Tests for logging sink wrappers."""

from types import SimpleNamespace
from unittest.mock import Mock

from ansicss.sink import LOG_METHODS, log_ansi, wrap_methods, wrap_sink


def test_wrap_sink_converts_arguments() -> None:
    """The wrapped sink receives the assembled arguments."""
    sink = Mock(return_value="done")
    wrapped = wrap_sink(sink)
    assert wrapped("\x1b[31mError:\x1b[0m Something went wrong") == "done"
    sink.assert_called_once_with(
        "%cError:%c Something went wrong", "color: #e74c3c", ""
    )


def test_wrap_sink_keeps_objects() -> None:
    """Objects are forwarded as is, after the styles."""
    sink = Mock()
    obj = {"host": "localhost"}
    wrap_sink(sink)("\x1b[31mError:\x1b[0m", "Database failed:", obj)
    sink.assert_called_once_with(
        "%cError:%c Database failed:", "color: #e74c3c", "", obj
    )
    assert sink.call_args.args[-1] is obj


def test_wrap_sink_no_arguments() -> None:
    """Calls without arguments are forwarded without arguments."""
    sink = Mock()
    wrap_sink(sink)()
    sink.assert_called_once_with()


def test_wrap_sink_keyword_arguments() -> None:
    """Keyword arguments pass through untouched."""
    sink = Mock()
    wrap_sink(sink)("plain", end="")
    sink.assert_called_once_with("plain", end="")


def test_wrap_methods_object() -> None:
    """Each method is wrapped, missing ones fall back to log."""
    console = SimpleNamespace(log=Mock(), error=Mock())
    methods = wrap_methods(console)
    assert set(methods) == set(LOG_METHODS)

    methods["error"]("\x1b[31mboom")
    console.error.assert_called_once_with("%cboom", "color: #e74c3c")

    methods["warn"]("\x1b[33mcareful")
    console.log.assert_called_once_with("%ccareful", "color: #f39c12")


def test_wrap_methods_does_not_modify_target() -> None:
    """The target keeps its original methods."""
    log = Mock()
    console = SimpleNamespace(log=log)
    wrap_methods(console)
    assert console.log is log


def test_wrap_methods_mapping() -> None:
    """A mapping of callables is accepted."""
    info = Mock()
    methods = wrap_methods({"info": info}, names=("info", "debug"))
    methods["info"]("\x1b[1mhi")
    info.assert_called_once_with("%chi", "font-weight: bold")
    assert methods["debug"]("\x1b[1mignored") is None


def test_log_ansi() -> None:
    """log_ansi converts and calls the sink once."""
    sink = Mock()
    log_ansi("Hello", "\x1b[32mWorld\x1b[0m", 123, sink=sink)
    sink.assert_called_once_with("Hello%c %cWorld", "", "color: #2ecc71", 123)
