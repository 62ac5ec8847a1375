"""
Console reporters for the command-line layer.

    error(x)    → "** ERROR: x"
    warning(x)  → "** WARNING: x"
    info(x)     → "** INFO: x"
    debug(x)    → "** DEBUG: x"   (only when 'verbose' is on)

Everything goes to stderr through rich. Palette entries (report-error,
report-warning, report-info, report-debug) can be overridden with a
__styles__ mapping in __main__.
"""
from collections import defaultdict

from rich.console import Console
from rich.text import Text

console = Console(stderr=True)

# switched on by the command-line layer (--verbose)
verbose = False
colorful = True


def _report(level, object, /):
    styles = defaultdict(str, {
        "report-error": "bold #EF4444",
        "report-warning": "bold #FFB400",
        "report-info": "bold #00E5FF",
        "report-debug": "#9CA3AF",
    } | getattr(__import__("__main__"), "__styles__", {}))

    label = Text("** %s:" % level.upper(), styles["report-" + level] if colorful else "")
    console.print(Text.assemble(label, " ", str(object)), highlight=False)


def error(object, /):
    _report("error", object)


def warning(object, /):
    _report("warning", object)


def info(object, /):
    _report("info", object)


def debug(object, /):
    if verbose:
        _report("debug", object)


__all__ = (
    "error",
    "warning",
    "info",
    "debug",
)
