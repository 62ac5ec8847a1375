"""
Help renderer.

- render(options) -> str
  Plain listing, one line per declaration in declaration order:

      "   -d [ --description     ] Add a description when uploading a gist."
      "      [ --help            ] Print this help message."
      "  invalid option at position 3"

  Declarations whose names cannot be derived are reported inline with their
  0-based position; rendering never raises for them.

- display(options, *, console=..., colorful=True, fancy=False, title=...)
  Same listing printed through rich, with styled names and an optional panel.

Customization
- Define a mapping named __styles__ in __main__ to override palette entries
  (short-name, long-name, brackets, description, invalid, panel-title).
- __main__.__prog__ names the panel title when no explicit title is given.
"""
from collections import defaultdict

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .faults import MalformedDeclarationError
from .options import Option
from .utils import Unset, coalesce

_TEMPLATE = "  %3s [ %-17s ] %s"


def _entries(options):
    """
    Yield (index, short, long, descr) per declaration; short is None when the
    declaration is malformed.
    """
    for index, option in enumerate(options):
        if not isinstance(option, Option):
            raise TypeError("help entries must be options, not %s" % type(option).__name__)
        try:
            short, long = option.candidates(index=index)
        except MalformedDeclarationError:
            yield index, None, None, option.descr
            continue
        yield index, "-" + short if short else "", "--" + long if long else "", option.descr


def render(options, /):
    lines = []
    for index, short, long, descr in _entries(options):
        if short is None:
            lines.append("  invalid option at position %d" % index)
        else:
            lines.append((_TEMPLATE % (short, long, descr)).rstrip())
    return "\n".join(lines)


def display(options, /, *, console=Unset, colorful=True, fancy=False, title=Unset):
    """
    Print the help listing through rich.

    Parameters
    - console: rich Console to print on (stdout console by default).
    - colorful: apply the palette; plain text otherwise.
    - fancy: wrap the listing in a panel titled with 'title' (or __main__.__prog__).
    """
    main = __import__("__main__")
    console = coalesce(console, Console())

    styles = defaultdict(str, {
        "short-name": "bold #22C55E",  # GREEN short names
        "long-name": "bold #00E6FF",  # CYAN long names
        "brackets": "#6B7280",  # dim slate
        "description": "#9CA3AF",  # muted gray
        "invalid": "bold #EF4444",  # RED malformed declarations
        "panel-title": "bold #FF4D94",  # magenta branding
    } | getattr(main, "__styles__", {}))

    def styler(style):
        return styles[style] if colorful else ""

    lines = []
    for index, short, long, descr in _entries(options):
        if short is None:
            lines.append(Text.assemble("  ", ("invalid option at position %d" % index, styler("invalid"))))
            continue
        line = Text.assemble(
            "  ",
            ("%3s" % short, styler("short-name")),
            (" [ ", styler("brackets")),
            ("%-17s" % long, styler("long-name")),
            (" ] ", styler("brackets")),
        )
        if descr:
            line.append(Text(descr, styler("description")) if isinstance(descr, str) else descr)
        line.rstrip()
        lines.append(line)

    renderable = Group(*lines)

    if fancy:
        name = coalesce(title, getattr(main, "__prog__", "options"))
        renderable = Panel(
            renderable,
            title=Text.assemble("[", " ", f"{name} HELP".upper(), " ", "]", style=styler("panel-title")),
            title_align="left",
        )

    console.print(renderable)


__all__ = (
    "render",
    "display",
)
