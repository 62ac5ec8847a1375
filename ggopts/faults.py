"""
ggopts faults (errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every user-facing error.
  Codes are grouped by the phase that detects them (declarations, scanning,
  values) so logs and searches stay predictable.
- OptionException: base type that carries message + options and knows how to
  render itself in a friendly, lowercased and actionable way.
- trigger(): entry point for the command-line layer to surface a fault
  (raise it, or print it and exit when running as a shell).
- getdoc(): optional description lookup for a code from the host application.

UX goals
- Position-first messages: scan-time messages name the ordinal position of the
  offending token ("at third position").
- Short titles, one-sentence bodies, a single clear hint.

Integration
- The engine raises faults; it never prints or exits by itself.
- The command-line layer calls trigger(fault, shell=True, ...) to print the fault
  through rich and terminate with status 1.
"""
import copy
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset, coalesce

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes used across the engine (stable identifiers).

    grouping (by detecting phase)
    - declarations (1110x), raised while the registry is built
      • MALFORMED_DECLARATION, DUPLICATE_OPTION
    - scanning (112xx), raised while tokens are consumed
      • UNRECOGNIZED_OPTION, UNEXPECTED_VALUE, ARITY_MISMATCH, MISSING_VALUE
    - values (113xx), raised by the value coercers
      • MALFORMED_VALUE

    normalize() allows host remapping to custom labels while keeping code stability.
    """
    # --- declaration errors (111xx) ---
    MALFORMED_DECLARATION       = 11101
    DUPLICATE_OPTION            = 11102

    # --- scanning errors (112xx) ---
    UNRECOGNIZED_OPTION         = 11201
    UNEXPECTED_VALUE            = 11211
    ARITY_MISMATCH              = 11212
    MISSING_VALUE               = 11213

    # --- value errors (113xx) ---
    MALFORMED_VALUE             = 11301

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class OptionException(Exception):
    """
    base class of every fault raised by the engine.

    the message is the one-sentence body; everything else (title, code, hint,
    token, index, option, ...) travels in the read-only 'options' mapping.
    """
    __code__ = Unset
    __title__ = "option error"

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(coalesce(message, ""))
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return self.options.get("code", type(self).__code__)

    @property
    def title(self):
        return self.options.get("title", type(self).__title__)

    def __str__(self):
        return coalesce(self.message, "")

    def __rich__(self):
        main = __import__("__main__")

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(main, "__styles__", {}))

        colorful = self.options.get("colorful", True)
        fancy = self.options.get("fancy", False)

        def styler(style):
            return styles[style] if colorful else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            if isinstance(fragment, Text):
                return fragment
            return Text(str(fragment), style)

        prog = text(getattr(main, "__prog__", self.options.get("prog", "ggopts")), styler("prog-name"))
        code = self.code.normalize() if isinstance(self.code, FaultCode) else "-"

        header = Text.assemble(
            "[ ",
            prog,
            " — ",
            text(code, styler("code")),
            " | ",
            text(self.title.title(), styler("error-title")),
            " ]"
        )
        message = text(self.message, styler("error-message"))
        parts = [message]
        if hint := self.options.get("hint"):
            parts.append(Text.assemble(text(" → ", styler("hint-arrow")), text(hint, styler("hint"))))

        if fancy:
            width = None
            if "ratio" in self.options:
                width = int((console.width - 4) * self.options["ratio"])
            return Panel(Group(*parts), title=header, title_align="left", width=width)

        return Group(header, *parts)

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class MalformedDeclarationError(OptionException):
    __code__ = FaultCode.MALFORMED_DECLARATION
    __title__ = "malformed declaration"


class DuplicateOptionError(OptionException):
    __code__ = FaultCode.DUPLICATE_OPTION
    __title__ = "duplicate option"


class UnrecognizedOptionError(OptionException, KeyError):
    __code__ = FaultCode.UNRECOGNIZED_OPTION
    __title__ = "unrecognized option"


class UnexpectedValueError(OptionException):
    __code__ = FaultCode.UNEXPECTED_VALUE
    __title__ = "unexpected value"


class ArityMismatchError(OptionException):
    __code__ = FaultCode.ARITY_MISMATCH
    __title__ = "wrong number of values"


class MissingValueError(OptionException):
    __code__ = FaultCode.MISSING_VALUE
    __title__ = "missing value"


class MalformedValueError(OptionException):
    __code__ = FaultCode.MALFORMED_VALUE
    __title__ = "malformed value"


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see OptionException).
    - options are merged into the fault via __replace__(**options) before triggering.
    - in shell mode the fault is printed to stderr and the process exits with
      status 1; otherwise the fault is raised.

    typical options
    - shell, fancy, colorful, prog, and any context the reporter may want to show.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    the host application may expose a __docs__ mapping in __main__ where keys
    are FaultCode instances and values are short documentation strings.
    when not found, returns None.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "OptionException",
    "MalformedDeclarationError",
    "DuplicateOptionError",
    "UnrecognizedOptionError",
    "UnexpectedValueError",
    "ArityMismatchError",
    "MissingValueError",
    "MalformedValueError",
    "FaultCode",
    "trigger",
    "getdoc",
)
