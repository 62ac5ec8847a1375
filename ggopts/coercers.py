"""
Value coercers: turn one textual token into a typed value.

Each coercer takes the raw token and returns the converted value, or raises
MalformedValueError naming the offending token. Coercers are pure; they never
touch a destination (see Option.set for that).

- integer(token): base-10 signed integer, ASCII digits only ("+7", "-12", "0042").
- string(token): the token verbatim (no trimming, no quoting rules).
- presence(): the value stored by flags, always True.
"""
import re

from .faults import FaultCode, MalformedValueError, getdoc
from .utils import ordinal

# optional sign followed by at least one ASCII digit; int() alone would also
# accept whitespace, underscores and non-ASCII digits
_INTEGER = re.compile(r"[+-]?[0-9]+")


def integer(token, /, *, name=None, index=None, option=None):
    """
    Convert a token into an int.

    The keyword context (the option name as typed, the 1-based position of the
    token, the owning option) only shapes the fault message.
    """
    if not isinstance(token, str):
        raise TypeError("integer() argument must be a string")
    if _INTEGER.fullmatch(token):
        try:
            return int(token, 10)
        except ValueError:
            # over the interpreter digit limit (sys.set_int_max_str_digits)
            pass

    shown = token if len(token) <= 32 else token[:29] + "..."
    message = "invalid integer value %r" % shown
    if name:
        message += " for option %r" % name
    if index:
        message += " at %s position" % ordinal(index)
    raise MalformedValueError(
        message,
        title="malformed integer",
        code=FaultCode.MALFORMED_VALUE,
        hint="pass a whole decimal number such as 7 or -12",
        token=token,
        name=name,
        index=index,
        option=option,
        docs=getdoc(FaultCode.MALFORMED_VALUE),
    )


def string(token, /, *, name=None, index=None, option=None):
    """Return the token unchanged."""
    if not isinstance(token, str):
        raise TypeError("string() argument must be a string")
    return token


def presence():
    return True


__all__ = (
    "integer",
    "string",
    "presence",
)
