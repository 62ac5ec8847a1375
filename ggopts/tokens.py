"""
Tokenizer: reduce raw arguments to comparable lookup keys.

normalize() strips at most one leading dash marker:
- "--name" -> "name"
- "-n"     -> "n"
- "name"   -> "name"

Only one marker is removed, so "---x" becomes "-x" and "--" becomes "".
The empty key never matches a declared name, so a lone "-" or "--" stays
positional.

Note that a bare word equal to a declared name ("verbose") is treated as that
option by the scanner, exactly like "--verbose" or "-verbose".
"""
import shlex
from collections.abc import Iterable


def normalize(token, /):
    if not isinstance(token, str):
        raise TypeError("normalize() argument must be a string")
    if token.startswith("--"):
        return token[2:]
    if token.startswith("-"):
        return token[1:]
    return token


def tokenize(argv, /):
    """
    Normalize a whole argument vector once.

    argv is an iterable of strings, or a single command-line string that is
    split with shell rules. Returns (raw, keys): both lists, index-aligned.
    """
    if isinstance(argv, str):
        argv = shlex.split(argv)
    elif not isinstance(argv, Iterable):
        raise TypeError("tokenize() argument must be a string or an iterable of strings")

    raw = list(argv)
    for token in raw:
        if not isinstance(token, str):
            raise TypeError("tokenize() arguments must be strings, not %s" % type(token).__name__)
    return raw, list(map(normalize, raw))


__all__ = (
    "normalize",
    "tokenize",
)
