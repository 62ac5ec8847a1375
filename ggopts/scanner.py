"""
Scanner/dispatcher: walk the normalized tokens and dispatch values to options.

Algorithm
- Scanning: look the current key up in the registry.
  • no match  → keep the original token as a positional argument, advance by one.
  • match     → collect the value run: every following token up to (not
                including) the next token whose key is a registered name, or
                the end of input. Kinds that take no value (flags) collect
                nothing, so a word after a flag stays positional.
- The run length is checked against the option's arity, then Option.set() is
  called once per run token, left to right. The cursor skips the option token
  and its whole run.
- The first fault (declaration, registry or scan time) aborts the parse; there
  is no partial result.

Greedy runs
- The run is greedy with unbounded lookahead and no backtracking, so a
  positional argument written right after a value-bearing option is taken as
  one of its values:

      files a b c        → files=['a', 'b', 'c'], no positionals
      count 7 extra      → ArityMismatchError (count takes exactly one value)

  Place positional arguments before the options, or after a flag.
"""
import sys
from collections.abc import Mapping
from types import MappingProxyType

from .faults import *
from .options import Option
from .registry import Registry
from .tokens import tokenize
from .utils import Unset


class Namespace(Mapping):
    """
    Result of one parse.

    - arguments: tuple of positional arguments, original spelling, input order.
    - mapping interface: Option -> parsed value, for every declared option in
      declaration order (flags default to False, scalar options to their
      default or None, multi-value options to a list).
    - namespace["dest"] and namespace.dest look a value up by destination name,
      as long as exactly one option writes to it.
    """

    def __init__(self, values, arguments, /):
        self._values = MappingProxyType(dict(values))
        self._arguments = tuple(arguments)
        dests = {}
        for option in self._values:
            dests.setdefault(option.dest, []).append(option)
        self._dests = MappingProxyType(dests)

    @property
    def arguments(self):
        return self._arguments

    def _resolve(self, dest, /):
        match self._dests.get(dest, ()):
            case [option]:
                return option
            case []:
                raise UnrecognizedOptionError(
                    "no option writes to destination %r" % (dest,),
                    title="unrecognized option",
                    code=FaultCode.UNRECOGNIZED_OPTION,
                    hint="known destinations are: %s" % (", ".join(self._dests) or "none"),
                    name=dest,
                    docs=getdoc(FaultCode.UNRECOGNIZED_OPTION),
                )
            case options:
                raise UnrecognizedOptionError(
                    "destination %r is shared by %s" % (dest, ", ".join(repr(option.names) for option in options)),
                    title="ambiguous destination",
                    code=FaultCode.UNRECOGNIZED_OPTION,
                    hint="look the value up with the option itself",
                    name=dest,
                    docs=getdoc(FaultCode.UNRECOGNIZED_OPTION),
                )

    def __getitem__(self, key, /):
        if not isinstance(key, Option):
            key = self._resolve(key)
        try:
            return self._values[key]
        except KeyError:
            raise UnrecognizedOptionError(
                "option %r was not declared for this parse" % key.names,
                title="unrecognized option",
                code=FaultCode.UNRECOGNIZED_OPTION,
                hint="look values up with one of the declared options",
                option=key,
                docs=getdoc(FaultCode.UNRECOGNIZED_OPTION),
            ) from None

    def __getattr__(self, name, /):
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self[name]
        except UnrecognizedOptionError as fault:
            raise AttributeError(str(fault)) from None

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)

    def __eq__(self, other, /):
        if not isinstance(other, Namespace):
            return NotImplemented
        return list(self.__rich_repr__()) == list(other.__rich_repr__())

    __hash__ = None

    def __repr__(self):
        return "namespace(%s)" % ", ".join("%s=%r" % item for item in self.__rich_repr__())

    def __rich_repr__(self):
        yield "arguments", self._arguments
        for option, value in self._values.items():
            yield option.dest, value


def _collect(registry, keys, start, /):
    """Return the end (exclusive) of the value run starting at 'start'."""
    stop = start
    while stop < len(keys) and keys[stop] not in registry:
        stop += 1
    return stop


def scan(registry, argv, /):
    """
    Consume an argument vector against a built registry.

    Returns a Namespace; raises the first fault encountered.
    """
    if not isinstance(registry, Registry):
        raise TypeError("scan() first argument must be a registry")

    raw, keys = tokenize(argv)
    slots = {option: option.initial() for option in registry.options}
    arguments = []

    index = 0
    while index < len(keys):
        if keys[index] not in registry:
            arguments.append(raw[index])
            index += 1
            continue

        name = raw[index]
        option = registry.resolve(keys[index], token=name, index=index + 1)
        arity = option.arity

        start = index + 1
        stop = _collect(registry, keys, start) if arity.maximum != 0 else start
        run = raw[start:stop]

        arity.check(len(run), option=option, name=name, index=index + 1)

        if not run:
            option.set(slots, name=name, index=index + 1)
        for offset, token in enumerate(run, start + 1):
            option.set(slots, token, name=name, index=offset)

        index = stop

    return Namespace(slots, arguments)


def parse(options, argv=Unset, /):
    """
    Parse an argument vector against a sequence of option declarations.

    - options: iterable of Option, in declaration order.
    - argv: iterable of strings (program name excluded) or a single command-line
      string; defaults to sys.argv[1:].

    The registry is fully built (and validated) before any token is scanned.
    """
    registry = Registry(options)
    if argv is Unset:
        argv = sys.argv[1:]
    return scan(registry, argv)


__all__ = (
    "Namespace",
    "scan",
    "parse",
)
