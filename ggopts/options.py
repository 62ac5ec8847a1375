r"""
ggopts option declarations.

Overview
- Kind: closed set of value kinds an option can carry.
  • FLAG            presence only, stores True
  • INTEGER         one base-10 integer, overwrites
  • STRING          one verbatim token, overwrites
  • MULTI_INTEGER   one or more integers, appended in input order
  • MULTI_STRING    one or more verbatim tokens, appended in input order

- Arity: the value-count contract of a kind (minimum, maximum; maximum None = unbounded).
  Arity.check() raises the matching fault for a collected value run.

- Option: a single declaration. It keeps the raw declaration string untouched
  ("d,description"); names are derived on demand by candidates(), so a
  malformed declaration can still be described by the help renderer.

- Factories
  • flag(...), integer(...), string(...), integers(...), strings(...)
  Each returns an Option of the corresponding kind.

Declaration grammar
- "<short>,<long>", "<short>" or "<long>", with arbitrary whitespace around each part.
- Names carry no dashes; the tokenizer strips them from the input instead.
- With two names the shorter one is the short name, whatever the declared order;
  on a tie the first declared part is the short name.
- A single name is treated as the long name.

Destinations
- Options never hold caller references. Parsed values are written into the
  per-parse slot mapping handed to Option.set(), keyed by the Option itself.
  Two options may share a dest; only their names have to be distinct.
- 'dest' is the name a result is looked up by. It defaults to the long name
  (short name when there is none) with '-' replaced by '_'.

Quick example:
    >>> count = integer("c,count", "How many times.")
    >>> count.candidates()
    ('c', 'count')
    >>> count.arity
    Arity(minimum=1, maximum=1)
    >>> slots = {}
    >>> count.set(slots, "7")
    >>> slots[count]
    7
"""
import functools
import operator
import re
from collections import namedtuple
from collections.abc import Iterable
from enum import Enum

from rich.text import Text

from . import coercers
from .faults import *
from .utils import *


class Kind(Enum):
    """
    closed set of option kinds.

    arity and value application dispatch on the kind with a single match each
    (see Option.arity and Option.set).
    """
    FLAG = "flag"
    INTEGER = "integer"
    STRING = "string"
    MULTI_INTEGER = "multi-integer"
    MULTI_STRING = "multi-string"

    @property
    def multiple(self):
        return self in (Kind.MULTI_INTEGER, Kind.MULTI_STRING)

    def __repr__(self):
        return "%s.%s" % (type(self).__name__, self.name)


class Arity(namedtuple("Arity", ("minimum", "maximum"))):
    """
    value-count contract of an option kind.

    - Arity(0, 0): no value (flags)
    - Arity(1, 1): exactly one value
    - Arity(1, None): one or more values
    """
    __slots__ = ()

    def accepts(self, count, /):
        return count >= self.minimum and (self.maximum is None or count <= self.maximum)

    def check(self, count, /, *, option=None, name=None, index=None):
        """
        validate the length of a collected value run.

        raises
        - UnexpectedValueError: the kind takes no value but count > 0.
        - MissingValueError: the kind needs at least one value and count == 0.
        - ArityMismatchError: the kind takes an exact number of values and count differs.
        """
        if self.accepts(count):
            return

        label = repr(name) if name else "option"
        where = " at %s position" % ordinal(index) if index else ""

        if self.maximum == 0:
            raise UnexpectedValueError(
                "flag %s%s takes no value but %d %s given" % (label, where, count, "was" if count == 1 else "were"),
                title="flag cannot take a value",
                code=FaultCode.UNEXPECTED_VALUE,
                hint="remove the value after %s" % label,
                name=name,
                index=index,
                option=option,
                expected=0,
                actual=count,
                docs=getdoc(FaultCode.UNEXPECTED_VALUE),
            )

        if self.maximum is None:
            raise MissingValueError(
                "option %s%s requires at least %d value" % (label, where, self.minimum),
                title="missing value",
                code=FaultCode.MISSING_VALUE,
                hint="pass one or more values after %s" % label,
                name=name,
                index=index,
                option=option,
                expected=self.minimum,
                actual=count,
                docs=getdoc(FaultCode.MISSING_VALUE),
            )

        raise ArityMismatchError(
            "option %s%s expects %d %s but %d %s given" % (
                label, where,
                self.minimum, "value" if self.minimum == 1 else "values",
                count, "was" if count == 1 else "were",
            ),
            title="wrong number of values",
            code=FaultCode.ARITY_MISMATCH,
            hint="values run until the next known option; pass exactly %d after %s" % (self.minimum, label),
            name=name,
            index=index,
            option=option,
            expected=self.minimum,
            actual=count,
            docs=getdoc(FaultCode.ARITY_MISMATCH),
        )


class DeclarationType(type):
    """
    Metaclass that exposes declaration fields as read-only properties.

    - Every name listed in __introspectable__ becomes a mirror() property over
      the private "_<name>" attribute.
    - Provides stable __repr__/__rich_repr__ implementations for diagnostics.
    - __typename__ is the hyphenated lower-case class name, used in messages.
    """
    __introspectable__ = ()

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
        )

        @rename("__repr__")
        def __repr__(self):
            return f"{type(self).__typename__}({
                ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))
            })"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            for name in type(self).__introspectable__:
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def _sanitize_metadata(cls, metadata, /):
    """
    Internal: validate declaration metadata types.

    Names are deliberately NOT parsed here; a malformed name string is a
    declaration fault reported when the registry is built (and rendered inline
    by the help renderer), not a construction error.

    Raises
    - TypeError: wrong types, or a default that does not fit the kind.
    - ValueError: empty 'dest'.
    """
    if not isinstance(metadata["names"], str):
        raise TypeError(f"{cls.__typename__} names must be a string")

    if not isinstance(descr := metadata["descr"], str | Text | Unset):
        raise TypeError(f"{cls.__typename__} 'descr' must be a string")
    metadata["descr"] = coalesce(descr, "")

    if not isinstance(kind := metadata["kind"], Kind):
        raise TypeError(f"{cls.__typename__} 'kind' must be a Kind")

    if not isinstance(dest := metadata["dest"], str | Unset):
        raise TypeError(f"{cls.__typename__} 'dest' must be a string")
    elif isinstance(dest, str) and not (dest := dest.strip()):
        raise ValueError(f"{cls.__typename__} 'dest' cannot be empty")
    metadata["dest"] = dest

    default = metadata["default"]
    match kind:
        case Kind.FLAG:
            if default is not Unset:
                raise TypeError(f"flag {cls.__typename__} cannot have a 'default'")
        case Kind.INTEGER:
            if not isinstance(default, int | None | Unset) or isinstance(default, bool):
                raise TypeError(f"integer {cls.__typename__} 'default' must be an integer")
        case Kind.STRING:
            if not isinstance(default, str | None | Unset):
                raise TypeError(f"string {cls.__typename__} 'default' must be a string")
        case Kind.MULTI_INTEGER | Kind.MULTI_STRING:
            if default is Unset:
                pass
            elif isinstance(default, str) or not isinstance(default, Iterable):
                raise TypeError(f"multi-value {cls.__typename__} 'default' must be an iterable of values")
            else:
                default = tuple(default)
                element = int if kind is Kind.MULTI_INTEGER else str
                if not all(isinstance(x, element) and not isinstance(x, bool) for x in default):
                    raise TypeError(f"multi-value {cls.__typename__} 'default' items must be {element.__name__}s")
            metadata["default"] = default


class Option(metaclass=DeclarationType):
    """
    A single option declaration: names, description, kind and destination.

    Properties
    - names: the raw declaration string, exactly as given.
    - descr: help text ("" when omitted).
    - kind: a Kind member.
    - default: initial value for scalar kinds, initial items for multi-value kinds.
    - dest: name the parsed value is looked up by in the result.
    - arity: the value-count contract of the kind.
    """

    __introspectable__ = (
        "names",
        "descr",
        "kind",
        "default",
    )

    def __new__(cls, names, /, descr=Unset, kind=Kind.STRING, *, dest=Unset, default=Unset):
        """
        Construct an Option declaration.

        Parameters
        - names: str
          Declaration string, "<short>,<long>", "<short>" or "<long>".
          Only its type is checked here (see candidates()).
        - descr: Unset | str
          Help text.
        - kind: Kind
          Value kind (defaults to Kind.STRING).
        - dest: Unset | str
          Explicit lookup name; derived from the names when Unset.
        - default: Unset | value
          Not allowed for flags; None or a value of the kind for scalar kinds;
          an iterable of values for multi-value kinds.
        """
        metadata = {
            "names": names,
            "descr": descr,
            "kind": kind,
            "dest": dest,
            "default": default,
        }
        _sanitize_metadata(cls, metadata)

        self = super().__new__(cls)
        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        return self

    def candidates(self, *, index=None):
        """
        Derive (short, long) from the declaration string.

        - Parts are split on ',' and trimmed.
        - One part: ("", part).
        - Two parts: ordered by length, first declared wins on a tie.
        - Either name may be "" but not both.

        Raises MalformedDeclarationError when the part count is not 1 or 2 or
        when every part is empty. 'index' (0-based declaration position) only
        shapes the message.
        """
        parts = [part.strip() for part in self._names.split(",")]
        where = " at position %d" % index if index is not None else ""

        if len(parts) > 2:
            raise MalformedDeclarationError(
                "option declaration %r%s has %d names, at most 2 are allowed" % (self._names, where, len(parts)),
                title="malformed declaration",
                code=FaultCode.MALFORMED_DECLARATION,
                hint="declare names as '<short>,<long>', '<short>' or '<long>'",
                declaration=self._names,
                index=index,
                option=self,
                docs=getdoc(FaultCode.MALFORMED_DECLARATION),
            )

        if not any(parts):
            raise MalformedDeclarationError(
                "option declaration %r%s has no name" % (self._names, where),
                title="malformed declaration",
                code=FaultCode.MALFORMED_DECLARATION,
                hint="give the option a short name, a long name, or both",
                declaration=self._names,
                index=index,
                option=self,
                docs=getdoc(FaultCode.MALFORMED_DECLARATION),
            )

        if len(parts) == 1:
            return "", parts[0]

        first, second = parts
        if len(second) < len(first):
            return second, first
        return first, second

    @property
    def dest(self):
        if self._dest is not Unset:
            return self._dest
        short, long = self.candidates()
        return (long or short).replace("-", "_")

    @property
    def arity(self):
        match self._kind:
            case Kind.FLAG:
                return Arity(0, 0)
            case Kind.INTEGER | Kind.STRING:
                return Arity(1, 1)
            case Kind.MULTI_INTEGER | Kind.MULTI_STRING:
                return Arity(1, None)

    def initial(self):
        """Return a fresh initial slot value for one parse."""
        if self._kind is Kind.FLAG:
            return False
        if self._kind.multiple:
            return list(coalesce(self._default, ()))
        return coalesce(self._default)

    def set(self, slots, token=Unset, /, *, name=None, index=None):
        """
        Apply one value to the slot mapping.

        - FLAG takes no token and stores True.
        - INTEGER/STRING coerce the token and overwrite the slot.
        - MULTI_INTEGER/MULTI_STRING coerce the token and append to the slot.

        Raises MalformedValueError when coercion fails; the slot is left untouched.
        'name' (as typed) and 'index' (1-based token position) only shape messages.
        """
        if self._kind is Kind.FLAG:
            if token is not Unset:
                self.arity.check(1, option=self, name=name, index=index)
        elif token is Unset:
            raise TypeError(f"{type(self).__typename__} of kind {self._kind.value!r} requires a token")

        context = {"name": name, "index": index, "option": self}

        match self._kind:
            case Kind.FLAG:
                slots[self] = coercers.presence()
            case Kind.INTEGER:
                slots[self] = coercers.integer(token, **context)
            case Kind.STRING:
                slots[self] = coercers.string(token, **context)
            case Kind.MULTI_INTEGER:
                value = coercers.integer(token, **context)
                slots.setdefault(self, self.initial()).append(value)
            case Kind.MULTI_STRING:
                value = coercers.string(token, **context)
                slots.setdefault(self, self.initial()).append(value)


def flag(names, /, descr=Unset, *, dest=Unset):
    """Declare a presence-only option."""
    return Option(names, descr, Kind.FLAG, dest=dest)


def integer(names, /, descr=Unset, *, dest=Unset, default=Unset):
    """Declare an option taking exactly one integer."""
    return Option(names, descr, Kind.INTEGER, dest=dest, default=default)


def string(names, /, descr=Unset, *, dest=Unset, default=Unset):
    """Declare an option taking exactly one string."""
    return Option(names, descr, Kind.STRING, dest=dest, default=default)


def integers(names, /, descr=Unset, *, dest=Unset, default=Unset):
    """Declare an option taking one or more integers."""
    return Option(names, descr, Kind.MULTI_INTEGER, dest=dest, default=default)


def strings(names, /, descr=Unset, *, dest=Unset, default=Unset):
    """Declare an option taking one or more strings."""
    return Option(names, descr, Kind.MULTI_STRING, dest=dest, default=default)


__all__ = (
    # Types
    "Kind",
    "Arity",
    "Option",

    # Factories
    "flag",
    "integer",
    "string",
    "integers",
    "strings",
)

# The metaclass is an implementation detail of Option.
del DeclarationType
