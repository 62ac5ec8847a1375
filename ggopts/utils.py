"""
Small helpers shared by the declaration, scanning and rendering layers.

- Unset: "not provided" sentinel, distinct from None (an option default may be None).
- coalesce(value, default): Unset -> default, anything else as-is.
- rename(...): stable __name__/__qualname__ for generated callables.
- mirror("attr"): read-only property over self._attr, handing out container copies.
- ordinal(n): "first".."tenth", then "11th", "21st", ... for 1-based positions.

    >>> coalesce(Unset, "fallback")
    'fallback'
    >>> ordinal(3)
    'third'
"""
import builtins
import functools
from typing import final


@final
class UnsetType:
    """
    Type of the Unset sentinel: falsey, one instance per process, not subclassable.

    Supports "str | Unset" style unions in isinstance() checks.
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __or__(self, other, /):
        try:
            return type(self) | other
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    return default if object is Unset else object


def rename(*parameters):
    """
    rename(callable, name) updates the callable in place and returns it;
    rename(name) returns a decorator doing the same.
    """
    if len(parameters) == 1:
        name, = parameters
        if not isinstance(name, str):
            raise TypeError("@rename() argument must be a string")
        return functools.partial(_rename, name=name)
    if len(parameters) == 2:
        callable, name = parameters
        return _rename(callable, name=name)
    raise TypeError("rename takes 1 to 2 arguments but %d were given" % len(parameters))


def _rename(callable, /, *, name):
    if not builtins.callable(callable):
        raise TypeError("rename() target must be callable")
    if not isinstance(name, str):
        raise TypeError("rename() name must be a string")
    try:
        callable.__name__ = callable.__qualname__ = name
    except (AttributeError, TypeError):
        raise TypeError("rename() target must be an updatable callable") from None
    return callable


def _detach(object):
    # declarations only ever hold tuples/lists/dicts of plain values
    match object:
        case list() | tuple():
            return [_detach(item) for item in object]
        case dict():
            return {key: _detach(value) for key, value in object.items()}
        case _:
            return object


def mirror(name, /):
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    @rename(name)
    def getter(self):
        return _detach(getattr(self, "_" + name))

    return property(getter)


_WORDS = ("first", "second", "third", "fourth", "fifth", "sixth", "seventh", "eighth", "ninth", "tenth")


@functools.cache
def ordinal(number, /):
    if not isinstance(number, int):
        raise TypeError("ordinal() argument must be an integer")
    if 1 <= number <= len(_WORDS):
        return _WORDS[number - 1]
    if 10 < number % 100 < 20:
        return "%dth" % number
    return "%d%s" % (number, {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th"))


Unset = UnsetType()


__all__ = (
    "coalesce",
    "rename",
    "mirror",
    "ordinal",
    "UnsetType",
    "Unset",
)
