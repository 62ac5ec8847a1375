"""
Option registry: name -> declaration lookup, built once per parse.

Build rules
- Declarations are processed in order; each one is asked for its (short, long)
  names. The first malformed declaration aborts the build with
  MalformedDeclarationError; no partial registry is ever returned.
- Every non-empty name is inserted. A name claimed twice (by two declarations,
  or twice by the same one as in "x,x") fails with DuplicateOptionError naming
  the name and both declarations.
- Destinations are not checked: values are stored per option, so two
  declarations may share a dest ("file-name" and "file_name").
- Lookups are case-sensitive and use dash-less names.

The registry is a read-only Mapping; it never mutates the declarations.
"""
from collections.abc import Mapping
from types import MappingProxyType

from .faults import *
from .options import Option
from .utils import ordinal


class Registry(Mapping):
    """
    Read-only mapping from every declared name to its Option.

    Both the short and the long name of a declaration map to the same object.
    """

    def __init__(self, options, /):
        lookup = {}
        declared = []

        for index, option in enumerate(options):
            if not isinstance(option, Option):
                raise TypeError("registry entries must be options, not %s" % type(option).__name__)

            short, long = option.candidates(index=index)

            for name in filter(None, (short, long)):
                if name in lookup:
                    raise DuplicateOptionError(
                        "option name %r is declared by both %r and %r" % (name, lookup[name].names, option.names),
                        title="duplicate option",
                        code=FaultCode.DUPLICATE_OPTION,
                        hint="give every option its own short and long names",
                        name=name,
                        index=index,
                        option=option,
                        conflict=lookup[name],
                        docs=getdoc(FaultCode.DUPLICATE_OPTION),
                    )
                lookup[name] = option

            declared.append(option)

        self._lookup = MappingProxyType(lookup)
        self._options = tuple(declared)

    @property
    def options(self):
        """Declarations in their original order."""
        return self._options

    def resolve(self, key, /, *, token=None, index=None):
        """
        Return the option registered under a dash-less key.

        Raises UnrecognizedOptionError when nothing is registered; 'token' (as
        typed) and 'index' (1-based position) only shape the message.
        """
        try:
            return self._lookup[key]
        except KeyError:
            pass

        where = " at %s position" % ordinal(index) if index else ""
        raise UnrecognizedOptionError(
            "unknown option %r%s" % (key if token is None else token, where),
            title="unrecognized option",
            code=FaultCode.UNRECOGNIZED_OPTION,
            hint="known options are: %s" % (", ".join(sorted(self._lookup)) or "none"),
            name=key,
            token=token,
            index=index,
            docs=getdoc(FaultCode.UNRECOGNIZED_OPTION),
        ) from None

    def __getitem__(self, key, /):
        return self.resolve(key)

    def __contains__(self, key, /):
        return key in self._lookup

    def __iter__(self):
        return iter(self._lookup)

    def __len__(self):
        return len(self._lookup)

    def __repr__(self):
        return "registry(%s)" % ", ".join("%s=%r" % (name, option.names) for name, option in self._lookup.items())


__all__ = (
    "Registry",
)
