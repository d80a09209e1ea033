r"""
Arger definitions: declared arguments/flags and their runtime value cells.

Overview
- Definition: immutable record for one declared argument or flag
  (aliases, description, default text, flag/option kind, required).
- Cell: the mutable runtime state of a definition (current text + tri-state
  required tracking). One cell per definition, shared by all of its aliases,
  so aliases can never diverge.
- textualize(value): textual form of a typed default (str/int/float/bool).

Metadata (sanitized on construction)
- aliases: a string or an iterable of strings; each alias must be non-empty and
  free of whitespace. Duplicates inside one declaration collapse to the first
  occurrence; declaration order is preserved (it drives help and error text).
- description: string, trimmed (may be empty).
- default: str | int | float | bool, stored as text (see textualize).
- flag / required: booleans.

Introspection & representation
- DefinitionType metaclass exposes the fields listed in __introspectable__ as
  read-only properties and provides stable __repr__/__rich_repr__.
"""
import functools
import operator
import re
from collections.abc import Iterable

from .utils import *


class DefinitionType(type):
    """
    Metaclass giving definitions read-only fields and readable representations.

    Conventions
    - __typename__ is derived from the class name (camel-case split with hyphens).
    - every name in __introspectable__ becomes a property mirroring "_{name}".
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


def textualize(value, /):
    """
    Return the textual form of a typed default.

    - bool  → "true" / "false" (checked before int, bool being an int subclass)
    - str   → unchanged ("" means "no default")
    - int   → decimal digits
    - float → repr(value), e.g. 1.5 → "1.5"

    Raises
    - TypeError for any other type.
    """
    match value:
        case bool():
            return "true" if value else "false"
        case str():
            return value
        case int():
            return str(value)
        case float():
            return repr(value)
        case _:
            raise TypeError("default must be a str, int, float or bool, not %s" % type(value).__name__)


def _sanitize_aliases(cls, aliases, /):
    """
    Internal: normalize an alias declaration into an ordered tuple of unique strings.

    Raises
    - TypeError: when aliases is neither a string nor an iterable of strings.
    - ValueError: when no alias is given, or one is empty or contains whitespace.
    """
    if isinstance(aliases, str):
        aliases = (aliases,)
    elif not isinstance(aliases, Iterable):
        raise TypeError(f"{cls.__typename__} aliases must be a string or an iterable of strings")

    sanitized = []
    for alias in aliases:
        if not isinstance(alias, str):
            raise TypeError(f"{cls.__typename__} aliases must be strings")
        elif not alias.strip():
            raise ValueError(f"{cls.__typename__} aliases cannot be empty-strings")
        elif re.search(r"\s", alias):
            raise ValueError(f"{cls.__typename__} aliases cannot contain whitespace")
        elif alias not in sanitized:
            sanitized.append(alias)

    if not sanitized:
        raise ValueError(f"{cls.__typename__} must specify at least one alias")
    return tuple(sanitized)


class Cell:
    """
    Runtime value cell shared by every alias of one definition.

    Attributes
    - text: current textual value (starts as the default text).
    - found: None when the definition is not required, otherwise False until
      one of its aliases is matched, then True.
    """
    __slots__ = ("text", "found", "_default", "_required")

    def __init__(self, default, required, /):
        self._default = default
        self._required = required
        self.reset()

    def reset(self):
        """
        Restore the initial state (default text, pending required tracking).
        """
        self.text = self._default
        self.found = False if self._required else None

    def mark(self, text, /):
        """
        Store a matched value and satisfy the required tracking, if any.
        """
        self.text = text
        if self.found is not None:
            self.found = True

    @property
    def pending(self):
        return self.found is False

    def __repr__(self):
        return "cell(text=%r, found=%r)" % (self.text, self.found)


class Definition(metaclass=DefinitionType):
    """
    One declared argument (value-bearing option) or flag.

    Instances are created by the parser at registration time; each owns the
    Cell holding its runtime value.
    """

    __introspectable__ = (
        "aliases",
        "description",
        "default",
        "flag",
        "required",
    )

    def __init__(self, aliases, description="", default="", *, flag=False, required=False):
        if not isinstance(description, str):
            raise TypeError(f"{type(self).__typename__} 'description' must be a string")
        if flag and not isinstance(default, bool):
            raise TypeError(f"flag {type(self).__typename__} 'default' must be a bool")

        self._aliases = _sanitize_aliases(type(self), aliases)
        self._description = description.strip()
        self._default = textualize(default)
        self._flag = bool(flag)
        self._required = bool(required)
        self.cell = Cell(self._default, self._required)

    @property
    def label(self):
        """
        Aliases joined by single spaces, in declaration order.
        """
        return " ".join(self._aliases)


__all__ = (
    "Definition",
    "Cell",
    "textualize",
)
