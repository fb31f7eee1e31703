r"""
Bosun argument declarations.

Overview
- Argument: a required positional parameter of a command, filled in
  declaration order from the positional tokens.
- Option: a named parameter, matched by its long name (--name) or its
  one-character short alias (-n). An option may declare a default, which
  satisfies it when it is absent from the input. A flag is an option that
  never takes a value: its presence resolves to "true".

Both are immutable declarations: their fields are exposed as read-only
properties mirrored from sanitized private fields, and every invalid
declaration is rejected at construction (TypeError for wrong types,
ValueError for wrong values).

Names
- argument and option names match r"[^\W\d_][\w-]*" (no leading dash; the
  parser adds "--" itself).
- short aliases are a single letter or digit.

Quick example:
    >>> Argument("foo", help="A foo is required")
    argument(name='foo', help=('A foo is required',))
    >>> Option("bar", short="b", help=["Add a bar if you so desire"])
    option(name='bar', short='b', default=None, flag=False, help=('Add a bar if you so desire',))
"""
import functools
import operator
import re
from collections.abc import Iterable

from .utils import *


class DeclarationType(type):
    """
    Metaclass shared by every declaration (arguments, options, commands, groups).

    Responsibilities
    - Derive __typename__ from the class name ("Option" -> "option") for
      messages and reprs.
    - Publish every name listed in __introspectable__ as a read-only property
      mirroring the private "_name" field.
    - Provide __repr__/__rich_repr__ over __displayable__ (or
      __introspectable__ when unset).
    """
    __introspectable__ = ()
    __displayable__ = Unset

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
            return f"{type(self).__typename__}({', '.join(map(functools.partial(operator.mod, '%s=%r'), self.__rich_repr__()))})"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            for name in coalesce(type(self).__displayable__, type(self).__introspectable__):
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def _sanitize_name(cls, metadata, /):
    """
    Validate and trim metadata["name"].
    """
    if not isinstance(name := metadata["name"], str):
        raise TypeError(f"{cls.__typename__} 'name' must be a string")
    elif not (name := name.strip()):
        raise ValueError(f"{cls.__typename__} 'name' cannot be empty")
    elif not re.fullmatch(r"[^\W\d_][\w-]*", name):
        raise ValueError(f"{cls.__typename__} 'name' {name!r} is not a valid name")
    metadata["name"] = name


def _sanitize_help(cls, metadata, /):
    """
    Normalize metadata["help"] into a tuple of trimmed, non-empty lines.

    A single string is one line; any other iterable must yield strings.
    """
    help = metadata["help"]
    if isinstance(help, str):
        help = (help,)
    elif not isinstance(help, Iterable):
        raise TypeError(f"{cls.__typename__} 'help' must be a string or an iterable of strings")

    lines = []
    for line in help:
        if not isinstance(line, str):
            raise TypeError(f"{cls.__typename__} 'help' must be a string or an iterable of strings")
        elif not (line := line.strip()):
            raise ValueError(f"{cls.__typename__} 'help' cannot contain empty lines")
        lines.append(line)
    metadata["help"] = tuple(lines)


class Argument(metaclass=DeclarationType):
    """
    Required positional parameter declaration.

    Properties
    - name: str, unique within one command's arguments.
    - help: tuple[str, ...], help lines.
    """

    __introspectable__ = (
        "name",
        "help",
    )

    def __new__(cls, name, /, help=()):
        metadata = {
            "name": name,
            "help": help,
        }
        _sanitize_name(cls, metadata)
        _sanitize_help(cls, metadata)

        self = super().__new__(cls)
        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        return self


class Option(metaclass=DeclarationType):
    """
    Named parameter declaration.

    Properties
    - name: str, matched as --name (or --name=value).
    - short: str | None, one character matched as -x (or -x=value).
    - default: str | None, value used when the option is absent.
    - flag: bool, presence-only (never consumes a value token).
    - help: tuple[str, ...], help lines.
    """

    __introspectable__ = (
        "name",
        "short",
        "default",
        "flag",
        "help",
    )

    def __new__(cls, name, /, short=Unset, default=Unset, help=(), *, flag=False):
        """
        Construct an Option declaration.

        Parameters
        - name: str
          long name, without the leading dashes.
        - short: Unset | str
          single letter or digit alias, without the leading dash.
        - default: Unset | str
          value resolved when the option is missing from the input. Flags
          cannot declare a default (absence already means “not set”).
        - help: str | Iterable[str]
          help lines.
        - flag: bool
          presence-only option resolving to "true".
        """
        metadata = {
            "name": name,
            "short": short,
            "default": default,
            "flag": bool(flag),
            "help": help,
        }
        _sanitize_name(cls, metadata)
        _sanitize_help(cls, metadata)

        if short is not Unset:
            if not isinstance(short, str):
                raise TypeError(f"{cls.__typename__} 'short' must be a string")
            elif not re.fullmatch(r"[^\W_]", short):
                raise ValueError(f"{cls.__typename__} 'short' {short!r} must be a single letter or digit")

        if default is not Unset:
            if metadata["flag"]:
                raise TypeError(f"flag {cls.__typename__} cannot have a default")
            if not isinstance(default, str):
                raise TypeError(f"{cls.__typename__} 'default' must be a string")

        self = super().__new__(cls)
        for name, object in metadata.items():
            setattr(self, "_" + name, coalesce(object))
        return self

    @property
    def keys(self):
        """
        the tokens that select this option: ("--name",) or ("--name", "-x").
        """
        return ("--" + self._name,) + (("-" + self._short,) if self._short else ())


def flag(name, /, short=Unset, help=()):
    """
    Shorthand for Option(name, short=short, help=help, flag=True).
    """
    return Option(name, short=short, help=help, flag=True)


__all__ = (
    "Argument",
    "Option",
    "flag",
)
