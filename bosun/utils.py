"""
Internal helpers shared by the declaration and console layers.

- Unset: the "argument not given" marker. None already means something for
  several parameters (an option without a default, a group without a
  handler), so omission needs its own value.
- coalesce(value, default): replace Unset, and only Unset.
- rename(...): stable __name__/__qualname__ on generated callables.
- mirror(name): read-only property over "_name" handing out copies.
"""
import functools
from collections.abc import Sequence, Mapping, Set
from typing import final


@final
class UnsetType:
    """
    Type of the Unset marker.

    Calling it always gives back the same object. It is falsy, prints as
    "Unset" and refuses subclasses.
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    `default` when `object` is Unset, `object` otherwise (even when falsy).

        coalesce(Unset, "-v")  -> "-v"
        coalesce("", "-v")     -> ""
    """
    return default if object is Unset else object


def _relabel(function, name, /):
    if not callable(function):
        raise TypeError(f"cannot rename {type(function).__name__!r} object")
    try:
        function.__name__ = function.__qualname__ = name
    except (AttributeError, TypeError):
        raise TypeError(f"cannot rename {type(function).__name__!r} object") from None
    return function


def rename(*parameters):
    """
    Give a callable a fixed __name__/__qualname__.

        rename(wrapper, "command")      # in place, returns wrapper

        @rename("__repr__")             # decorator form
        def __repr__(self): ...
    """
    match parameters:
        case (str() as name,):
            def decorator(function):
                return _relabel(function, name)
            return _relabel(decorator, "rename")
        case (function, str() as name):
            return _relabel(function, name)
        case _:
            raise TypeError("rename() takes a callable and a name, or a name alone")


def _freeze(object):
    """
    Copy containers recursively: tuples stay tuples, other sequences become
    lists, mappings dicts (same key order), sets sets.
    """
    match object:
        case str():
            return object
        case tuple():
            return tuple(map(_freeze, object))
        case Sequence():
            return list(map(_freeze, object))
        case Mapping():
            return {key: _freeze(value) for key, value in object.items()}
        case Set():
            return set(map(_freeze, object))
    return object


def mirror(name, /):
    """
    Read-only property returning a copy of self._<name>.

        class Option:
            keys = mirror("keys")
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    @rename(name)
    def getter(self):
        return _freeze(getattr(self, "_" + name))

    return property(getter)


Unset = UnsetType()


__all__ = (
    "coalesce",
    "rename",
    "mirror",
    "UnsetType",
    "Unset",
)
