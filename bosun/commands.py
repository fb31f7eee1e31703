"""
Bosun command tree: declarations of leaf commands and groups.

What this module provides
- Command: a leaf of the tree. Declares positional arguments, options, help
  lines and the handler run with the parsed CommandContext.
- Group: an inner node. Declares options, help lines, an optional handler and
  a mapping of child names to Command or Group. The group's own handler runs
  only when no remaining leading token names one of its children; a group
  without a handler prints its help instead.
- command(...) / group(...): factories usable directly or as decorators.
- Group.command(...) / Group.group(...): decorators that build a node and
  mount it under the group (name defaults to the function name).

Command and Group are two unrelated classes with the same declaration
contract (options, help, run); consumers tell them apart with a structural
match:

    match node:
        case Group(): ...
        case Command(): ...

Quick start
    from bosun import Argument, Option, group, run

    @group(help="Example tool")
    def tool(context): ...

    @tool.command(arguments=[Argument("path")], options=[Option("count", short="c", default="1")])
    def copy(context):
        context.console.print(f"{context.argument('path')} x{context.require_option('count')}")

    if __name__ == "__main__":
        run(tool)

Handlers may be plain functions or coroutine functions; see bosun.dispatch.
"""
import re
from collections.abc import Iterable, Mapping

from .arguments import Argument, DeclarationType, Option, _sanitize_help
from .utils import *


def _sanitize_callback(cls, metadata, /):
    if metadata["callback"] is not Unset and not callable(metadata["callback"]):
        raise TypeError(f"{cls.__typename__} 'callback' must be callable")


def _sanitize_options(cls, metadata, /):
    """
    Stabilize metadata["options"] into a tuple; long names and short aliases
    must be unique.
    """
    if not isinstance(metadata["options"], Iterable):
        raise TypeError(f"{cls.__typename__} 'options' must be an iterable of options")

    options = tuple(metadata["options"])
    keys = set()
    for option in options:
        if not isinstance(option, Option):
            raise TypeError(f"{cls.__typename__} 'options' must be an iterable of options")
        for key in option.keys:
            if key in keys:
                raise ValueError(f"{cls.__typename__} option {key!r} is already in use")
            keys.add(key)
    metadata["options"] = options


def _sanitize_arguments(cls, metadata, /):
    """
    Stabilize metadata["arguments"] into a tuple of uniquely named arguments.
    """
    if not isinstance(metadata["arguments"], Iterable):
        raise TypeError(f"{cls.__typename__} 'arguments' must be an iterable of arguments")

    arguments = tuple(metadata["arguments"])
    names = set()
    for argument in arguments:
        if not isinstance(argument, Argument):
            raise TypeError(f"{cls.__typename__} 'arguments' must be an iterable of arguments")
        if argument.name in names:
            raise ValueError(f"{cls.__typename__} argument {argument.name!r} is already in use")
        names.add(argument.name)
    metadata["arguments"] = arguments


def _sanitize_child(cls, name, node, /):
    """
    Validate one (name, node) child entry and return the name.
    """
    if not isinstance(name, str):
        raise TypeError(f"{cls.__typename__} child name must be a string")
    elif not name or re.search(r"\s", name) or name.startswith("-"):
        raise ValueError(f"{cls.__typename__} child name {name!r} is not a valid command name")
    if not isinstance(node, Command | Group):
        raise TypeError(f"{cls.__typename__} child {name!r} must be a command or a group")
    return name


class Command(metaclass=DeclarationType):
    """
    Leaf command declaration.

    Properties
    - arguments: tuple[Argument, ...], filled in order from positional tokens.
    - options: tuple[Option, ...]
    - help: tuple[str, ...]
    - callback: Callable[[CommandContext], Any]
    """

    __introspectable__ = (
        "arguments",
        "options",
        "help",
        "callback",
    )
    __displayable__ = (
        "arguments",
        "options",
        "help",
    )

    def __new__(cls, callback, /, arguments=(), options=(), help=Unset):
        if not callable(callback):
            raise TypeError(f"{cls.__typename__} 'callback' must be callable")
        metadata = {
            "callback": callback,
            "arguments": arguments,
            "options": options,
            "help": coalesce(help, _docstring(callback)),
        }
        _sanitize_callback(cls, metadata)
        _sanitize_arguments(cls, metadata)
        _sanitize_options(cls, metadata)
        _sanitize_help(cls, metadata)

        self = super().__new__(cls)
        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        return self

    def run(self, context, /):
        """
        Invoke the handler with a parsed context and return its outcome.
        """
        return self._callback(context)

    def __call__(self, context, /):
        return self.run(context)


class Group(metaclass=DeclarationType):
    """
    Group declaration: routes to children, optionally executable itself.

    Properties
    - children: dict[str, Command | Group] (a copy; names are case-sensitive)
    - options: tuple[Option, ...]
    - help: tuple[str, ...]
    - callback: Callable[[CommandContext], Any] | None
    """

    __introspectable__ = (
        "children",
        "options",
        "help",
        "callback",
    )
    __displayable__ = (
        "children",
        "options",
        "help",
    )

    def __new__(cls, callback=Unset, /, children=None, options=(), help=Unset):
        metadata = {
            "callback": callback,
            "children": children if children is not None else {},
            "options": options,
            "help": coalesce(help, _docstring(callback)),
        }
        _sanitize_callback(cls, metadata)
        _sanitize_options(cls, metadata)
        _sanitize_help(cls, metadata)

        if not isinstance(metadata["children"], Mapping):
            raise TypeError(f"{cls.__typename__} 'children' must be a mapping of names to commands")
        metadata["children"] = {
            _sanitize_child(cls, name, node): node for name, node in metadata["children"].items()
        }

        self = super().__new__(cls)
        for name, object in metadata.items():
            setattr(self, "_" + name, coalesce(object))
        return self

    def get(self, name, /):
        """
        Child registered under `name`, or None.
        """
        return self._children.get(name)

    def __contains__(self, name):
        return name in self._children

    def mount(self, name, node, /):
        """
        Register `node` under `name` and return it.

        Names must be unique within the group.
        """
        name = _sanitize_child(type(self), name, node)
        if self._children.setdefault(name, node) is not node:
            raise ValueError(f"{type(self).__typename__} child name {name!r} is already in use")
        return node

    def command(self, source=Unset, /, *args, name=Unset, **kwargs):
        """
        Build a Command from a function and mount it under this group.

            @tool.command(arguments=[Argument("path")])
            def copy(context): ...

        The child name defaults to the function name (underscores become dashes).
        """
        def wrapper(source, /):
            return self.mount(coalesce(name, _routename(source)), command(source, *args, **kwargs))
        return wrapper(source) if source is not Unset else rename(wrapper, "command")

    def group(self, source=Unset, /, *args, name=Unset, **kwargs):
        """
        Build a Group from a function and mount it under this group.
        """
        def wrapper(source, /):
            return self.mount(coalesce(name, _routename(source)), group(source, *args, **kwargs))
        return wrapper(source) if source is not Unset else rename(wrapper, "group")

    def run(self, context, /):
        """
        Invoke the group's own handler (a group without one does nothing;
        the dispatcher renders its help instead).
        """
        if self._callback is None:
            return None
        return self._callback(context)

    def __call__(self, context, /):
        return self.run(context)


def _docstring(callback, /):
    """
    Help lines taken from a callback docstring (first paragraph).
    """
    doc = getattr(callback, "__doc__", None) if callback is not Unset else None
    if not doc:
        return ()
    return tuple(line.strip() for line in doc.strip().split("\n\n")[0].splitlines() if line.strip())


def _routename(callback, /):
    try:
        return callback.__name__.strip("_").replace("_", "-")
    except AttributeError:
        raise TypeError("command name is required for callables without a __name__") from None


def command(source=Unset, /, *args, **kwargs):
    """
    Create a Command, or return a decorator that builds one.

        cmd = command(func, arguments=[...])

        @command(arguments=[...])
        def func(context): ...
    """
    @rename("command")
    def wrapper(source, /):
        if not callable(source):
            raise TypeError("@command() must be applied to a callable")
        return Command(source, *args, **kwargs)

    return wrapper(source) if source is not Unset else wrapper


def group(source=Unset, /, *args, **kwargs):
    """
    Create a Group, or return a decorator that builds one.

        root = group(children={"test": test})

        @group(options=[flag("version")])
        def root(context): ...
    """
    @rename("group")
    def wrapper(source, /):
        if not callable(source):
            raise TypeError("@group() must be applied to a callable")
        return Group(source, *args, **kwargs)

    if source is Unset:
        return wrapper
    if isinstance(source, Mapping):
        return Group(Unset, source, *args, **kwargs)
    return wrapper(source)


__all__ = (
    "Command",
    "Group",
    "command",
    "group",
)
