"""
Execution context handed to a command handler.
"""
from types import MappingProxyType

from .faults import CommandError, ErrorIdentifier


class CommandContext:
    """
    Parsed input for one resolved command.

    Attributes
    - console: Console the command runs on.
    - arguments: Mapping[str, str], values of the declared arguments.
    - options: Mapping[str, str], values of the options that resolved to a
      value (given in the input, or defaulted). Missing options are absent.
    - node: Command | Group | None, the resolved declaration.
    - path: tuple[str, ...], command names walked from the root.

    The mappings are read-only views; the context is built once by the parser
    and shared by reference with the handler.
    """

    __slots__ = ("_console", "_arguments", "_options", "_node", "_path")

    def __init__(self, console, arguments=None, options=None, *, node=None, path=()):
        self._console = console
        self._arguments = MappingProxyType(dict(arguments or {}))
        self._options = MappingProxyType(dict(options or {}))
        self._node = node
        self._path = tuple(path)

    @property
    def console(self):
        return self._console

    @property
    def arguments(self):
        return self._arguments

    @property
    def options(self):
        return self._options

    @property
    def node(self):
        return self._node

    @property
    def path(self):
        return self._path

    def argument(self, name, /):
        """
        Value of a declared argument.

            foo = context.argument("foo")

        Only fails when `name` was not declared by the command.
        """
        try:
            return self._arguments[name]
        except KeyError:
            raise CommandError(ErrorIdentifier.ARGUMENT_REQUIRED, f"Argument `{name}` is required.") from None

    def require_option(self, name, /):
        """
        Value of an option, failing when it has neither a value nor a default.

            bar = context.require_option("bar")

        Use `context.options.get(name)` for non-required access.
        """
        try:
            return self._options[name]
        except KeyError:
            raise CommandError(ErrorIdentifier.OPTION_REQUIRED, f"Option `{name}` is required.") from None

    def __repr__(self):
        return f"command-context(arguments={dict(self._arguments)!r}, options={dict(self._options)!r})"


__all__ = (
    "CommandContext",
)
