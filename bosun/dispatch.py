"""
Command tree dispatcher: route raw tokens to a handler.

Resolution
- starting at the root, while the current node is a Group and the leading
  token is exactly one of its child names, the token is consumed and the
  child becomes the current node.
- resolution stops at a Command, or at a Group whose leading token (if any)
  names no child. The current node's own options/arguments are then parsed
  from the remaining tokens (bosun.parsing.make_context).

    root -> {"sub": {"test": leaf}}
    ["sub", "test", "foo", "-b", "bar"]  ->  leaf, arguments {foo: "foo"}, options {bar: "bar"}

Execution
- a `--help` / `-h` flag at the resolved node renders its help instead of
  running it (unless the node declares an option with that name or alias).
- a Group without a handler renders its help.
- otherwise the node's handler runs with the context. A handler returning an
  awaitable is driven to completion (dispatch) or awaited (dispatch_async).

Failures
- parse failures raise CommandError unchanged; handler exceptions propagate
  unchanged. Nothing is retried or partially executed.
- run() is the host entry point: in shell mode a CommandError is reported on
  the console error channel and the process exits with status 1.
"""
import asyncio
import inspect
import logging
import sys

from .arguments import flag
from .commands import Group
from .context import CommandContext
from .faults import CommandError, report
from .help import render
from .parsing import TokenCursor, make_context, parse_option
from .terminal import Terminal
from .utils import *

logger = logging.getLogger(__name__)

_HELP = flag("help", short="h", help="Show this help and exit")


def resolve(root, cursor, /):
    """
    Descend from `root` following the leading tokens of `cursor`.

    returns
    - (node, path): the resolved node and the tuple of names consumed.
    """
    node = root
    path = []
    while isinstance(node, Group) and (token := cursor.peek()) is not None and token in node:
        node = node.get(cursor.pop())
        path.append(token)
    return node, tuple(path)


def _prepare(root, tokens, console, /):
    """
    Resolve and parse; returns (node, context, helping).
    """
    cursor = tokens if isinstance(tokens, TokenCursor) else TokenCursor(tokens)
    node, path = resolve(root, cursor)
    logger.debug("resolved command path %r with remaining tokens %r", path, cursor.tokens)

    if all(option.name != "help" and option.short != "h" for option in node.options):
        if parse_option(cursor, _HELP) == "true":
            return node, CommandContext(console, node=node, path=path), True

    return node, make_context(cursor, console, node, path), isinstance(node, Group) and node.callback is None


def dispatch(root, tokens, console, /):
    """
    Parse `tokens` against the tree under `root` and run the resolved handler.

    parameters
    - root: Command | Group
    - tokens: Iterable[str] | TokenCursor
      raw tokens, program name already stripped.
    - console: Console
      handed to the handler through the context.

    returns
    - the handler's outcome (an awaitable outcome is run to completion first).

    raises
    - CommandError on parse failures; whatever the handler raises.
    """
    node, context, helping = _prepare(root, tokens, console)
    if helping:
        return render(console, node, context.path)

    outcome = node.run(context)
    if inspect.isawaitable(outcome):
        return asyncio.run(_complete(outcome))
    return outcome


async def dispatch_async(root, tokens, console, /):
    """
    Same as dispatch(), awaiting the handler outcome inside the running loop.
    """
    node, context, helping = _prepare(root, tokens, console)
    if helping:
        return render(console, node, context.path)

    outcome = node.run(context)
    if inspect.isawaitable(outcome):
        return await outcome
    return outcome


async def _complete(awaitable, /):
    return await awaitable


def run(root, tokens=Unset, /, *, console=Unset, shell=True):
    """
    Host entry point.

    parameters
    - root: Command | Group
    - tokens:
      • Unset: sys.argv[1:].
      • str: split on whitespace (no quoting rules).
      • Iterable[str]: used as-is.
    - console: Console, a Terminal when omitted.
    - shell: bool
      when True, a CommandError is reported on the console and the process
      exits with status 1; when False it is raised to the caller.
    """
    if console is Unset:
        console = Terminal()

    if tokens is Unset:
        tokens = sys.argv[1:]
    elif isinstance(tokens, str):
        tokens = tokens.split()

    try:
        return dispatch(root, tokens, console)
    except CommandError as error:
        if not shell:
            raise
        logger.debug("command failed with %s", error.identifier)
        report(console, error)
        sys.exit(1)


__all__ = (
    "resolve",
    "dispatch",
    "dispatch_async",
    "run",
)
