"""
Token parser: split raw tokens into one command's options and arguments.

Grammar
- long option:   --name value | --name=value
- short option:  -x value     | -x=value
- flag:          --name | -x            (resolves to "true")
- anything else is positional; "-" alone and negative numbers ("-5",
  "-0.5") are positional too, so "--name -5" and "--name=-5" agree.

A value option written without a value (last token, or followed by another
option-looking token) resolves to "true", like a flag.

Parsing order for one command (make_context)
1. every declared option, in declaration order, is looked up and removed
   from the cursor; missing options fall back to their default, or stay
   absent (required-ness is checked later by CommandContext.require_option).
2. a leaf command's arguments are filled, in declaration order, from the
   remaining positional tokens; running out fails with argumentRequired.
3. any token still in the cursor fails with excessInput: typos, repeated
   options and unsupported flags all end up here.
"""
import re
from collections import deque

from .commands import Command, Group
from .context import CommandContext
from .faults import CommandError, ErrorIdentifier
from .utils import *

# negative numbers read as values unless declared as a short alias
_NUMBER = re.compile(r"-[0-9]+(?:\.[0-9]+)?")


class TokenCursor:
    """
    Mutable view over the tokens not consumed yet.

    The cursor only shrinks: tokens are removed by option and argument
    extraction, or popped by the dispatcher when it descends into a group.
    """

    __slots__ = ("_tokens",)

    def __init__(self, tokens=(), /):
        tokens = deque(tokens)
        for token in tokens:
            if not isinstance(token, str):
                raise TypeError("TokenCursor() argument must be an iterable of strings")
        self._tokens = tokens

    @property
    def tokens(self):
        return list(self._tokens)

    def peek(self):
        """
        The leading token, or None when exhausted.
        """
        return self._tokens[0] if self._tokens else None

    def pop(self):
        return self._tokens.popleft()

    def take(self, index, /):
        """
        Remove and return the token at `index`.
        """
        token = self._tokens[index]
        del self._tokens[index]
        return token

    def __getitem__(self, index):
        return self._tokens[index]

    def __len__(self):
        return len(self._tokens)

    def __bool__(self):
        return bool(self._tokens)

    def __iter__(self):
        return iter(self._tokens)

    def __repr__(self):
        return f"token-cursor({list(self._tokens)!r})"


def is_optional(token, /):
    """
    Whether a token looks like an option (and therefore is never positional).
    """
    return token.startswith("-") and len(token) > 1 and not _NUMBER.fullmatch(token)


def _match(token, option, /):
    """
    Return the inline value (str), Unset for a bare match, or None for no match.
    """
    for key in option.keys:
        if token == key:
            return Unset
        if not option.flag and token.startswith(key + "="):
            return token[len(key) + 1:]
    return None


def parse_option(cursor, option, /):
    """
    Extract one option's value from the cursor.

    returns
    - the inline or spaced value when the option is present ("true" for flags
      and valueless options).
    - the declared default when absent.
    - None when absent without a default.
    """
    for index, token in enumerate(cursor):
        if (value := _match(token, option)) is None:
            continue
        cursor.take(index)
        if value is not Unset:
            return value
        if not option.flag and index < len(cursor) and not is_optional(cursor[index]):
            return cursor.take(index)
        return "true"
    return option.default


def parse_argument(cursor, argument, /):
    """
    Extract the next positional token for `argument`, or None when none is left.
    """
    for index, token in enumerate(cursor):
        if not is_optional(token):
            return cursor.take(index)
    return None


def make_context(cursor, console, node, /, path=()):
    """
    Build a CommandContext for `node` by consuming the cursor.

    raises
    - CommandError(argumentRequired) when a declared argument has no token.
    - CommandError(excessInput) when tokens remain afterwards.
    """
    options = {}
    for option in node.options:
        if (value := parse_option(cursor, option)) is not None:
            options[option.name] = value

    match node:
        case Command():
            declared = node.arguments
        case Group():
            declared = ()
        case _:
            raise TypeError("make_context() third argument must be a command or a group")

    arguments = {}
    for argument in declared:
        if (value := parse_argument(cursor, argument)) is None:
            raise CommandError(ErrorIdentifier.ARGUMENT_REQUIRED, f"Argument `{argument.name}` is required.")
        arguments[argument.name] = value

    if cursor:
        raise CommandError(
            ErrorIdentifier.EXCESS_INPUT,
            f"Too many arguments or unsupported options were supplied: {cursor.tokens}",
        )

    return CommandContext(console, arguments, options, node=node, path=path)


__all__ = (
    "TokenCursor",
    "is_optional",
    "parse_option",
    "parse_argument",
    "make_context",
)
