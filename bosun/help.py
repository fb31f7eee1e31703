"""
Help and usage rendering for commands and groups.

Layout
    Usage: tool sub test <foo> [--bar,-b] [--default,-d]

    This is a test command

    Arguments:
      foo  A foo is required
           An error will occur if none exists

    Options:
      --bar, -b      Add a bar if you so desire
      --default, -d  Default option with default value (default: default)

Groups list their children under "Commands:" with the first help line of each.
Section labels use the info style, names the success style and placeholders
the warning style; restyle them through __styles__ in __main__. The program
name comes from __prog__ in __main__, else from sys.argv[0].
"""
import os.path
import sys

from .commands import Command, Group
from .text import Style, StyledText


def program():
    """
    Program name shown in usage lines.
    """
    return getattr(__import__("__main__"), "__prog__", None) or os.path.basename(sys.argv[0]) or "bosun"


def _usage(node, path):
    text = StyledText("Usage: ", Style.INFO) + " ".join((program(), *path))

    match node:
        case Command():
            for argument in node.arguments:
                text += " " + StyledText(f"<{argument.name}>", Style.WARNING)
        case Group():
            placeholder = "<command>" if node.callback is None else "[command]"
            text += " " + StyledText(placeholder, Style.WARNING)

    for option in node.options:
        text += " [" + StyledText(",".join(option.keys), Style.SUCCESS) + "]"
    return text


def _section(console, title, rows):
    """
    Write a titled two-column section; continuation help lines are aligned.
    """
    if not rows:
        return
    console.output(StyledText())
    console.output(StyledText(title + ":", Style.INFO))
    width = max(len(name) for name, _ in rows)
    for name, lines in rows:
        lines = lines or ("",)
        console.output(StyledText("  ") + StyledText(name.ljust(width), Style.SUCCESS) + "  " + lines[0])
        for line in lines[1:]:
            console.output(StyledText(" " * (width + 4) + line))


def render(console, node, path=(), /):
    """
    Write the help of `node` (reached through `path`) to the console.
    """
    console.output(_usage(node, path))

    if node.help:
        console.output(StyledText())
        for line in node.help:
            console.output(StyledText(line))

    if isinstance(node, Command):
        _section(console, "Arguments", [(argument.name, argument.help) for argument in node.arguments])

    options = []
    for option in node.options:
        lines = option.help
        if option.default is not None:
            lines = (*lines[:-1], f"{lines[-1]} (default: {option.default})") if lines else (f"(default: {option.default})",)
        options.append((", ".join(option.keys), lines))
    _section(console, "Options", options)

    if isinstance(node, Group):
        _section(console, "Commands", [(name, child.help[:1]) for name, child in node.children.items()])


__all__ = (
    "program",
    "render",
)
