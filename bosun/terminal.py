"""
Rich-backed terminal console.

Terminal implements the console capability on top of two rich consoles (one
for stdout, one for stderr). Raw device details (color detection, Windows VT
mode, terminal size probing) are left to rich.
"""
from rich.console import Console as RichConsole
from rich.control import Control
from rich.segment import ControlType
from rich.text import Text

from .console import ClearUnit, Console
from .text import styled


class Terminal(Console):
    """
    console capability bound to the process' standard streams.

    parameters
    - colorful: bool
      when False, styles are dropped (plain text only).
    - stdout / stderr: rich.console.Console
      explicit rich consoles (e.g. recording consoles); built when omitted.
    """

    def __init__(self, *, colorful=True, stdout=None, stderr=None):
        self._colorful = bool(colorful)
        self._stdout = stdout if stdout is not None else RichConsole(no_color=not self._colorful, highlight=False)
        self._stderr = stderr if stderr is not None else RichConsole(stderr=True, no_color=not self._colorful, highlight=False)

    @property
    def colorful(self):
        return self._colorful

    def input(self, secure=False):
        try:
            return self._stdout.input(password=secure)
        except EOFError:
            return None

    def output(self, text, new_line=True):
        self._stdout.print(
            styled(text),
            end="\n" if new_line else "",
            markup=False,
            highlight=False,
            soft_wrap=True,
        )

    def report_error(self, message, new_line=True):
        self._stderr.print(
            Text(message, "bold red" if self._colorful else ""),
            end="\n" if new_line else "",
            markup=False,
            highlight=False,
            soft_wrap=True,
        )

    def clear(self, unit):
        match unit:
            case ClearUnit.LINE:
                # cursor up one row, back to column zero, erase the whole row
                self._stdout.control(
                    Control.move(0, -1),
                    Control.move_to_column(0),
                    Control((ControlType.ERASE_IN_LINE, 2)),
                )
            case ClearUnit.SCREEN:
                self._stdout.clear()
            case _:
                raise TypeError("clear() argument must be a ClearUnit")

    @property
    def size(self):
        width, height = self._stdout.size
        return width, height


__all__ = (
    "Terminal",
)
