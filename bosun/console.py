"""
Console capability: the minimal terminal surface every other layer talks to.

Abstract surface (a backend or test double implements exactly these)
- input(secure=False) -> str | None
  read one line without its terminator; None signals end-of-stream (distinct
  from the empty line "").
- output(text, new_line=True)
  write StyledText (or a plain str) with or without a trailing newline.
- report_error(message, new_line=True)
  write an out-of-band error message (stderr for a real terminal).
- clear(unit)
  erase one unit of prior output: the last line or the entire screen.
- size -> (width, height)

Derived conveniences (built only on the surface above)
- print/info/success/warning/error: styled single-line output.
- clear_lines(count): clear the last `count` lines.
- choose/ask/confirm: interactive prompts, see bosun.prompts.

Backends
- bosun.terminal.Terminal: rich-backed terminal.
- bosun.recorder.RecordingConsole: scripted input + transcript, for tests.
"""
from abc import ABC, abstractmethod
from enum import Enum

from . import prompts
from .text import Style, styled


class ClearUnit(Enum):
    """
    unit of prior output to erase (an instruction, never stored).
    """
    LINE = "line"
    SCREEN = "screen"


class Console(ABC):
    """
    abstract console capability.

    subclasses provide the five primitives; everything else on this class is
    expressed in terms of them so that every backend behaves the same way.
    """

    @abstractmethod
    def input(self, secure=False):
        """
        read one line of input, or None at end-of-stream.

        parameters
        - secure: bool
          when True the typed characters are not echoed (passwords).
        """

    @abstractmethod
    def output(self, text, new_line=True):
        """
        write text, followed by a newline unless new_line is False.
        """

    @abstractmethod
    def report_error(self, message, new_line=True):
        """
        write an out-of-band error message.
        """

    @abstractmethod
    def clear(self, unit):
        """
        erase one ClearUnit of prior output.
        """

    @property
    @abstractmethod
    def size(self):
        """
        (width, height) of the terminal in cells.
        """

    # --- styled output ---

    def print(self, text="", new_line=True):
        self.output(styled(text), new_line)

    def info(self, text, new_line=True):
        self.output(styled(text, Style.INFO), new_line)

    def success(self, text, new_line=True):
        self.output(styled(text, Style.SUCCESS), new_line)

    def warning(self, text, new_line=True):
        self.output(styled(text, Style.WARNING), new_line)

    def error(self, text, new_line=True):
        self.output(styled(text, Style.ERROR), new_line)

    def clear_lines(self, count, /):
        """
        clear the last `count` lines (no-op for zero or less).
        """
        for _ in range(count):
            self.clear(ClearUnit.LINE)

    # --- interaction ---

    def choose(self, prompt, items, display=str):
        return prompts.choose(self, prompt, items, display)

    def ask(self, prompt, secure=False):
        return prompts.ask(self, prompt, secure)

    def confirm(self, prompt):
        return prompts.confirm(self, prompt)


__all__ = (
    "ClearUnit",
    "Console",
)
