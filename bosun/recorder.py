"""
Recording console: a scripted, fully observable console capability.

RecordingConsole is the test double for everything that talks to a console.
It behaves like a line-oriented terminal whose screen can be inspected:

- inputs are popped from the front of a fixed queue; once the queue is empty
  input() reports end-of-stream (None).
- every call is appended to `transcript` as a tuple:
    ("output", text, new_line)   text is the plain string
    ("error", message, new_line)
    ("clear", unit)
    ("input", secure, value)     value is None at end-of-stream
- `lines` is the visible screen after applying writes, echoed answers and
  clears, so tests can assert the net effect of an interaction.

Example
    >>> console = RecordingConsole(["2"])
    >>> console.choose("Favorite color?", ["Pink", "Blue"])
    'Blue'
    >>> console.lines
    []
"""
from collections import deque

from .console import ClearUnit, Console
from .text import styled


class RecordingConsole(Console):
    """
    console capability backed by an input queue and an in-memory screen.

    parameters
    - inputs: Iterable[str]
      answers returned by input(), in order.
    - size: tuple[int, int]
      value reported by the size property.
    """

    def __init__(self, inputs=(), /, *, size=(80, 24)):
        self._inputs = deque(inputs)
        self._size = tuple(size)
        self._rows = [""]
        self._cursor = 0
        self.transcript = []

    def feed(self, *inputs):
        """
        append answers to the input queue.
        """
        self._inputs.extend(inputs)

    # --- console capability ---

    def input(self, secure=False):
        value = self._inputs.popleft() if self._inputs else None
        self.transcript.append(("input", secure, value))
        if value is not None:
            # echo and Enter, like an interactive terminal
            self._write("" if secure else value)
            self._newline()
        return value

    def output(self, text, new_line=True):
        text = str(styled(text))
        self.transcript.append(("output", text, new_line))
        self._write(text)
        if new_line:
            self._newline()

    def report_error(self, message, new_line=True):
        self.transcript.append(("error", message, new_line))

    def clear(self, unit):
        self.transcript.append(("clear", unit))
        match unit:
            case ClearUnit.LINE:
                # rows below the cleared one (an unfinished line) go with it
                self._cursor = max(self._cursor - 1, 0)
                del self._rows[self._cursor + 1:]
                self._rows[self._cursor] = ""
            case ClearUnit.SCREEN:
                self._rows = [""]
                self._cursor = 0
            case _:
                raise TypeError("clear() argument must be a ClearUnit")

    @property
    def size(self):
        return self._size

    # --- screen model ---

    def _write(self, text):
        self._rows[self._cursor] += text

    def _newline(self):
        self._cursor += 1
        if self._cursor == len(self._rows):
            self._rows.append("")

    @property
    def lines(self):
        """
        visible rows up to the cursor; the cursor row counts only when non-empty.
        """
        rows = self._rows[:self._cursor]
        if self._rows[self._cursor]:
            rows.append(self._rows[self._cursor])
        return rows

    @property
    def outputs(self):
        """
        every output() call rendered as plain text (newline appended when requested).
        """
        return [text + "\n" * new_line for kind, text, new_line, *_ in self._events("output")]

    @property
    def errors(self):
        return [message for kind, message, *_ in self._events("error")]

    @property
    def clears(self):
        return [unit for kind, unit in self._events("clear")]

    @property
    def pending(self):
        """
        answers not consumed yet.
        """
        return list(self._inputs)

    def _events(self, kind):
        return [event for event in self.transcript if event[0] == kind]


__all__ = (
    "RecordingConsole",
)
