"""
Interactive prompts built on the console capability.

choose(console, prompt, items, display=str)
    Favorite color?          <- prompt
    1: Pink                  <- one line per item ("1: " in info style)
    2: Blue
    > 2                      <- input line ("> " in info style)

  An invalid answer (not a base-10 integer, or outside 1..len(items)) clears
  exactly one line (the "> " line holding the bad answer) and asks again,
  without printing the list a second time. A valid answer clears
  len(items) + 2 lines (title, items, input line), so the terminal looks as it
  did before the call and only what the caller writes next remains:

    You chose: Blue

  End-of-stream while waiting for an answer aborts the process (see
  bosun.faults.abort): there is no value that could safely be returned.

ask(console, prompt, secure=False) and confirm(console, prompt) follow the same
rendering conventions for free-form and yes/no answers.
"""
import re

from .faults import abort
from .text import Style, StyledText, styled

_CURSOR = StyledText("> ", Style.INFO)
_INDEX = re.compile(r"[+-]?[0-9]+")


def _read(console, what, secure=False, /):
    """
    read one answer; end-of-stream never returns.

    `what` names the awaited answer in the abort message.
    """
    if (raw := console.input(secure)) is None:
        abort(console, f"EOF trying to read {what}, we have to crash here.")
    return raw


def choose(console, prompt, items, display=str, /):
    """
    ask the user to pick one of `items` and return it.

    parameters
    - console: Console
    - prompt: str | StyledText
      title shown above the enumerated list.
    - items: Sequence
      candidates, shown 1-based in the given order. an empty sequence is
      not special-cased: every answer is out of range.
    - display: Callable[[item], str | StyledText]
      renders one item (defaults to str).

    returns
    - items[index - 1] for the accepted 1-based index.
    """
    items = list(items)

    console.output(styled(prompt))
    for index, item in enumerate(items, 1):
        console.output(StyledText(f"{index}: ", Style.INFO), False)
        console.output(styled(display(item)))

    while True:
        console.output(_CURSOR, False)
        raw = _read(console, "selection").strip()
        # ASCII digits only: int() alone would take "1_0" or full-width digits
        if not _INDEX.fullmatch(raw) or not 1 <= (index := int(raw, 10)) <= len(items):
            console.clear_lines(1)
            continue
        break

    # items, title line and the final input line
    console.clear_lines(len(items) + 2)
    return items[index - 1]


def ask(console, prompt, secure=False, /):
    """
    ask a free-form question and return the raw answer (may be empty).
    """
    console.output(styled(prompt))
    console.output(_CURSOR, False)
    return _read(console, "answer", secure)


def confirm(console, prompt, /):
    """
    ask a yes/no question; retries until the answer is y/yes/n/no.

    answers are case-insensitive and surrounding whitespace is ignored.
    """
    console.output(styled(prompt))
    while True:
        console.output(StyledText("y/n> ", Style.INFO), False)
        match _read(console, "confirmation").strip().lower():
            case "y" | "yes":
                return True
            case "n" | "no":
                return False
            case _:
                console.clear_lines(1)


__all__ = (
    "choose",
    "ask",
    "confirm",
)
