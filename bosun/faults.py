"""
Bosun faults: the structured command failure and the one fatal exit.

Scope
- ErrorIdentifier: canonical, stable identifiers raised by the parsing engine.
- CommandError: the sole structured failure surfaced by dispatch. Carries an
  identifier (for programmatic branching and tests) and a reason (for display).
  Host handlers may raise it with their own identifiers; those travel through
  the dispatcher unchanged.
- report(): render a CommandError on a console's error channel.
- abort(): explicit “terminate the process” action. Kept apart from
  CommandError so that call sites read differently: a CommandError is returned
  to the host, abort() never returns.

Rendering
- CommandError implements __rich__ ("[ identifier ] reason"), so it can be
  printed by any rich console. Colors come from the "fault-identifier" and
  "fault-reason" entries, overridable via __styles__ in __main__.
"""
import sys
from collections import defaultdict
from enum import StrEnum

from rich.text import Text

from .text import Style, StyledText


class ErrorIdentifier(StrEnum):
    """
    identifiers produced by the parsing engine (stable, compared as strings).

    - ARGUMENT_REQUIRED: a declared positional argument had no token.
    - OPTION_REQUIRED: require_option() on an option with no value and no default.
    - EXCESS_INPUT: tokens remained after arguments and options were consumed.
    """
    ARGUMENT_REQUIRED = "argumentRequired"
    OPTION_REQUIRED = "optionRequired"
    EXCESS_INPUT = "excessInput"


class CommandError(Exception):
    """
    structured command failure: {identifier, reason}.

    parameters
    - identifier: str
      an ErrorIdentifier for engine failures, any non-empty string for host
      failures.
    - reason: str
      user-facing sentence; hosts are expected to render it as-is.
    """

    def __init__(self, identifier, reason, /):
        if not isinstance(identifier, str):
            raise TypeError("CommandError() identifier must be a string")
        elif not identifier:
            raise ValueError("CommandError() identifier cannot be empty")
        if not isinstance(reason, str):
            raise TypeError("CommandError() reason must be a string")
        super().__init__(identifier, reason)
        self.identifier = identifier
        self.reason = reason

    def __str__(self):
        return self.reason

    def __repr__(self):
        return f"{type(self).__name__}({str(self.identifier)!r}, {self.reason!r})"

    def __rich__(self):
        styles = defaultdict(str, {
            "fault-identifier": "bold #00E5FF",  # neon cyan identifier
            "fault-reason": "#C8C8D0",  # soft light gray reason
        } | getattr(__import__("__main__"), "__styles__", {}))

        return Text.assemble(
            "[ ",
            (str(self.identifier), styles["fault-identifier"]),
            " ] ",
            (self.reason, styles["fault-reason"]),
        )


def report(console, error, /):
    """
    write a CommandError's reason to the console error channel.

    the identifier is not shown: it is meant for programmatic branching.
    """
    if not isinstance(error, CommandError):
        raise TypeError("report() second argument must be a CommandError")
    console.report_error(error.reason, True)


def abort(console, message, /, *, status=1):
    """
    terminate the process after telling the user why.

    the message goes to the console's error channel and to its normal output
    (styled as an error), then the interpreter exits with a non-zero status.
    this is the only process-terminating path of the package: it is used when
    interactive input hits end-of-stream, where no safe default exists.
    """
    console.report_error(message, True)
    console.output(StyledText(message, Style.ERROR), True)
    sys.exit(status)


__all__ = (
    "ErrorIdentifier",
    "CommandError",
    "report",
    "abort",
)
