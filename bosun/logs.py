"""
Logging adapter: forward stdlib logging records to a console.

Each record is rendered on one line

    [ Warning ] disk almost full (storage.py:42)

with the level tag styled by severity (trace/debug plain, info/notice info,
warning warning, error error, critical bright red), the message plain and the
location in the info style, then handed to Console.output. The handler does
no buffering; the only filter is the minimum level given at construction.

Two levels missing from stdlib logging are registered: TRACE (5) below DEBUG
and NOTICE (25) between INFO and WARNING.

    >>> bootstrap(Terminal(), level=logging.INFO)
    >>> logging.getLogger("app").log(NOTICE, "ready")
"""
import logging

from .text import Style, StyledText

TRACE = 5
NOTICE = 25

logging.addLevelName(TRACE, "TRACE")
logging.addLevelName(NOTICE, "NOTICE")

# level -> (display name, tag style), most severe first
_LEVELS = {
    logging.CRITICAL: ("Critical", Style.custom("bright_red")),
    logging.ERROR: ("Error", Style.ERROR),
    logging.WARNING: ("Warning", Style.WARNING),
    NOTICE: ("Notice", Style.INFO),
    logging.INFO: ("Info", Style.INFO),
    logging.DEBUG: ("Debug", Style.PLAIN),
    TRACE: ("Trace", Style.PLAIN),
}


def _describe(levelno, /):
    """
    Name and style of the closest known level at or below `levelno`.
    """
    for level, description in _LEVELS.items():
        if levelno >= level:
            return description
    return _LEVELS[TRACE]


class ConsoleHandler(logging.Handler):
    """
    logging.Handler writing each record to a console.

    parameters
    - console: Console
    - level: int, minimum level emitted (TRACE by default, i.e. everything).
    """

    def __init__(self, console, level=TRACE):
        super().__init__(level)
        self.console = console

    def render(self, record):
        """
        Build the StyledText line for a record.
        """
        name, style = _describe(record.levelno)
        return (
            StyledText(f"[ {name} ]", style)
            + " "
            + StyledText(record.getMessage())
            + " "
            + StyledText(f"({record.filename}:{record.lineno})", Style.INFO)
        )

    def emit(self, record):
        try:
            self.console.output(self.render(record))
            if record.exc_info:
                self.console.output(StyledText(logging.Formatter().formatException(record.exc_info)))
        except Exception:
            self.handleError(record)


def bootstrap(console, level=TRACE, logger=None):
    """
    Install a ConsoleHandler on `logger` (the root logger by default).

    The logger level is lowered to `level` when needed so that records reach
    the handler. Returns the installed handler.
    """
    logger = logger if logger is not None else logging.getLogger()
    handler = ConsoleHandler(console, level)
    logger.addHandler(handler)
    if logger.level == logging.NOTSET or logger.level > level:
        logger.setLevel(level)
    return handler


__all__ = (
    "TRACE",
    "NOTICE",
    "ConsoleHandler",
    "bootstrap",
)
