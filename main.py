import logging

from rich.pretty import pprint

from bosun import *

__prog__ = "demo"

logger = logging.getLogger(__name__)


@group(options=[flag("version", short="V", help="Print the version")])
def demo(context):
    """Demonstration tool"""
    if context.options.get("version") == "true":
        context.console.print(f"{__prog__} {__version__}")
    else:
        pprint(demo)


@demo.command(
    arguments=[Argument("foo", help=["A foo is required", "An error will occur if none exists"])],
    options=[
        Option("bar", short="b", help="Add a bar if you so desire"),
        Option("default", short="d", default="default", help="Default option with default value"),
    ],
)
def test(context):
    """This is a test command"""
    console = context.console
    console.print("Foo: " + StyledText(context.argument("foo"), Style.INFO))
    console.print("Bar: " + StyledText(context.options.get("bar", "-"), Style.INFO))
    console.print("Default: " + StyledText(context.require_option("default"), Style.INFO))

    color = console.choose("Favorite color?", ["Pink", "Blue"])
    console.output("You chose: " + StyledText(color, Style.custom("#FF4DA6" if color == "Pink" else "blue")))
    logger.log(NOTICE, "chose %s", color)


@demo.command(options=[flag("verbose", short="v", help="Log at debug level")])
async def ping(context):
    """Log a few lines at every level"""
    if context.options.get("verbose") == "true":
        logging.getLogger().setLevel(TRACE)
        for handler in logging.getLogger().handlers:
            handler.setLevel(TRACE)
    for level in (TRACE, logging.DEBUG, logging.INFO, NOTICE, logging.WARNING, logging.ERROR, logging.CRITICAL):
        logger.log(level, "ping")


if __name__ == '__main__':
    bootstrap(Terminal(), level=logging.INFO)
    run(demo)
