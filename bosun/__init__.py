__path__ = __import__("pkgutil").extend_path(__path__, __name__)  # NOQA: F-821
__title__ = 'bosun'
__author__ = 'Eiko Reishin (影皇嶺臣)'
__license__ = 'MIT'
# Placeholder, modified by dynamic-versioning.
__version__ = "0.0.0"

from .arguments import *
from .commands import *
from .console import *
from .context import *
from .dispatch import *
from .faults import *
from .logs import *
from .parsing import *
from .prompts import *
from .recorder import *
from .terminal import *
from .text import *

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

# Placeholder, modified by dynamic-versioning.
version_info = VersionInfo(0, 0, 0, "final", 0, "")

__all__ = (
    "__path__",
    "__title__",
    "__author__",
    "__license__",
    "__version__",
    "version_info"
)

# Load the exposed API of the declarations
__all__ += arguments.__all__  # type: ignore[attr-defined]
__all__ += commands.__all__  # type: ignore[attr-defined]
# Load the exposed API of the console layer
__all__ += console.__all__  # type: ignore[attr-defined]
__all__ += prompts.__all__  # type: ignore[attr-defined]
__all__ += recorder.__all__  # type: ignore[attr-defined]
__all__ += terminal.__all__  # type: ignore[attr-defined]
__all__ += text.__all__  # type: ignore[attr-defined]
# Load the exposed API of the engine
__all__ += context.__all__  # type: ignore[attr-defined]
# the dispatch() function shadows its own submodule here
__all__ += __import__("sys").modules[__name__ + ".dispatch"].__all__
__all__ += faults.__all__  # type: ignore[attr-defined]
__all__ += logs.__all__  # type: ignore[attr-defined]
__all__ += parsing.__all__  # type: ignore[attr-defined]
