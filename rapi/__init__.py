""" A typed asyncio client for the Revolt REST API. """

import logging
from typing import Final

__version__: Final[str] = "0.1.0"

TRACE: Final[int] = 5
""" Log level used for per-request tracing, below `logging.DEBUG` """

logging.addLevelName(TRACE, "TRACE")
logging.getLogger(__name__).addHandler(logging.NullHandler())
