import logging
import sys

from .constants import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


def setup_logging(debug: bool = False) -> None:
    """Attach a stderr handler to the ``restpipe`` logger.

    Calling it again only adjusts the level.
    """
    level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(level)

    if not any(getattr(h, "_restpipe", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        handler._restpipe = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    if not debug:
        logging.getLogger("httpx").setLevel(logging.WARNING)
