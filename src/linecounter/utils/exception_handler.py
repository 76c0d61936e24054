import asyncio
import logging
import sys

logger = logging.getLogger(__name__)


def global_exception_hook(exctype, value, tb):
    """
    Catches any uncaught exceptions in the application and logs them.
    """
    # Cancelled tasks during shutdown are expected
    if issubclass(exctype, asyncio.CancelledError):
        logger.debug("Suppressing asyncio.CancelledError during shutdown.")
        return

    logger.critical("An unexpected error occurred: %s", value, exc_info=(exctype, value, tb))


def setup_exception_hook():
    """Sets the global exception hook."""
    sys.excepthook = global_exception_hook
