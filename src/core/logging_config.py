"""Logging setup shared by the API process and command-line tasks."""
import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging once per process.

    Modules log through `logging.getLogger(__name__)`; this only installs the
    handler and format. Calling it again is a no-op because basicConfig skips
    configuration when the root logger already has handlers.
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
