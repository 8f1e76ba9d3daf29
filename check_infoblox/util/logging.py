import logging
import sys
from typing import Optional


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure and return a logger for the plugin.

    Log records go to stderr (and optionally a file); stdout is reserved
    for the single plugin output line.
    """
    log_level = logging.DEBUG if verbose else logging.WARNING

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )

    logger = logging.getLogger("check_infoblox")
    logger.setLevel(log_level)

    if verbose:
        logger.debug("Verbose logging enabled")

    return logger
