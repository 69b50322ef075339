from __future__ import annotations

import logging
import sys

LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'


def setup_logging(level: str = 'INFO') -> logging.Logger:
    """Attach a stdout handler to the ``pathfs`` logger.

    Calling it again only updates the level; the handler is installed once.
    """
    logger = logging.getLogger('pathfs')
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not any(handler.get_name() == 'pathfs' for handler in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.set_name('pathfs')
        logger.addHandler(handler)

    logger.debug('Logging is set up at level %s', level)
    return logger
