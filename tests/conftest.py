import logging

import pytest


@pytest.fixture(autouse=True)
def reset_foodlog_logger():
    """Undo configure_logging() so caplog sees foodlog records."""
    yield
    logger = logging.getLogger("foodlog")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
