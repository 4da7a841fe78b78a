import logging

import pytest


@pytest.fixture(autouse=True)
def reset_prefixc_logger():
    """Drop handlers and levels the CLI installs on the package logger."""
    yield
    logger = logging.getLogger("prefixc")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
