"""Shared fixtures"""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_strongbox_logger():
    """Undo handler/level changes made by setup_logging"""
    yield
    logger = logging.getLogger("strongbox")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
