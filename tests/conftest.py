from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_sha3sum_logger():
    yield
    logger = logging.getLogger("sha3sum")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
