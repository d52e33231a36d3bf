from __future__ import annotations

import logging

import pytest

import vec3py.logging as vec3py_logging
from vec3py import Vector3


@pytest.fixture
def v1() -> Vector3:
    return Vector3([1, 5, 2])


@pytest.fixture
def v2() -> Vector3:
    return Vector3([10, -2, -6])


@pytest.fixture
def n() -> int:
    return 5


@pytest.fixture
def restore_logging():
    """
    Removes the handlers installed by ``config_logging`` after the test.
    """
    level = vec3py_logging.vec3py_logger.level
    yield
    root_logger = logging.getLogger()
    warn_logger = logging.getLogger("py.warnings")
    for h in vec3py_logging.vec3py_handlers:
        root_logger.removeHandler(h)
        warn_logger.removeHandler(h)
        h.close()
    vec3py_logging.vec3py_handlers = list()
    vec3py_logging.vec3py_logger.setLevel(level)
    logging.captureWarnings(False)
