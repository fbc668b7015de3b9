# coding=utf-8
import logging
import os

import pytest
from webtest import TestApp

from xff.core.config import XFF_PYTHON_VALUES

# Env variables have precedence over Python configs in XFFConfig.
# Unset all XFF env variables to prevent interference with tests.

for key in list(os.environ.keys()):
    if key.startswith("XFF_"):
        del os.environ[key]


# Prevent pytest from trying to collect webtest's TestApp as a test class:
#     PytestWarning: cannot collect test class 'TestApp'
#     because it has a __init__ constructor
# As per https://github.com/pytest-dev/pytest/issues/477

TestApp.__test__ = False


# Override built-in caplog fixture to always be at DEBUG level since we have
# many DEBUG log messages
@pytest.fixture()
def caplog(caplog):
    caplog.set_level(logging.DEBUG)
    yield caplog


class GlobalStateLeak(Exception):
    """Exception raised when a test leaks global state."""


class ConfigLeak(GlobalStateLeak):
    """Exception raised when a test leaks changes in XFFConfig."""


@pytest.fixture(autouse=True)
def isolate_global_state():
    """
    Fail any test that leaves XFF_* environment variables or values set
    through XFFConfig.set() behind, instead of silently cleaning up.
    """
    try:
        yield
    finally:
        XFF_ENV_VARS = {
            key: value for key, value in os.environ.items() if key.startswith("XFF_")
        }
        if XFF_ENV_VARS:
            raise ConfigLeak("Env config changes: %r" % XFF_ENV_VARS)
        if XFF_PYTHON_VALUES:
            raise ConfigLeak("Python config changes: %r" % XFF_PYTHON_VALUES)
