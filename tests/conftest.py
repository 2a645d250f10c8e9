"""Shared fixtures for pathdriver tests."""

import logging

import pytest

from pathdriver import Path, PosixDriver, WindowsDriver
from pathdriver.logging import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def restore_active_driver():
    """Put back whatever driver the facade held before the test."""
    saved = Path.driver
    yield
    Path.driver = saved


@pytest.fixture(autouse=True)
def package_logger():
    """Restore the package logger after a test reconfigures it."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)


@pytest.fixture
def posix():
    """POSIX driver with a known working directory."""
    return PosixDriver(cwd="/home/user")


@pytest.fixture
def windows():
    """Windows driver with a known working directory and no drive cwds."""
    return WindowsDriver(cwd="C:\\Users\\test")
