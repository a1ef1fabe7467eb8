"""Shared fixtures."""
import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo configure_logging() so handlers do not leak between tests."""
    yield
    logger = logging.getLogger("cc_license")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def clean_env(monkeypatch):
    """Remove CC_LICENSE_* variables from the environment."""
    for name in (
        "CC_LICENSE_OUTPUT_FORMAT",
        "CC_LICENSE_LOG_LEVEL",
        "CC_LICENSE_LOG_JSON",
        "CC_LICENSE_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
