"""Shared pytest fixtures."""
import logging

import pytest

from form_calculator.common.logger import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers added by the CLI so they never outlive a captured stream."""
    yield
    pkg_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
    pkg_logger.setLevel(logging.NOTSET)
