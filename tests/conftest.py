import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers added by configure_logging so they don't outlive capture."""
    yield
    pkg_logger = logging.getLogger("basename_kit")
    for h in list(pkg_logger.handlers):
        pkg_logger.removeHandler(h)
    pkg_logger.setLevel(logging.NOTSET)
