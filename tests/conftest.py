import logging
import pytest


@pytest.fixture(autouse=True)
def reset_hashgen_logger():
    """The CLI installs stream handlers bound to the captured stdout/stderr."""
    yield
    pkg_logger = logging.getLogger("hashgen")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
    pkg_logger.setLevel(logging.NOTSET)
