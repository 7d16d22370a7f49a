import pytest

from am import config


@pytest.fixture(autouse=True)
def exceptions_enabled():
    """Run every test in the default (raising) mode, whatever the environment says."""
    previous = config.set_exceptions(True)
    yield
    config.set_exceptions(previous.exceptions)
