import pytest

from jsonptr.logging import stop_logging


@pytest.fixture(autouse=True)
def logging_teardown():
    yield
    # handlers hold the captured output streams of the test that installed them
    stop_logging()
