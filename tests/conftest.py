import pytest

from unistore import accessor


@pytest.fixture(autouse=True)
def reset_accessor():
    accessor.reset()
    yield
    accessor.reset()
