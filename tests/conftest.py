import pytest

from sectioned_list.config import _reset_config


@pytest.fixture(autouse=True)
def reset_config():
    _reset_config()
    yield
    _reset_config()
