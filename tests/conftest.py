import pytest

from fluent_text.config import set_config


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts and ends with the built-in defaults."""
    set_config(None)
    yield
    set_config(None)
