import pytest

from domain.tags import reset_config


@pytest.fixture(autouse=True)
def _reset_shared_tag_config():
    # the shared config is process-wide; keep tests independent
    reset_config()
    yield
    reset_config()
