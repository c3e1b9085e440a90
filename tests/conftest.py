import os

import pytest

ENV_PREFIX = "ALPHABASE64_"


@pytest.fixture(autouse=True)
def isolated_env():
    """Clear ALPHABASE64_* variables around each test, restoring the originals after."""
    original = {key: value for key, value in os.environ.items() if key.startswith(ENV_PREFIX)}
    for key in original:
        del os.environ[key]
    yield
    for key in [key for key in os.environ if key.startswith(ENV_PREFIX)]:
        del os.environ[key]
    os.environ.update(original)
