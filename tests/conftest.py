import os

import pytest
import structlog

os.environ.setdefault("SKIP_DOTENV", "1")

from workbench.settings import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached per process; reset them around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    # setup_logger() binds structlog to the per-test captured stderr.
    structlog.reset_defaults()


@pytest.fixture
def expected_255():
    return {
        "decimal": "255",
        "binary": "11111111",
        "octal": "377",
        "hex": "FF",
    }
