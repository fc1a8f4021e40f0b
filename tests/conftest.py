import io

import pytest

from klio_logger import core
from klio_logger.config import get_settings

ESC = "\x1b"
ST = ESC + "\\"
RESET = f"{ESC}_klio_reset{ST}"

_ENV_VARS = (
    "KLIO_LOGGER_LEVEL",
    "KLIO_LOGGER_TAGS",
    "KLIO_LOGGER_MODE",
    "KLIO_LOGGER_DIAGNOSTICS_LEVEL",
    "KLIO_LOGGER_DIAGNOSTICS_FORMAT",
)


def header(level: str = "info", tags: str = "[]", mode: str = "line") -> str:
    """Expected wire header for the given JSON-encoded field values."""
    return f'{ESC}_klio_log_level "{level}"{ST}{ESC}_klio_tags {tags}{ST}{ESC}_klio_mode "{mode}"{ST}'


@pytest.fixture(autouse=True)
def isolated_globals(monkeypatch):
    """
    Every test starts with fresh global loggers and settings read from a
    clean environment.
    """
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    core.reset_global_loggers()
    yield
    core.reset_global_loggers()
    get_settings.cache_clear()


@pytest.fixture
def sink() -> io.BytesIO:
    return io.BytesIO()


@pytest.fixture
def make_header():
    return header
