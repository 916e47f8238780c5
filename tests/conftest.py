import pytest

LABELKIT_VARS = [
    "LABELKIT_DATA_DIR",
    "LABELKIT_OUTPUT_DIR",
    "LABELKIT_PRINT_COMMAND",
    "LABELKIT_CURRENCY",
    "LABELKIT_SETTLE_DELAY",
    "LABELKIT_FALLBACK_TIMEOUT",
    "LABELKIT_ASSET_TIMEOUT",
    "LABELKIT_LOG_LEVEL",
    "LABELKIT_LOG_DIR",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Unset every LABELKIT_* variable and return an empty .env path.

    Values loaded from a .env file during the test are removed again
    afterwards.
    """
    for name in LABELKIT_VARS:
        # setenv first so teardown also removes values a test loads
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    env_file = tmp_path / ".env"
    env_file.write_text("")
    return env_file
