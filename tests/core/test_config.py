import pytest
from pydantic import ValidationError
from slicekit.core.config import Settings


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.delenv("SLICEKIT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SLICEKIT_SHUFFLE_SEED", raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings.load()
    assert settings.LOG_LEVEL == "WARNING"
    assert settings.SHUFFLE_SEED is None


def test_load_from_env(clean_env):
    clean_env.setenv("SLICEKIT_LOG_LEVEL", "debug")
    clean_env.setenv("SLICEKIT_SHUFFLE_SEED", "42")
    settings = Settings.load()
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.SHUFFLE_SEED == 42


@pytest.mark.parametrize(
    "name, value",
    [
        ("SLICEKIT_LOG_LEVEL", "verbose"),
        ("SLICEKIT_SHUFFLE_SEED", "abc"),
        ("SLICEKIT_SHUFFLE_SEED", "-1"),
    ],
)
def test_invalid_env_rejected(clean_env, name, value):
    clean_env.setenv(name, value)
    with pytest.raises(ValidationError):
        Settings.load()
