import pytest

from core.exceptions import ConfigurationError
from core.utils.env import get_bool_env, get_env, is_production


def test_get_env_required_raises_configuration_error(monkeypatch):
    monkeypatch.delenv("MIND_HAVEN_MISSING", raising=False)

    with pytest.raises(ConfigurationError) as exc_info:
        get_env("MIND_HAVEN_MISSING", required=True)

    assert exc_info.value.key == "MIND_HAVEN_MISSING"
    assert get_env("MIND_HAVEN_MISSING", default="x") == "x"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("TRUE", True), (" yes ", True), ("on", True), ("0", False), ("no", False), ("", False)],
)
def test_get_bool_env(monkeypatch, raw, expected):
    monkeypatch.setenv("BACKEND_LOG_TIME_MS", raw)

    assert get_bool_env("BACKEND_LOG_TIME_MS") is expected


def test_get_bool_env_default(monkeypatch):
    monkeypatch.delenv("BACKEND_LOG_TIME_MS", raising=False)

    assert get_bool_env("BACKEND_LOG_TIME_MS", default=True) is True


@pytest.mark.parametrize(("node_env", "expected"), [("production", True), ("test", False), ("staging", False)])
def test_is_production(monkeypatch, node_env, expected):
    monkeypatch.setenv("NODE_ENV", node_env)

    assert is_production() is expected
