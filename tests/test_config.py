from pydantic import ValidationError
import pytest

from app.config import Config, Env


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("ENV", "PORT", "DB_URL", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)

    config = Config()

    assert config.env == Env.local
    assert config.port == 3000
    assert config.db_url.startswith("sqlite+aiosqlite://")
    assert (config.html_dir / "index.html").exists()


def test_reads_the_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENV", "prod")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("LOG_LEVEL", "warning")

    config = Config()

    assert config.env == Env.prod
    assert config.port == 8080
    assert config.log_level == "WARNING"


def test_rejects_unknown_log_levels() -> None:
    with pytest.raises(ValidationError):
        Config(log_level="chatty")
