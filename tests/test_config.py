try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover
    import _bootstrap  # type: ignore # noqa: F401

from pathlib import Path

import pytest
from pydantic import ValidationError

from app.core.config import AppSettings, TikTokSettings

TIKTOK_KEYS = ("TIKTOK_CLIENT_KEY", "TIKTOK_CLIENT_SECRET", "TIKTOK_REDIRECT_URI")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for key in (*TIKTOK_KEYS, "PORT", "FRONTEND_URL", "UPLOAD_DIR", "TIKTOK_SCOPES"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_defaults_without_environment(clean_env) -> None:
    settings = AppSettings()

    assert settings.port == 3000
    assert settings.frontend_url == "/"
    assert settings.upload_dir == Path("/tmp/uploads")
    assert settings.tiktok.token_url == "https://open-api.tiktok.com/oauth/access_token/"
    assert settings.missing_required() == list(TIKTOK_KEYS)


def test_values_are_read_from_environment(clean_env) -> None:
    clean_env.setenv("TIKTOK_CLIENT_KEY", "key")
    clean_env.setenv("TIKTOK_CLIENT_SECRET", "secret")
    clean_env.setenv("TIKTOK_REDIRECT_URI", "https://api.example.com/on_auth")
    clean_env.setenv("PORT", "8080")
    clean_env.setenv("FRONTEND_URL", "https://app.example.com/")
    clean_env.setenv("TIKTOK_SCOPES", "user.info.basic, video.publish ,")

    settings = AppSettings()

    assert settings.port == 8080
    assert settings.frontend_url == "https://app.example.com/"
    assert settings.tiktok.client_key == "key"
    assert settings.tiktok.scopes == ("user.info.basic", "video.publish")
    assert settings.missing_required() == []


def test_partial_credentials_are_reported(clean_env) -> None:
    clean_env.setenv("TIKTOK_CLIENT_KEY", "key")

    settings = AppSettings()

    assert settings.missing_required() == ["TIKTOK_CLIENT_SECRET", "TIKTOK_REDIRECT_URI"]


def test_settings_are_immutable(clean_env) -> None:
    settings = AppSettings(tiktok=TikTokSettings(client_key="key"))

    with pytest.raises(ValidationError):
        settings.port = 9999
    with pytest.raises(ValidationError):
        settings.tiktok.client_key = "other"


def test_invalid_port_is_rejected(clean_env) -> None:
    clean_env.setenv("PORT", "not-a-port")

    with pytest.raises(ValidationError):
        AppSettings()


def test_env_file_loader_feeds_nested_tiktok_settings(clean_env, tmp_path) -> None:
    from app.core.config import _load_env_file

    env_file = tmp_path / ".env"
    env_file.write_text(
        "TIKTOK_CLIENT_KEY=from-file\n"
        "TIKTOK_CLIENT_SECRET='file-secret'\n"
        "TIKTOK_REDIRECT_URI=https://api.example.com/on_auth\n",
        encoding="utf-8",
    )

    _load_env_file(str(env_file))
    settings = AppSettings()

    assert "env_file" not in AppSettings.model_config
    assert settings.tiktok.client_key == "from-file"
    assert settings.tiktok.client_secret == "file-secret"
    assert settings.missing_required() == []
