"""
Unit tests for the settings model and its grouped configurations.
"""

import pytest

from profilehub.server.core.config import AuthConfig, CORSConfig, Settings, UploadConfig


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch):
        for name in ("AUTH_ENABLED", "UPLOAD_MAX_BYTES", "ADMIN_USERNAME", "PROFILEHUB_SERVER_PORT"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.server_port == 8000
        assert settings.auth.enabled is False
        assert settings.auth.admin_username == "admin"
        assert settings.uploads.max_bytes == 5 * 1024 * 1024

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("AUTH_ENABLED", "true")
        monkeypatch.setenv("UPLOAD_MAX_BYTES", "2048")
        monkeypatch.setenv("SESSION_COOKIE_NAME", "ph_session")
        monkeypatch.setenv("PROFILEHUB_SERVER_PORT", "9001")

        settings = Settings(_env_file=None)

        assert settings.server_port == 9001
        assert settings.auth.enabled is True
        assert settings.auth.cookie_name == "ph_session"
        assert settings.uploads.max_bytes == 2048

    def test_grouped_configs_follow_flat_fields(self, tmp_path):
        settings = Settings(
            _env_file=None,
            UPLOAD_DIR=str(tmp_path),
            UPLOAD_URL_PREFIX="/files",
            CORS_ORIGINS=["http://localhost:5173"],
            ADMIN_PASSWORD="hunter2",
        )

        assert isinstance(settings.uploads, UploadConfig)
        assert settings.uploads.directory == str(tmp_path)
        assert settings.uploads.url_prefix == "/files"
        assert isinstance(settings.cors, CORSConfig)
        assert settings.cors.origins == ["http://localhost:5173"]
        assert isinstance(settings.auth, AuthConfig)
        assert settings.auth.admin_password == "hunter2"

    def test_populate_by_field_name(self):
        settings = Settings(_env_file=None, auth_enabled=True, upload_max_bytes=10)
        assert settings.auth.enabled is True
        assert settings.uploads.max_bytes == 10
