import pytest

from hotel_admin.settings import Settings, get_settings, resolve_base_url


def test__base_url__deployment_url_wins():
    settings = Settings(deployment_url="preview-abc.vercel.app", is_production=True)
    assert resolve_base_url(settings, origin="https://admin.example.com") == "https://preview-abc.vercel.app"


def test__base_url__production_flag():
    settings = Settings(is_production=True)
    assert resolve_base_url(settings, origin="https://admin.example.com") == "https://dogahoteloludeniznew.vercel.app"


def test__base_url__request_origin():
    assert resolve_base_url(Settings(), origin="https://admin.example.com/") == "https://admin.example.com"


def test__base_url__local_default():
    assert resolve_base_url(Settings()) == "http://localhost:3000"


def test__settings__read_from_environment(monkeypatch):
    monkeypatch.setenv("TEBI_API_KEY", "  key-123 ")
    monkeypatch.setenv("TEBI_MASTER_KEY", "secret-456")
    monkeypatch.setenv("TEBI_BUCKET", "media\n")
    monkeypatch.setenv("VERCEL", "1")
    monkeypatch.setenv("VERCEL_URL", "hotel-git-main.vercel.app")

    settings = Settings()

    assert settings.storage_access_key == "key-123"
    assert settings.storage_bucket == "media"
    assert settings.storage_configured is True
    assert settings.is_production is True
    assert resolve_base_url(settings) == "https://hotel-git-main.vercel.app"


@pytest.mark.parametrize("value", ["", "   "])
def test__settings__blank_values_count_as_unset(monkeypatch, value):
    monkeypatch.setenv("TEBI_BUCKET", value)
    monkeypatch.setenv("VERCEL", value)
    monkeypatch.setenv("VERCEL_URL", value)

    settings = Settings()

    assert settings.storage_bucket is None
    assert settings.storage_configured is False
    assert settings.is_production is False
    assert settings.deployment_url is None


def test__settings__defaults():
    settings = Settings()

    assert settings.storage_endpoint_url == "https://s3.tebi.io"
    assert settings.storage_max_attempts == 3
    assert settings.allowed_upload_types == ["jpg", "jpeg", "png", "gif", "webp", "svg"]


def test__settings__upload_types_are_normalized():
    settings = Settings(allowed_upload_types=[".JPG", " png ", ""])
    assert settings.allowed_upload_types == ["jpg", "png"]


def test__describe__never_contains_secrets():
    settings = Settings(storage_access_key="key-123", storage_secret_key="secret-456", storage_bucket="media")

    summary = settings.describe()

    assert "key-123" not in str(summary)
    assert "secret-456" not in str(summary)
    assert summary["access_key_provided"] is True


def test__get_settings__is_cached():
    assert get_settings() is get_settings()


@pytest.mark.parametrize("value", ["jpg,png", " JPG , .png ", '["jpg", "png"]'])
def test__settings__upload_types_from_environment(monkeypatch, value):
    monkeypatch.setenv("ALLOWED_UPLOAD_TYPES", value)

    settings = Settings()

    assert settings.allowed_upload_types == ["jpg", "png"]


def test__get_settings__comma_separated_upload_types(monkeypatch):
    monkeypatch.setenv("ALLOWED_UPLOAD_TYPES", "webp,svg")

    assert get_settings().allowed_upload_types == ["webp", "svg"]
