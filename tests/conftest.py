import os

import boto3
import pytest
from fastapi.testclient import TestClient
from moto import mock_aws

from hotel_admin.main import create_app
from hotel_admin.settings import Settings, get_settings
from tests.consts import TEST_BUCKET_NAME, TEST_MAX_UPLOAD_SIZE_BYTES, TEST_REGION

# Variables that would leak the developer's real configuration into tests
SETTINGS_ENV_VARS = [
    "TEBI_API_KEY",
    "TEBI_MASTER_KEY",
    "TEBI_BUCKET",
    "STORAGE_ENDPOINT_URL",
    "STORAGE_REGION",
    "VERCEL",
    "VERCEL_URL",
    "MAX_UPLOAD_SIZE_BYTES",
    "CHECK_UPLOAD_TYPES",
    "ALLOWED_UPLOAD_TYPES",
]


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    for var in SETTINGS_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def aws_credentials(monkeypatch):
    """Fake credentials so boto3 never reaches a real account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", TEST_REGION)


@pytest.fixture
def mocked_aws(aws_credentials):
    """In-memory S3 with the media bucket already created."""
    with mock_aws():
        s3_client = boto3.client("s3", region_name=TEST_REGION)
        s3_client.create_bucket(Bucket=TEST_BUCKET_NAME)
        yield s3_client


@pytest.fixture
def settings() -> Settings:
    """Storage settings pointed at the default AWS endpoint so moto intercepts it."""
    return Settings(
        storage_access_key="test-key",
        storage_secret_key="test-secret",
        storage_bucket=TEST_BUCKET_NAME,
        storage_endpoint_url=None,
        storage_region=TEST_REGION,
        max_upload_size_bytes=TEST_MAX_UPLOAD_SIZE_BYTES,
    )


@pytest.fixture
def client(settings, mocked_aws) -> TestClient:
    app = create_app(settings=settings)
    with TestClient(app) as test_client:
        yield test_client
