import pytest
from click.testing import CliRunner

from hotel_admin.cli import cli
from tests.consts import TEST_BUCKET_NAME, TEST_PNG_CONTENT, TEST_REGION


@pytest.fixture
def storage_env(monkeypatch):
    monkeypatch.setenv("TEBI_API_KEY", "test-key")
    monkeypatch.setenv("TEBI_MASTER_KEY", "test-secret")
    monkeypatch.setenv("TEBI_BUCKET", TEST_BUCKET_NAME)
    monkeypatch.setenv("STORAGE_ENDPOINT_URL", "")
    monkeypatch.setenv("STORAGE_REGION", TEST_REGION)


def test__show_config(storage_env):
    result = CliRunner().invoke(cli, ["show-config"])

    assert result.exit_code == 0
    assert f"storage_bucket: {TEST_BUCKET_NAME}" in result.output
    assert "test-secret" not in result.output


def test__upload_and_delete(storage_env, mocked_aws, tmp_path):
    photo = tmp_path / "Havuz Keyfi.png"
    photo.write_bytes(TEST_PNG_CONTENT)
    runner = CliRunner()

    uploaded = runner.invoke(cli, ["upload", str(photo), "--path", "services/pool"])

    assert uploaded.exit_code == 0, uploaded.output
    assert "services/pool/havuz_keyfi.png" in uploaded.output
    assert mocked_aws.get_object(Bucket=TEST_BUCKET_NAME, Key="services/pool/havuz_keyfi.png")

    deleted = runner.invoke(cli, ["delete", "services/pool/havuz_keyfi.png"])

    assert deleted.exit_code == 0, deleted.output
    assert mocked_aws.list_objects_v2(Bucket=TEST_BUCKET_NAME).get("KeyCount", 0) == 0


def test__upload_rejected_type_exits_non_zero(storage_env, mocked_aws, tmp_path):
    document = tmp_path / "contract.pdf"
    document.write_bytes(b"%PDF-1.4")

    result = CliRunner().invoke(cli, ["upload", str(document), "--path", "docs", "--allow", "jpg"])

    assert result.exit_code == 1
    assert "Allowed file types: jpg" in result.output


def test__delete_without_configuration_exits_non_zero():
    result = CliRunner().invoke(cli, ["delete", "rooms/old.png"])

    assert result.exit_code == 1
    assert "configuration" in result.output


def test__toggle_room_type_unreachable_api(storage_env):
    result = CliRunner().invoke(cli, ["toggle-room-type", "rt-1", "--base-url", "http://127.0.0.1:9"])

    assert result.exit_code == 1
    assert "transport" in result.output
