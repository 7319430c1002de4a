import pytest
from types import SimpleNamespace
from unittest.mock import Mock, patch

from google.api_core.exceptions import PermissionDenied

from seedance_relay.models.providers.base import SecretAccessError, ErrorKind
from seedance_relay.models.services.secret_manager import SecretManagerProvider, EnvSecretProvider


class TestSecretManagerProvider:

    @pytest.fixture
    def client(self):
        client = Mock()
        client.access_secret_version.return_value = SimpleNamespace(
            payload=SimpleNamespace(data="r8_tökén".encode("utf-8"))
        )
        return client

    def test_reads_latest_version(self, client):
        provider = SecretManagerProvider(project_id="123456", client=client)

        value = provider.get_secret("Replicate_APIKey")

        assert value == "r8_tökén"
        client.access_secret_version.assert_called_once_with(
            request={"name": "projects/123456/secrets/Replicate_APIKey/versions/latest"}
        )

    def test_api_error_becomes_secret_access_error(self, client):
        client.access_secret_version.side_effect = PermissionDenied("caller lacks secretAccessor")
        provider = SecretManagerProvider(project_id="123456", client=client)

        with pytest.raises(SecretAccessError, match="caller lacks secretAccessor") as exc_info:
            provider.get_secret("Replicate_APIKey")
        assert exc_info.value.kind == ErrorKind.AUTH

    def test_client_created_lazily(self):
        with patch('seedance_relay.models.services.secret_manager.SecretManagerServiceClient') as mock_client_class:
            provider = SecretManagerProvider(project_id="123456")
            mock_client_class.assert_not_called()

            _ = provider.client
            _ = provider.client
            mock_client_class.assert_called_once_with()

    def test_requires_project_id(self):
        with pytest.raises(ValueError):
            SecretManagerProvider(project_id="")


class TestEnvSecretProvider:

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("Replicate_APIKey", "r8_env")
        assert EnvSecretProvider().get_secret("Replicate_APIKey") == "r8_env"

    def test_prefix(self, monkeypatch):
        monkeypatch.setenv("RELAY_Replicate_APIKey", "r8_prefixed")
        assert EnvSecretProvider(prefix="RELAY_").get_secret("Replicate_APIKey") == "r8_prefixed"

    def test_missing_raises(self, monkeypatch):
        monkeypatch.delenv("Replicate_APIKey", raising=False)
        with pytest.raises(SecretAccessError):
            EnvSecretProvider().get_secret("Replicate_APIKey")
