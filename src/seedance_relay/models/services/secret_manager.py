import logging
import os
from typing import Optional

from google.api_core.exceptions import GoogleAPIError
from google.cloud.secretmanager import SecretManagerServiceClient

from .secret_base import SecretProvider
from ..providers.base import SecretAccessError

logger = logging.getLogger(__name__)


class SecretManagerProvider(SecretProvider):
    """
    Reads secrets from Google Cloud Secret Manager.

    The client is created lazily on first access and reused for the life of
    the process; values are always read from the ``latest`` version.
    """

    def __init__(self, project_id: str, version: str = "latest", client: Optional[SecretManagerServiceClient] = None):
        if not project_id:
            raise ValueError("SecretManagerProvider requires a project_id")
        self.project_id = project_id
        self.version = version
        self._client = client

    @property
    def client(self) -> SecretManagerServiceClient:
        if self._client is None:
            self._client = SecretManagerServiceClient()
            logger.info("Secret Manager client initialized")
        return self._client

    def secret_path(self, name: str) -> str:
        return f"projects/{self.project_id}/secrets/{name}/versions/{self.version}"

    def get_secret(self, name: str) -> str:
        path = self.secret_path(name)
        try:
            response = self.client.access_secret_version(request={"name": path})
        except GoogleAPIError as e:
            raise SecretAccessError(f"Failed to access secret {path}: {e}") from e
        return response.payload.data.decode("utf-8")


class EnvSecretProvider(SecretProvider):
    """Secrets bound into the process environment by the hosting platform."""

    def __init__(self, prefix: str = ""):
        self.prefix = prefix

    def get_secret(self, name: str) -> str:
        value = os.getenv(f"{self.prefix}{name}")
        if not value:
            raise SecretAccessError(f"Secret '{self.prefix}{name}' is not set in the environment")
        return value
