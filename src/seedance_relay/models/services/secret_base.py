"""
Abstract base for credential lookups.
"""
from abc import ABC, abstractmethod


class SecretProvider(ABC):
    @abstractmethod
    def get_secret(self, name: str) -> str:
        """Return the current value of the named secret as text."""
        raise NotImplementedError
