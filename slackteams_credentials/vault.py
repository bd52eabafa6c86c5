# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Base platform vault interface."""

from abc import ABC, abstractmethod


class VaultEntry(ABC):
    """Handle on a single credential identity in a vault.

    An entry addresses one ``(service_name, key)`` pair. It holds no secret
    material itself; every method goes straight to the backing store.
    """

    def __init__(self, service_name: str, key: str):
        self.service_name = service_name
        self.key = key

    @abstractmethod
    def set_secret(self, value: str) -> None:
        """Write the secret, overwriting any previous value.

        Args:
            value: Secret payload, passed through unmodified

        Raises:
            CredentialWriteError: If the vault rejects the write
            VaultUnavailableError: If the vault service is unreachable
        """
        pass

    @abstractmethod
    def get_secret(self) -> str:
        """Read the secret.

        Returns:
            Stored secret value

        Raises:
            CredentialNotFoundError: If nothing is stored for this entry
            CredentialReadError: If the read fails for another reason
            VaultUnavailableError: If the vault service is unreachable
        """
        pass

    @abstractmethod
    def delete_secret(self) -> None:
        """Remove the secret.

        Raises:
            CredentialNotFoundError: If nothing is stored for this entry
            CredentialDeleteError: If the delete fails for another reason
            VaultUnavailableError: If the vault service is unreachable
        """
        pass


class CredentialVault(ABC):
    """Abstract base class for platform credential vaults.

    A vault is scoped to one service namespace for its whole lifetime.
    Implementations translate their backend's errors into the exceptions
    in :mod:`slackteams_credentials.exceptions`.
    """

    def __init__(self, service_name: str):
        self.service_name = service_name

    @abstractmethod
    def open_entry(self, key: str) -> VaultEntry:
        """Construct a handle for ``(service_name, key)``.

        Args:
            key: Caller-supplied credential name

        Returns:
            VaultEntry for the identity

        Raises:
            VaultUnavailableError: If the handle cannot be constructed
        """
        pass
