# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Process-local vault for development and tests."""

import threading

from .exceptions import CredentialNotFoundError
from .vault import CredentialVault, VaultEntry


class InMemoryEntry(VaultEntry):
    """Handle on one credential held by an InMemoryVault."""

    def __init__(self, vault: "InMemoryVault", key: str):
        super().__init__(vault.service_name, key)
        self._vault = vault

    def set_secret(self, value: str) -> None:
        with self._vault._lock:
            self._vault._secrets[(self.service_name, self.key)] = value

    def get_secret(self) -> str:
        with self._vault._lock:
            try:
                return self._vault._secrets[(self.service_name, self.key)]
            except KeyError:
                raise CredentialNotFoundError(f"No credential stored for key: {self.key}") from None

    def delete_secret(self) -> None:
        with self._vault._lock:
            try:
                del self._vault._secrets[(self.service_name, self.key)]
            except KeyError:
                raise CredentialNotFoundError(f"No credential stored for key: {self.key}") from None


class InMemoryVault(CredentialVault):
    """Vault that keeps credentials in a dictionary for the life of the process.

    Nothing is persisted or encrypted. Use it where no platform keychain
    exists (CI, containers) or to isolate tests from the real keychain.

    Example:
        >>> vault = InMemoryVault(service_name="slackteams-test")
        >>> vault.open_entry("auth_token").set_secret("xoxb-123")
        >>> vault.open_entry("auth_token").get_secret()
        'xoxb-123'
    """

    def __init__(self, service_name: str):
        super().__init__(service_name)
        self._secrets: dict[tuple[str, str], str] = {}
        self._lock = threading.Lock()

    def open_entry(self, key: str) -> InMemoryEntry:
        return InMemoryEntry(self, key)

    def __len__(self) -> int:
        with self._lock:
            return len(self._secrets)
