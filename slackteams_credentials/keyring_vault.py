# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""OS keychain vault backed by the keyring library."""

from typing import Any

import keyring
from keyring.backends import fail
from keyring.errors import KeyringError, NoKeyringError, PasswordDeleteError

from .exceptions import (
    CredentialDeleteError,
    CredentialNotFoundError,
    CredentialReadError,
    CredentialWriteError,
    VaultUnavailableError,
)
from .log import create_logger
from .vault import CredentialVault, VaultEntry

logger = create_logger(logger_type="stdout", level="INFO", name="slackteams_credentials.keyring")


def _describe(exc: BaseException) -> str:
    """Render an exception for a diagnostic, falling back to its type name."""
    return str(exc) or type(exc).__name__


class KeyringEntry(VaultEntry):
    """Handle on one ``(service_name, key)`` pair in a keyring backend."""

    def __init__(self, backend: Any, service_name: str, key: str):
        super().__init__(service_name, key)
        self._backend = backend

    def set_secret(self, value: str) -> None:
        try:
            self._backend.set_password(self.service_name, self.key, value)
        except NoKeyringError as e:
            raise VaultUnavailableError(f"No keyring backend available: {_describe(e)}") from e
        except Exception as e:
            raise CredentialWriteError(_describe(e)) from e

    def get_secret(self) -> str:
        try:
            value = self._backend.get_password(self.service_name, self.key)
        except NoKeyringError as e:
            raise VaultUnavailableError(f"No keyring backend available: {_describe(e)}") from e
        except Exception as e:
            raise CredentialReadError(_describe(e)) from e

        # keyring signals a missing item with None; "" is a stored value
        if value is None:
            raise CredentialNotFoundError(f"No credential stored for key: {self.key}")

        return value

    def delete_secret(self) -> None:
        try:
            self._backend.delete_password(self.service_name, self.key)
        except NoKeyringError as e:
            raise VaultUnavailableError(f"No keyring backend available: {_describe(e)}") from e
        except PasswordDeleteError as e:
            raise CredentialNotFoundError(f"No credential stored for key: {self.key}") from e
        except Exception as e:
            raise CredentialDeleteError(_describe(e)) from e


class KeyringVault(CredentialVault):
    """Vault that stores credentials in the operating system's keychain.

    The keyring library picks the platform store: macOS Keychain, Windows
    Credential Locker, or the freedesktop Secret Service on Linux. Every
    credential is filed under ``service_name`` with the caller's key as the
    username, so one application's secrets share a single namespace.

    Example:
        >>> vault = KeyringVault(service_name="slackteams")
        >>> entry = vault.open_entry("auth_token")
        >>> entry.set_secret("xoxb-123")

    Attributes:
        service_name: Namespace registered with the platform store
    """

    def __init__(self, service_name: str, backend: Any | None = None):
        """Initialize the keyring vault.

        Args:
            service_name: Namespace for all credentials in this vault
            backend: Optional keyring backend instance. If not provided, the
                     backend is resolved with ``keyring.get_keyring()`` each
                     time an entry is opened.
        """
        super().__init__(service_name)
        self._backend = backend

    def _resolve_backend(self) -> Any:
        """Return the keyring backend to use for the next entry.

        Raises:
            VaultUnavailableError: If no usable backend exists
        """
        if self._backend is not None:
            backend = self._backend
        else:
            try:
                backend = keyring.get_keyring()
            except KeyringError as e:
                raise VaultUnavailableError(f"Failed to load keyring backend: {_describe(e)}") from e

        if isinstance(backend, fail.Keyring):
            raise VaultUnavailableError(
                "No recommended keyring backend is available on this system"
            )

        return backend

    def open_entry(self, key: str) -> KeyringEntry:
        backend = self._resolve_backend()
        logger.debug(
            "Opened keyring entry",
            service=self.service_name,
            key=key,
            backend=type(backend).__name__,
        )
        return KeyringEntry(backend, self.service_name, key)
