# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Credential store façade over a platform vault."""

from .exceptions import CredentialNotFoundError
from .log import Logger, create_logger
from .result import TokenResult
from .vault import CredentialVault

_logger = create_logger(logger_type="stdout", level="INFO", name="slackteams_credentials.store")

ENTRY_ERROR = "Failed to create keyring entry"
STORE_ERROR = "Failed to store token"
GET_ERROR = "Failed to get token"
DELETE_ERROR = "Failed to delete token"


def _describe(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


class CredentialStore:
    """Store, read and remove named secrets in a platform vault.

    Every operation returns a :class:`TokenResult` and never raises for
    vault problems. A missing credential is not an error: ``get`` returns
    ``value=None`` and ``delete`` succeeds.

    The store keeps no state between calls. Each operation opens one
    vault entry and makes one vault call.

    Example:
        >>> from slackteams_credentials import CredentialStore, KeyringVault
        >>> store = CredentialStore(KeyringVault(service_name="slackteams"))
        >>> store.store("auth_token", "xoxb-123").success
        True
        >>> store.get("auth_token").value
        'xoxb-123'
    """

    def __init__(self, vault: CredentialVault, logger: Logger | None = None):
        """Initialize the credential store.

        Args:
            vault: Vault scoped to the application's service namespace
            logger: Optional logger; defaults to a stdout logger
        """
        self.vault = vault
        self._logger = logger or _logger

    @property
    def service_name(self) -> str:
        return self.vault.service_name

    def _fail(self, operation: str, key: str, prefix: str, exc: Exception) -> TokenResult:
        error = f"{prefix}: {_describe(exc)}"
        self._logger.warning(
            "Credential operation failed",
            operation=operation,
            service=self.service_name,
            key=key,
            error_type=type(exc).__name__,
            error=error,
        )
        return TokenResult.failure(error)

    def store(self, key: str, value: str) -> TokenResult:
        """Write a secret, overwriting any previous value for ``key``.

        Args:
            key: Credential name
            value: Secret payload, stored unmodified

        Returns:
            TokenResult with success set, or a failure diagnostic
        """
        try:
            entry = self.vault.open_entry(key)
        except Exception as e:
            return self._fail("store", key, ENTRY_ERROR, e)

        try:
            entry.set_secret(value)
        except Exception as e:
            return self._fail("store", key, STORE_ERROR, e)

        self._logger.debug("Stored credential", service=self.service_name, key=key)
        return TokenResult.ok()

    def get(self, key: str) -> TokenResult:
        """Read the secret stored for ``key``.

        Args:
            key: Credential name

        Returns:
            TokenResult whose value is the secret, or None if nothing is stored
        """
        try:
            entry = self.vault.open_entry(key)
        except Exception as e:
            return self._fail("get", key, ENTRY_ERROR, e)

        try:
            value = entry.get_secret()
        except CredentialNotFoundError:
            self._logger.debug("No credential stored", service=self.service_name, key=key)
            return TokenResult.ok()
        except Exception as e:
            return self._fail("get", key, GET_ERROR, e)

        return TokenResult.ok(value)

    def delete(self, key: str) -> TokenResult:
        """Remove the secret stored for ``key``.

        Deleting a key that holds nothing succeeds, so callers never need
        to check for existence first.

        Args:
            key: Credential name

        Returns:
            TokenResult with success set, or a failure diagnostic
        """
        try:
            entry = self.vault.open_entry(key)
        except Exception as e:
            return self._fail("delete", key, ENTRY_ERROR, e)

        try:
            entry.delete_secret()
        except CredentialNotFoundError:
            self._logger.debug("Credential already absent", service=self.service_name, key=key)
            return TokenResult.ok()
        except Exception as e:
            return self._fail("delete", key, DELETE_ERROR, e)

        self._logger.debug("Deleted credential", service=self.service_name, key=key)
        return TokenResult.ok()
