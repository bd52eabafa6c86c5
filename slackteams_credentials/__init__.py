# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Secret storage in the operating system's credential store.

Persists, reads and removes named secrets (API tokens, serialized sign-in
sessions) through the platform keychain instead of plaintext config. Every
operation returns a uniform TokenResult; a missing credential is a normal,
successful outcome.

Example:
    >>> from slackteams_credentials import create_credential_store
    >>> store = create_credential_store()
    >>> store.store("auth_token", "xoxb-123").success
    True
    >>> store.get("auth_token").value
    'xoxb-123'
"""

from .commands import (
    AUTH_TOKEN_KEY,
    delete_token,
    get_default_store,
    get_token,
    reset_default_store,
    set_default_store,
    store_token,
)
from .config import CredentialStoreConfig
from .exceptions import (
    CredentialDeleteError,
    CredentialError,
    CredentialNotFoundError,
    CredentialReadError,
    CredentialVaultError,
    CredentialWriteError,
    VaultUnavailableError,
)
from .factory import create_credential_store, create_vault
from .keyring_vault import KeyringVault
from .memory_vault import InMemoryVault
from .result import TokenResult
from .store import CredentialStore
from .vault import CredentialVault, VaultEntry

__all__ = [
    "AUTH_TOKEN_KEY",
    "CredentialStore",
    "CredentialStoreConfig",
    "CredentialVault",
    "VaultEntry",
    "KeyringVault",
    "InMemoryVault",
    "TokenResult",
    "create_credential_store",
    "create_vault",
    "store_token",
    "get_token",
    "delete_token",
    "get_default_store",
    "set_default_store",
    "reset_default_store",
    "CredentialError",
    "CredentialNotFoundError",
    "CredentialVaultError",
    "VaultUnavailableError",
    "CredentialWriteError",
    "CredentialReadError",
    "CredentialDeleteError",
]

__version__ = "0.1.0"
