# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Command surface invoked by the desktop shell.

Each command takes plain strings and returns a :class:`TokenResult`; call
``to_dict()`` on it for the serialized shape sent back to the UI.
"""

import threading

from .exceptions import CredentialError
from .factory import create_credential_store
from .result import TokenResult
from .store import ENTRY_ERROR, CredentialStore

# Key under which the signed-in session is kept
AUTH_TOKEN_KEY = "auth_token"

_default_store: CredentialStore | None = None
_default_store_lock = threading.Lock()


def get_default_store() -> CredentialStore:
    """Return the process-wide store, creating it from the environment on first use.

    Raises:
        CredentialError: If the configured vault type is unknown
        ValueError: If the configured log level is not recognized
    """
    global _default_store

    with _default_store_lock:
        if _default_store is None:
            _default_store = create_credential_store()
        return _default_store


def set_default_store(store: CredentialStore) -> None:
    """Replace the process-wide store, e.g. with one over an isolated namespace."""
    global _default_store

    with _default_store_lock:
        _default_store = store


def reset_default_store() -> None:
    """Drop the process-wide store so the next command rebuilds it."""
    global _default_store

    with _default_store_lock:
        _default_store = None


def _store_unavailable(exc: Exception) -> TokenResult:
    return TokenResult.failure(f"{ENTRY_ERROR}: {exc}")


def store_token(key: str, value: str) -> TokenResult:
    """Store ``value`` under ``key`` in the default store."""
    try:
        store = get_default_store()
    except (CredentialError, ValueError) as e:
        return _store_unavailable(e)
    return store.store(key, value)


def get_token(key: str) -> TokenResult:
    """Read the secret under ``key`` from the default store."""
    try:
        store = get_default_store()
    except (CredentialError, ValueError) as e:
        return _store_unavailable(e)
    return store.get(key)


def delete_token(key: str) -> TokenResult:
    """Remove the secret under ``key`` from the default store."""
    try:
        store = get_default_store()
    except (CredentialError, ValueError) as e:
        return _store_unavailable(e)
    return store.delete(key)
