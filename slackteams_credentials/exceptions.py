# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Exceptions for credential storage."""


class CredentialError(Exception):
    """Base exception for credential storage errors."""
    pass


class CredentialNotFoundError(CredentialError):
    """Raised when no credential is stored for the requested key."""
    pass


class CredentialVaultError(CredentialError):
    """Raised when the platform vault encounters an error."""
    pass


class VaultUnavailableError(CredentialVaultError):
    """Raised when the platform vault cannot be reached or an entry handle cannot be built."""
    pass


class CredentialWriteError(CredentialVaultError):
    """Raised when the vault rejects a write."""
    pass


class CredentialReadError(CredentialVaultError):
    """Raised when a read fails for a reason other than absence."""
    pass


class CredentialDeleteError(CredentialVaultError):
    """Raised when a delete fails for a reason other than absence."""
    pass
