# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Factories for creating vaults and credential stores."""

from typing import Any, cast

from .config import CredentialStoreConfig
from .exceptions import CredentialVaultError
from .keyring_vault import KeyringVault
from .log import Logger, create_logger
from .memory_vault import InMemoryVault
from .store import CredentialStore
from .vault import CredentialVault

VAULT_TYPES: dict[str, type] = {
    "keyring": KeyringVault,
    "memory": InMemoryVault,
}


def create_vault(vault_type: str, **kwargs: Any) -> CredentialVault:
    """Factory function to create credential vaults.

    Args:
        vault_type: Type of vault to create ("keyring", "memory")
        **kwargs: Vault-specific configuration (service_name is required)

    Returns:
        CredentialVault instance

    Raises:
        CredentialVaultError: If vault_type is unknown

    Example:
        >>> vault = create_vault("keyring", service_name="slackteams")
    """
    if vault_type not in VAULT_TYPES:
        raise CredentialVaultError(
            f"Unknown vault type: {vault_type}. "
            f"Available: {', '.join(VAULT_TYPES.keys())}"
        )

    vault_class = VAULT_TYPES[vault_type]
    return cast(CredentialVault, vault_class(**kwargs))


def create_credential_store(
    config: CredentialStoreConfig | None = None,
    logger: Logger | None = None,
) -> CredentialStore:
    """Build a CredentialStore from configuration.

    Args:
        config: Store settings; read from the environment if not provided
        logger: Optional logger; one is created at config.log_level if not provided

    Returns:
        CredentialStore over the configured vault

    Raises:
        CredentialVaultError: If the configured vault type is unknown
        ValueError: If the configured log level is not recognized
    """
    config = config or CredentialStoreConfig.from_env()
    vault = create_vault(config.vault_type, service_name=config.service_name)

    if logger is None:
        logger = create_logger(level=config.log_level, name="slackteams_credentials.store")

    return CredentialStore(vault, logger=logger)
