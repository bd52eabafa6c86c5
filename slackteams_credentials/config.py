# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Configuration for the credential store."""

import os
from dataclasses import dataclass

DEFAULT_SERVICE_NAME = "slackteams"
DEFAULT_VAULT_TYPE = "keyring"
DEFAULT_LOG_LEVEL = "INFO"

SERVICE_NAME_ENV = "SLACKTEAMS_CREDENTIAL_SERVICE"
VAULT_TYPE_ENV = "SLACKTEAMS_VAULT_TYPE"
LOG_LEVEL_ENV = "LOG_LEVEL"


def _default(value: str | None, env_var: str, fallback: str) -> str:
    """Pick an explicit value, then env var, then fallback."""
    return (value or os.getenv(env_var) or fallback)


@dataclass(frozen=True)
class CredentialStoreConfig:
    """Settings for building a CredentialStore.

    Attributes:
        service_name: Namespace every credential is filed under in the vault
        vault_type: Vault backend name ("keyring" or "memory")
        log_level: Level for the store's logger
    """
    service_name: str = DEFAULT_SERVICE_NAME
    vault_type: str = DEFAULT_VAULT_TYPE
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(
        cls,
        service_name: str | None = None,
        vault_type: str | None = None,
        log_level: str | None = None,
    ) -> "CredentialStoreConfig":
        """Build a config from explicit values, then environment variables, then defaults.

        Environment variables:
        - SLACKTEAMS_CREDENTIAL_SERVICE: service namespace (default "slackteams")
        - SLACKTEAMS_VAULT_TYPE: vault backend (default "keyring")
        - LOG_LEVEL: logging level (default "INFO")
        """
        return cls(
            service_name=_default(service_name, SERVICE_NAME_ENV, DEFAULT_SERVICE_NAME),
            vault_type=_default(vault_type, VAULT_TYPE_ENV, DEFAULT_VAULT_TYPE).lower(),
            log_level=_default(log_level, LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper(),
        )
