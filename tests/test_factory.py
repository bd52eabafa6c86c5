# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for vault and store factories and configuration."""

import os
from unittest.mock import patch

import pytest

from slackteams_credentials import (
    CredentialStore,
    CredentialStoreConfig,
    CredentialVaultError,
    InMemoryVault,
    KeyringVault,
    create_credential_store,
    create_vault,
)
from slackteams_credentials.log import SilentLogger, StdoutLogger


class TestCreateVault:
    """Test suite for create_vault."""

    def test_create_keyring_vault(self):
        """Test creation of the keyring vault."""
        vault = create_vault("keyring", service_name="slackteams")

        assert isinstance(vault, KeyringVault)
        assert vault.service_name == "slackteams"

    def test_create_memory_vault(self):
        """Test creation of the in-memory vault."""
        vault = create_vault("memory", service_name="slackteams-test")

        assert isinstance(vault, InMemoryVault)
        assert vault.service_name == "slackteams-test"

    def test_create_unknown_vault(self):
        """Test creation with an unknown vault type."""
        with pytest.raises(CredentialVaultError, match="Unknown vault type: vault9000"):
            create_vault("vault9000", service_name="slackteams")


class TestCredentialStoreConfig:
    """Test suite for CredentialStoreConfig."""

    def test_defaults(self):
        """Test defaults when nothing is configured."""
        with patch.dict(os.environ, {}, clear=True):
            config = CredentialStoreConfig.from_env()

        assert config == CredentialStoreConfig(
            service_name="slackteams", vault_type="keyring", log_level="INFO"
        )

    def test_from_env(self):
        """Test that environment variables are honoured."""
        env = {
            "SLACKTEAMS_CREDENTIAL_SERVICE": "slackteams-dev",
            "SLACKTEAMS_VAULT_TYPE": "MEMORY",
            "LOG_LEVEL": "debug",
        }
        with patch.dict(os.environ, env, clear=True):
            config = CredentialStoreConfig.from_env()

        assert config.service_name == "slackteams-dev"
        assert config.vault_type == "memory"
        assert config.log_level == "DEBUG"

    def test_explicit_values_win_over_env(self):
        """Test that arguments take priority over environment variables."""
        with patch.dict(os.environ, {"SLACKTEAMS_CREDENTIAL_SERVICE": "from-env"}):
            config = CredentialStoreConfig.from_env(service_name="explicit")

        assert config.service_name == "explicit"


class TestCreateCredentialStore:
    """Test suite for create_credential_store."""

    def test_builds_store_from_config(self):
        """Test that the config picks vault type and namespace."""
        config = CredentialStoreConfig(service_name="isolated", vault_type="memory")
        logger = SilentLogger()

        store = create_credential_store(config, logger=logger)

        assert isinstance(store, CredentialStore)
        assert isinstance(store.vault, InMemoryVault)
        assert store.service_name == "isolated"

    def test_builds_store_from_env(self):
        """Test that a missing config is read from the environment."""
        env = {"SLACKTEAMS_VAULT_TYPE": "memory", "SLACKTEAMS_CREDENTIAL_SERVICE": "env-svc"}
        with patch.dict(os.environ, env, clear=True):
            store = create_credential_store()

        assert isinstance(store.vault, InMemoryVault)
        assert store.service_name == "env-svc"

    def test_default_logger_uses_config_level(self):
        """Test that the created logger follows config.log_level."""
        config = CredentialStoreConfig(vault_type="memory", log_level="WARNING")
        with patch.dict(os.environ, {}, clear=True):
            store = create_credential_store(config)

        assert isinstance(store._logger, StdoutLogger)
        assert store._logger.level == "WARNING"

    def test_unknown_vault_type(self):
        """Test that a misconfigured vault type raises."""
        with pytest.raises(CredentialVaultError, match="Unknown vault type"):
            create_credential_store(CredentialStoreConfig(vault_type="nope"))
