# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Test fixtures for slackteams_credentials."""

from __future__ import annotations

import pytest
from keyring.backend import KeyringBackend
from keyring.errors import PasswordDeleteError

from slackteams_credentials import (
    CredentialStore,
    CredentialVault,
    InMemoryVault,
    KeyringVault,
    VaultEntry,
    reset_default_store,
)
from slackteams_credentials.log import SilentLogger

TEST_SERVICE = "slackteams-test"


class InMemoryKeyring(KeyringBackend):
    """Keyring backend holding passwords in a dict, standing in for the OS keychain."""

    priority = 1

    def __init__(self):
        super().__init__()
        self.passwords: dict[tuple[str, str], str] = {}

    def get_password(self, service, username):
        return self.passwords.get((service, username))

    def set_password(self, service, username, password):
        self.passwords[(service, username)] = password

    def delete_password(self, service, username):
        try:
            del self.passwords[(service, username)]
        except KeyError:
            raise PasswordDeleteError("Password not found") from None


class FaultyEntry(VaultEntry):
    """Entry whose every vault call raises the configured exception."""

    def __init__(self, service_name: str, key: str, error: Exception):
        super().__init__(service_name, key)
        self.error = error

    def set_secret(self, value: str) -> None:
        raise self.error

    def get_secret(self) -> str:
        raise self.error

    def delete_secret(self) -> None:
        raise self.error


class FaultyVault(CredentialVault):
    """Vault double that fails at handle construction or on every call.

    Args:
        open_error: Raised by open_entry when set
        call_error: Raised by every entry method when open_error is not set
    """

    def __init__(
        self,
        service_name: str = TEST_SERVICE,
        open_error: Exception | None = None,
        call_error: Exception | None = None,
    ):
        super().__init__(service_name)
        self.open_error = open_error
        self.call_error = call_error or RuntimeError("vault exploded")
        self.opened: list[str] = []

    def open_entry(self, key: str) -> VaultEntry:
        self.opened.append(key)
        if self.open_error is not None:
            raise self.open_error
        return FaultyEntry(self.service_name, key, self.call_error)


@pytest.fixture(autouse=True)
def isolated_default_store():
    """Make sure no test leaks a process-wide store into another."""
    reset_default_store()
    yield
    reset_default_store()


@pytest.fixture
def silent_logger() -> SilentLogger:
    return SilentLogger(level="DEBUG", name="test")


@pytest.fixture
def fake_keyring() -> InMemoryKeyring:
    return InMemoryKeyring()


@pytest.fixture
def memory_vault() -> InMemoryVault:
    return InMemoryVault(service_name=TEST_SERVICE)


@pytest.fixture(params=["memory", "keyring"])
def store(request, silent_logger, fake_keyring) -> CredentialStore:
    """CredentialStore over each real vault implementation."""
    if request.param == "memory":
        vault: CredentialVault = InMemoryVault(service_name=TEST_SERVICE)
    else:
        vault = KeyringVault(service_name=TEST_SERVICE, backend=fake_keyring)
    return CredentialStore(vault, logger=silent_logger)
