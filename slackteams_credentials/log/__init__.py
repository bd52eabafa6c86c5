# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Structured logging for the credential store.

Example:
    >>> from slackteams_credentials.log import create_logger
    >>> logger = create_logger(logger_type="stdout", level="DEBUG", name="my-app.credentials")
    >>> logger.info("Stored credential", service="slackteams", key="auth_token")
"""

from .factory import create_logger
from .logger import Logger
from .silent_logger import SilentLogger
from .stdout_logger import StdoutLogger

__all__ = [
    "Logger",
    "SilentLogger",
    "StdoutLogger",
    "create_logger",
]
