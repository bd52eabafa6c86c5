# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Uniform outcome returned by every credential operation."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class TokenResult:
    """Outcome of a store, get or delete call.

    A missing credential is a successful outcome: ``get`` reports it with
    ``value=None`` and ``delete`` reports it as a plain success. Callers
    must branch on ``value`` to tell "never stored" apart from a stored
    empty string, never on ``success``.

    Attributes:
        success: True if the operation completed without an unrecoverable error
        error: Diagnostic message, set only when success is False
        value: Retrieved secret, set only by a successful get that found one
    """
    success: bool
    error: Optional[str] = None
    value: Optional[str] = None

    def __post_init__(self) -> None:
        if self.success and self.error is not None:
            raise ValueError("A successful result cannot carry an error")
        if not self.success:
            if not self.error:
                raise ValueError("A failed result requires a non-empty error")
            if self.value is not None:
                raise ValueError("A failed result cannot carry a value")

    @classmethod
    def ok(cls, value: Optional[str] = None) -> "TokenResult":
        """Build a successful result, optionally holding a retrieved secret."""
        return cls(success=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "TokenResult":
        """Build a failed result with the given diagnostic."""
        return cls(success=False, error=error)

    def to_dict(self) -> dict[str, Any]:
        """Convert the result to its wire shape.

        Returns:
            Dictionary with ``success``, ``error`` and ``value`` keys
        """
        return {
            "success": self.success,
            "error": self.error,
            "value": self.value,
        }

    def __repr__(self) -> str:
        # Keep secrets out of reprs, tracebacks and log lines
        value = None if self.value is None else "***"
        return f"TokenResult(success={self.success!r}, error={self.error!r}, value={value!r})"
