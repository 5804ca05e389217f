"""Exception hierarchy for pgconnect."""

from __future__ import annotations

from typing import Sequence


class PgConnectError(Exception):
    """Base exception for all pgconnect errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ParseError(PgConnectError):
    """Raised when a connection string cannot be turned into a config.

    The extra fields are diagnostic only; callers should branch on the
    exception type rather than on ``reason`` text.
    """

    def __init__(
        self,
        identifier: str,
        reason: str,
        possible_causes: Sequence[str] = (),
        suggested_fixes: Sequence[str] = (),
    ) -> None:
        self.identifier = identifier
        self.reason = reason
        self.possible_causes = tuple(possible_causes)
        self.suggested_fixes = tuple(suggested_fixes)
        super().__init__(f"{identifier}: {reason}")


class ProfileError(PgConnectError):
    """Raised when a stored connection profile cannot be used."""


class ConnectionBackendError(PgConnectError):
    """Raised when asyncpg fails to open a connection for a config."""


__all__ = ["ConnectionBackendError", "ParseError", "PgConnectError", "ProfileError"]
