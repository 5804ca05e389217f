"""PostgreSQL connection descriptors and connection-string parsing."""

from __future__ import annotations

from .database import ConnectionConfig, database_from_path
from .errors import ConnectionBackendError, ParseError, PgConnectError, ProfileError
from .models import (
    DEFAULT_ADDRESS,
    DEFAULT_PORT,
    SOCKET_DEFAULT,
    ServerAddress,
    TcpAddress,
    UnixSocketAddress,
)
from .transport import TransportConfig, TransportMode

__all__ = [
    "ConnectionBackendError",
    "ConnectionConfig",
    "DEFAULT_ADDRESS",
    "DEFAULT_PORT",
    "ParseError",
    "PgConnectError",
    "ProfileError",
    "SOCKET_DEFAULT",
    "ServerAddress",
    "TcpAddress",
    "TransportConfig",
    "TransportMode",
    "UnixSocketAddress",
    "database_from_path",
]
