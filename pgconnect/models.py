"""Server address variants shared across config/connection modules."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TcpAddress:
    """Reach the server over TCP at ``host:port``."""

    host: str
    port: int


@dataclass(frozen=True, slots=True)
class UnixSocketAddress:
    """Reach the server through a Unix domain socket file."""

    path: str


ServerAddress = TcpAddress | UnixSocketAddress

DEFAULT_PORT = 5432
DEFAULT_ADDRESS = TcpAddress("localhost", DEFAULT_PORT)
SOCKET_DEFAULT = UnixSocketAddress(f"/tmp/.s.PGSQL.{DEFAULT_PORT}")


__all__ = [
    "DEFAULT_ADDRESS",
    "DEFAULT_PORT",
    "SOCKET_DEFAULT",
    "ServerAddress",
    "TcpAddress",
    "UnixSocketAddress",
]
