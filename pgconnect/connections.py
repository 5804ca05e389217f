"""Hand a ConnectionConfig over to asyncpg."""

from __future__ import annotations

import logging
import os
import re
import ssl
from typing import Any

import asyncpg

from .database import ConnectionConfig
from .errors import ConnectionBackendError
from .models import DEFAULT_PORT, TcpAddress
from .transport import TransportConfig, TransportMode

LOG = logging.getLogger(__name__)

_SOCKET_NAME = re.compile(r"^\.s\.PGSQL\.(\d+)$")


def connect_kwargs(config: ConnectionConfig) -> dict[str, Any]:
    """Translate a config into keyword arguments for ``asyncpg.connect``."""

    kwargs: dict[str, Any] = {}
    address = config.server_address
    if isinstance(address, TcpAddress):
        kwargs["host"] = address.host
        kwargs["port"] = address.port
    else:
        # asyncpg wants the socket directory and derives the file name from the port.
        directory, name = os.path.split(address.path)
        match = _SOCKET_NAME.match(name)
        if match:
            kwargs["host"] = directory
            kwargs["port"] = int(match.group(1))
        else:
            kwargs["host"] = address.path
            kwargs["port"] = DEFAULT_PORT
    kwargs["user"] = config.username
    kwargs["database"] = config.database or config.username
    if config.password is not None:
        kwargs["password"] = config.password
    kwargs["ssl"] = ssl_option(config.transport)
    return kwargs


def ssl_option(transport: TransportConfig) -> bool | str | ssl.SSLContext:
    """Return the value asyncpg expects for its ``ssl`` argument."""

    if transport.mode is TransportMode.CLEARTEXT:
        return False
    if transport.mode is TransportMode.UNVERIFIED_TLS:
        return "require"
    if transport.mode is TransportMode.FULL_VERIFICATION:
        return "verify-full"
    context = ssl.create_default_context(cafile=transport.root_cert)
    if transport.client_cert:
        context.load_cert_chain(transport.client_cert, transport.client_key)
    return context


async def connect(config: ConnectionConfig, *, timeout: float = 3.0) -> asyncpg.Connection:
    """Open an asyncpg connection described by ``config``."""

    kwargs = connect_kwargs(config)
    kwargs.setdefault("timeout", timeout)
    LOG.debug("Connecting", extra={"host": kwargs["host"], "port": kwargs["port"]})
    try:
        return await asyncpg.connect(**kwargs)
    except Exception as exc:
        raise ConnectionBackendError(f"Failed to connect to {kwargs['host']}:{kwargs['port']}: {exc}") from exc


__all__ = ["connect", "connect_kwargs", "ssl_option"]
