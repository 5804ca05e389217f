"""Transport security settings forwarded to the connection layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TransportMode(str, Enum):
    """How bytes travel between client and server."""

    CLEARTEXT = "cleartext"
    UNVERIFIED_TLS = "unverified_tls"
    FULL_VERIFICATION = "full_verification"
    CUSTOM_TLS = "custom_tls"


@dataclass(frozen=True, slots=True)
class TransportConfig:
    """Opaque transport description carried by a connection config.

    Build instances through the classmethods rather than the constructor;
    ``root_cert``/``client_cert``/``client_key`` are filesystem paths and are
    only meaningful for ``CUSTOM_TLS``.
    """

    mode: TransportMode = TransportMode.CLEARTEXT
    root_cert: str | None = None
    client_cert: str | None = None
    client_key: str | None = None

    def __post_init__(self) -> None:
        if self.client_key and not self.client_cert:
            raise ValueError("client_key requires client_cert")

    @classmethod
    def cleartext(cls) -> TransportConfig:
        return cls(TransportMode.CLEARTEXT)

    @classmethod
    def unverified_tls(cls) -> TransportConfig:
        """TLS without certificate or hostname checks."""

        return cls(TransportMode.UNVERIFIED_TLS)

    @classmethod
    def full_verification(cls) -> TransportConfig:
        """TLS verified against the system trust store."""

        return cls(TransportMode.FULL_VERIFICATION)

    @classmethod
    def root_certificate(cls, path: str) -> TransportConfig:
        """TLS verified against a single CA bundle on disk."""

        return cls(TransportMode.CUSTOM_TLS, root_cert=path)

    @classmethod
    def custom(
        cls,
        *,
        root_cert: str | None = None,
        client_cert: str | None = None,
        client_key: str | None = None,
    ) -> TransportConfig:
        return cls(
            TransportMode.CUSTOM_TLS,
            root_cert=root_cert,
            client_cert=client_cert,
            client_key=client_key,
        )

    @property
    def is_encrypted(self) -> bool:
        return self.mode is not TransportMode.CLEARTEXT


__all__ = ["TransportConfig", "TransportMode"]
