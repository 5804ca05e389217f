"""Tests for transport settings."""

from __future__ import annotations

import pytest

from pgconnect.transport import TransportConfig, TransportMode


def test_cleartext_is_default() -> None:
    assert TransportConfig() == TransportConfig.cleartext()
    assert TransportConfig.cleartext().is_encrypted is False


def test_tls_variants_are_encrypted() -> None:
    assert TransportConfig.unverified_tls().mode is TransportMode.UNVERIFIED_TLS
    assert TransportConfig.full_verification().is_encrypted is True


def test_root_certificate_builds_custom_tls() -> None:
    transport = TransportConfig.root_certificate("/etc/ssl/ca.pem")

    assert transport.mode is TransportMode.CUSTOM_TLS
    assert transport.root_cert == "/etc/ssl/ca.pem"
    assert transport.client_cert is None


def test_custom_keeps_client_certificate_options() -> None:
    transport = TransportConfig.custom(client_cert="client.crt", client_key="client.key")

    assert transport == TransportConfig(TransportMode.CUSTOM_TLS, None, "client.crt", "client.key")


def test_client_key_without_certificate_is_rejected() -> None:
    with pytest.raises(ValueError):
        TransportConfig.custom(root_cert="ca.pem", client_key="client.key")
