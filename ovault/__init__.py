# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del códec de tokens OV y sus utilidades.
# --------------------------------------------------------------
"""Inicializa el paquete `ovault` y reexporta la API del códec."""

from ovault.codec import decode, encode
from ovault.errors import (
    AuthFailure,
    FormatError,
    MissingPasswordError,
    OVaultError,
    QrCapacityError,
    UnsupportedVersionError,
)

__all__ = [
    "AuthFailure",
    "FormatError",
    "MissingPasswordError",
    "OVaultError",
    "QrCapacityError",
    "UnsupportedVersionError",
    "decode",
    "encode",
]
