# --------------------------------------------------------------
# File: errors.py
# Description: Taxonomía de errores del códec y de la capa de compartición.
# --------------------------------------------------------------
"""Excepciones que distinguen contraseña ausente, formato inválido y fallo de autenticación."""


class OVaultError(Exception):
    """Excepción base de todas las operaciones de `ovault`."""


class MissingPasswordError(OVaultError):
    """Se lanza cuando la contraseña está vacía, antes de cualquier criptografía."""

    def __init__(self, message: str = "Password is required") -> None:
        super().__init__(message)


class FormatError(OVaultError):
    """Se lanza cuando el token no puede interpretarse (alfabeto, longitud, etiqueta)."""


class UnsupportedVersionError(FormatError):
    """Se lanza cuando la marca de versión del token no está registrada."""


class AuthFailure(OVaultError):
    """Se lanza cuando la etiqueta AES-GCM no verifica.

    Agrupa contraseña incorrecta y manipulación del ciphertext en un único
    resultado; el mensaje es siempre genérico.
    """

    def __init__(self) -> None:
        super().__init__("Decryption failed")


class QrCapacityError(OVaultError):
    """Se lanza cuando el contenido excede la capacidad de un símbolo QR."""
