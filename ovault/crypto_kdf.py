# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Derivación de la clave AES a partir de la contraseña mediante Argon2id.
# --------------------------------------------------------------
"""Funciones de derivación de claves para sellar tokens compartibles."""

from argon2.low_level import Type, hash_secret_raw

from ovault.models import VersionParams


def derive_key(password: bytes, salt: bytes, version: VersionParams) -> bytes:
    """Deriva la clave simétrica de un token usando Argon2id.

    Los parámetros de coste salen de la versión y no son configurables, de modo
    que un token antiguo siempre se re-deriva con los valores con que se creó.

    Args:
        password (bytes): Contraseña del usuario ya codificada en UTF-8.
        salt (bytes): Salt aleatoria almacenada en el token.
        version (VersionParams): Versión que fija coste y longitud de salida.

    Returns:
        bytes: Clave de `version.key_len` bytes; nunca se serializa.

    """

    return hash_secret_raw(
        password,
        salt,
        time_cost=version.time_cost,
        memory_cost=version.memory_cost,
        parallelism=version.parallelism,
        hash_len=version.key_len,
        type=Type.ID,
    )
