# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-GCM para sellar y abrir el contenido de un token.
# --------------------------------------------------------------
"""Rutinas de cifrado autenticado sobre claves derivadas de contraseña."""

import os
from typing import Optional, Tuple

from cryptography.hazmat.primitives.ciphers.aead import AESGCM


def random_bytes(length: int) -> bytes:
    """Devuelve `length` bytes del generador seguro del sistema operativo."""

    return os.urandom(length)


def aes_gcm_seal(
    key: bytes, plaintext: bytes, *, nonce_len: int = 12, aad: Optional[bytes] = None
) -> Tuple[bytes, bytes]:
    """Cifra datos con AES-GCM generando un nonce nuevo en cada llamada.

    Args:
        key (bytes): Clave simétrica de 128, 192 o 256 bits.
        plaintext (bytes): Datos a cifrar, tratados como bytes opacos.
        nonce_len (int): Longitud del nonce aleatorio.
        aad (Optional[bytes]): Datos autenticados adicionales.

    Returns:
        Tuple[bytes, bytes]: Nonce y `ciphertext || tag`.

    """

    nonce = random_bytes(nonce_len)
    bundle = AESGCM(key).encrypt(nonce, plaintext, aad)
    return nonce, bundle


def aes_gcm_open(
    key: bytes, nonce: bytes, bundle: bytes, aad: Optional[bytes] = None
) -> bytes:
    """Descifra y verifica `ciphertext || tag` con AES-GCM.

    Args:
        key (bytes): Clave simétrica derivada.
        nonce (bytes): Nonce usado al cifrar.
        bundle (bytes): Ciphertext con la etiqueta concatenada al final.
        aad (Optional[bytes]): Los mismos datos asociados usados al cifrar.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        cryptography.exceptions.InvalidTag: Si la etiqueta no verifica.

    """

    return AESGCM(key).decrypt(nonce, bundle, aad)
