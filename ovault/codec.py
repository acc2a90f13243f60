# --------------------------------------------------------------
# File: codec.py
# Description: Cifrado y descifrado de contenido en tokens versionados con contraseña.
# --------------------------------------------------------------
"""Códec sin estado: `encode(plaintext, password)` y `decode(token, password)`."""

from __future__ import annotations

import logging
from typing import Union

from cryptography.exceptions import InvalidTag

from ovault.crypto_kdf import derive_key
from ovault.crypto_sym import aes_gcm_open, aes_gcm_seal, random_bytes
from ovault.errors import AuthFailure, MissingPasswordError
from ovault.framing import check_fields, format_token, parse_token
from ovault.models import TokenFields
from ovault.versions import CURRENT_VERSION

logger = logging.getLogger(__name__)

Password = Union[str, bytes]


def _password_bytes(password: Password) -> bytes:
    """Normaliza la contraseña a bytes UTF-8 y rechaza la vacía.

    Raises:
        MissingPasswordError: Si la contraseña está vacía o es `None`.

    """

    if not password:
        raise MissingPasswordError()
    if isinstance(password, str):
        return password.encode("utf-8")
    return bytes(password)


def encode(plaintext: bytes, password: Password) -> str:
    """Sella `plaintext` bajo `password` y devuelve el token textual.

    Cada llamada genera una salt y un nonce nuevos, por lo que dos tokens del
    mismo contenido y contraseña nunca coinciden.

    Args:
        plaintext (bytes): Contenido opaco a proteger.
        password (Password): Contraseña no vacía (`str` en UTF-8 o `bytes`).

    Returns:
        str: Token `[OV_v1]<base64>`.

    Raises:
        MissingPasswordError: Si la contraseña está vacía.

    """

    secret = _password_bytes(password)
    version = CURRENT_VERSION

    salt = random_bytes(version.salt_len)
    key = derive_key(secret, salt, version)
    nonce, bundle = aes_gcm_seal(
        key, bytes(plaintext), nonce_len=version.nonce_len, aad=version.aad
    )

    token = format_token(
        TokenFields(version=version, salt=salt, nonce=nonce, bundle=bundle)
    )
    logger.debug("Sealed %d bytes as %s token (%d chars)", len(plaintext), version.tag, len(token))
    return token


def decode(token: Union[str, TokenFields], password: Password) -> bytes:
    """Abre un token y devuelve exactamente los bytes originales.

    La contraseña se comprueba antes de interpretar el token y la versión antes
    de derivar ninguna clave. Contraseña incorrecta y manipulación del
    contenido producen el mismo `AuthFailure`.

    Args:
        token (Union[str, TokenFields]): Token textual o ya interpretado.
        password (Password): Contraseña usada al cifrar.

    Returns:
        bytes: Contenido original.

    Raises:
        MissingPasswordError: Si la contraseña está vacía.
        FormatError: Si el token no se puede interpretar o su versión es desconocida.
        AuthFailure: Si la etiqueta de autenticación no verifica.

    """

    secret = _password_bytes(password)
    fields = parse_token(token) if isinstance(token, str) else check_fields(token)
    version = fields.version

    key = derive_key(secret, fields.salt, version)
    try:
        plaintext = aes_gcm_open(key, fields.nonce, fields.bundle, version.aad)
    except InvalidTag:
        logger.info("Authentication failed for %s token", version.tag)
        raise AuthFailure() from None

    logger.debug("Opened %s token (%d bytes)", version.tag, len(plaintext))
    return plaintext
