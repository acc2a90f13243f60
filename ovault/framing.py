# --------------------------------------------------------------
# File: framing.py
# Description: Serialización del token: layout binario, Base64, enlaces y bloque imprimible.
# --------------------------------------------------------------
"""Empaqueta y desempaqueta tokens `[OV_vN]<base64>` y sus formas de transporte."""

from __future__ import annotations

import base64
import binascii
import re
from urllib.parse import quote, unquote, urldefrag

from ovault.errors import FormatError, UnsupportedVersionError
from ovault.models import TokenFields, VersionParams
from ovault.versions import CURRENT_VERSION, detect_tag, get_version_by_marker, get_version_by_tag

__all__ = [
    "build_share_link",
    "check_fields",
    "extract_token",
    "format_token",
    "from_display_block",
    "from_fragment",
    "pack_fields",
    "parse_token",
    "to_display_block",
    "to_fragment",
    "unpack_fields",
]

# Mismo conjunto que `encodeURIComponent` deja sin escapar.
_FRAGMENT_SAFE = "!*'()"

_DISPLAY_RE = re.compile(r"\(S\)(.*?)\(E\)", re.DOTALL)
_WHITESPACE_RE = re.compile(r"\s+")


def pack_fields(fields: TokenFields) -> bytes:
    """Construye el layout binario `[marker][salt][nonce][ciphertext||tag]`.

    Args:
        fields (TokenFields): Campos producidos por el cifrado.

    Returns:
        bytes: Secuencia binaria lista para codificar en Base64.

    Raises:
        ValueError: Si la salt o el nonce no tienen la longitud de su versión.

    """

    version = fields.version
    if len(fields.salt) != version.salt_len or len(fields.nonce) != version.nonce_len:
        raise ValueError("Salt/nonce length does not match the token version")
    return bytes([version.marker]) + fields.salt + fields.nonce + fields.bundle


def unpack_fields(raw: bytes, version: VersionParams) -> TokenFields:
    """Corta el layout binario en campos de longitud fija.

    Args:
        raw (bytes): Bytes decodificados del Base64.
        version (VersionParams): Versión anunciada por la etiqueta visible.

    Returns:
        TokenFields: Salt, nonce y `ciphertext || tag`.

    Raises:
        FormatError: Si el payload está truncado o la marca binaria no coincide.

    """

    if len(raw) < version.min_payload_len:
        raise FormatError(
            f"Token payload too short: {len(raw)} bytes (minimum {version.min_payload_len})"
        )
    if get_version_by_marker(raw[0]) != version:
        raise FormatError("Version marker does not match the version tag")

    salt_end = 1 + version.salt_len
    nonce_end = salt_end + version.nonce_len
    return TokenFields(
        version=version,
        salt=raw[1:salt_end],
        nonce=raw[salt_end:nonce_end],
        bundle=raw[nonce_end:],
    )


def check_fields(fields: TokenFields) -> TokenFields:
    """Valida campos ya separados contra el registro de versiones.

    Raises:
        UnsupportedVersionError: Si la versión no coincide con una registrada.
        FormatError: Si la salt, el nonce o el bundle no tienen la longitud de su versión.

    """

    version = fields.version
    if get_version_by_tag(version.tag) != version:
        raise UnsupportedVersionError(f"Unregistered parameters for {version.tag}")
    if len(fields.salt) != version.salt_len or len(fields.nonce) != version.nonce_len:
        raise FormatError("Salt/nonce length does not match the token version")
    if len(fields.bundle) < version.tag_len:
        raise FormatError("Ciphertext is shorter than the authentication tag")
    return fields


def format_token(fields: TokenFields) -> str:
    """Codifica los campos como `<etiqueta><Base64 estándar con relleno>`."""

    payload = base64.b64encode(pack_fields(fields)).decode("ascii")
    return fields.version.tag + payload


def parse_token(text: str) -> TokenFields:
    """Interpreta un token textual despachando por su etiqueta visible.

    La versión se valida antes de decodificar el Base64 y, por tanto, antes de
    cualquier operación criptográfica.

    Args:
        text (str): Token `[OV_vN]<base64>`, con espacios alrededor opcionales.

    Returns:
        TokenFields: Campos del token.

    Raises:
        UnsupportedVersionError: Si la etiqueta no corresponde a ninguna versión.
        FormatError: Si el Base64 es inválido o el payload está truncado.

    """

    text = text.strip()
    tag = detect_tag(text)
    version = get_version_by_tag(tag)

    body = text[len(tag):]
    try:
        raw = base64.b64decode(body, validate=True)
    except (binascii.Error, ValueError):
        raise FormatError("Token payload is not valid Base64") from None
    return unpack_fields(raw, version)


def to_fragment(token: str) -> str:
    """Escapa el token para el fragmento de una URL (compatible con `encodeURIComponent`)."""

    return quote(token, safe=_FRAGMENT_SAFE)


def from_fragment(fragment: str) -> str:
    """Revierte `to_fragment`; admite el `#` inicial."""

    if fragment.startswith("#"):
        fragment = fragment[1:]
    return unquote(fragment)


def build_share_link(token: str, base_url: str) -> str:
    """Compone `<base_url>#<token escapado>`.

    El token viaja solo en el fragmento, que el navegador nunca envía al servidor.

    Raises:
        ValueError: Si `base_url` está vacía.

    """

    if not base_url:
        raise ValueError("A decrypt page URL is required to build a share link")
    return f"{urldefrag(base_url).url}#{to_fragment(token)}"


def to_display_block(token: str) -> str:
    """Devuelve la forma imprimible `(S)<base64>(E)` de un token de la versión actual.

    Raises:
        FormatError: Si el token no es de la versión actual.

    """

    token = token.strip()
    tag = detect_tag(token)
    if tag != CURRENT_VERSION.tag:
        raise FormatError(f"Display blocks are only defined for {CURRENT_VERSION.tag} tokens")
    return f"(S){token[len(tag):]}(E)"


def from_display_block(text: str) -> str:
    """Recupera el token de un bloque `(S)...(E)`, ignorando saltos de línea internos.

    Raises:
        FormatError: Si el texto no contiene un bloque completo.

    """

    match = _DISPLAY_RE.search(text)
    if match is None:
        raise FormatError("No (S)...(E) block found")
    body = _WHITESPACE_RE.sub("", match.group(1))
    return CURRENT_VERSION.tag + body


def extract_token(text: str) -> str:
    """Obtiene el token textual de lo que el usuario haya pegado.

    Acepta el token tal cual, el token escapado, un enlace completo, un
    fragmento `#...` suelto o un bloque `(S)...(E)`.

    Raises:
        FormatError: Si la entrada está vacía o el bloque está incompleto.

    """

    text = text.strip()
    if not text:
        raise FormatError("No token provided")
    if "(S)" in text:
        return from_display_block(text)
    if "#" in text:
        text = from_fragment(text.split("#", 1)[1])
    elif "%" in text:
        text = unquote(text)
    return text.strip()
