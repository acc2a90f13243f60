# --------------------------------------------------------------
# File: versions.py
# Description: Registro de versiones del formato y sus parámetros fijos.
# --------------------------------------------------------------
"""Definiciones de versión; los tokens antiguos se descifran con sus propios parámetros."""

import re
from typing import Dict

from ovault.errors import FormatError, UnsupportedVersionError
from ovault.models import VersionParams

V1 = VersionParams(
    tag="[OV_v1]",
    marker=0x01,
    salt_len=16,
    nonce_len=12,
    key_len=32,
    tag_len=16,
    time_cost=3,
    memory_cost=64 * 1024,
    parallelism=1,
    bind_tag_as_aad=True,
)

CURRENT_VERSION = V1

_BY_TAG: Dict[str, VersionParams] = {V1.tag: V1}
_BY_MARKER: Dict[int, VersionParams] = {V1.marker: V1}

TAG_RE = re.compile(r"^\[[A-Za-z0-9_]{1,32}\]")


def get_version_by_tag(tag: str) -> VersionParams:
    """Busca una versión por su etiqueta visible.

    Raises:
        UnsupportedVersionError: Si la etiqueta no está registrada.

    """

    try:
        return _BY_TAG[tag]
    except KeyError:
        raise UnsupportedVersionError(f"Unsupported token version: {tag}") from None


def get_version_by_marker(marker: int) -> VersionParams:
    """Busca una versión por su byte de marca binaria."""

    try:
        return _BY_MARKER[marker]
    except KeyError:
        raise UnsupportedVersionError(f"Unsupported version marker: 0x{marker:02x}") from None


def detect_tag(text: str) -> str:
    """Devuelve la etiqueta entre corchetes que abre un token textual.

    Raises:
        FormatError: Si el texto no empieza por una etiqueta de versión.

    """

    match = TAG_RE.match(text)
    if match is None:
        raise FormatError("Token has no version tag")
    return match.group(0)
