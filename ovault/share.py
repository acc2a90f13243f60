# --------------------------------------------------------------
# File: share.py
# Description: Flujos de cifrado y descifrado que consume la interfaz Streamlit.
# --------------------------------------------------------------
"""Servicios de alto nivel: sellar texto para compartir y abrir tokens recibidos."""

from __future__ import annotations

import logging
from typing import Optional

from ovault import config
from ovault.codec import decode, encode
from ovault.errors import AuthFailure, FormatError, MissingPasswordError, QrCapacityError
from ovault.framing import build_share_link, extract_token, parse_token, to_display_block
from ovault.models import DecryptOutcome, ShareBundle, VersionParams
from ovault.qr import render_qr_png
from ovault.versions import CURRENT_VERSION

logger = logging.getLogger(__name__)

MSG_MISSING_PASSWORD = "Please enter a password"
MSG_AUTH_FAILURE = "Decryption failed"
MSG_FORMAT_ERROR = "Invalid or unsupported token"
MSG_SUCCESS = "Content decrypted"

_MESSAGES = {
    "success": MSG_SUCCESS,
    "missing_password": MSG_MISSING_PASSWORD,
    "format_error": MSG_FORMAT_ERROR,
    "auth_failure": MSG_AUTH_FAILURE,
}


def _debug_trace(stage: str, version: VersionParams) -> str:
    """Describe los parámetros de la versión para mostrarlos en la interfaz."""

    return (
        f"[{stage}] {version.tag} Argon2id t={version.time_cost} "
        f"m={version.memory_cost}KiB p={version.parallelism}\n"
        f"[{stage}] AES-GCM-{version.key_len * 8} salt={version.salt_len * 8}-bit "
        f"nonce={version.nonce_len * 8}-bit tag={version.tag_len * 8}-bit"
    )


def share_text(
    content: str,
    password: str,
    *,
    base_url: Optional[str] = None,
    with_qr: bool = True,
) -> ShareBundle:
    """Cifra un texto y prepara token, enlace, bloque imprimible y QR.

    Args:
        content (str): Texto a proteger; se cifra su codificación UTF-8.
        password (str): Contraseña no vacía.
        base_url (Optional[str]): URL de la página de descifrado; por defecto
            `config.DECRYPT_URL`. Si está vacía no se construye enlace y el QR
            contiene el token.
        with_qr (bool): Si debe renderizarse la imagen QR.

    Returns:
        ShareBundle: Artefactos listos para mostrar.

    Raises:
        MissingPasswordError: Si la contraseña está vacía.

    """

    if not password:
        raise MissingPasswordError()

    token = encode(content.encode("utf-8"), password)
    url = config.DECRYPT_URL if base_url is None else base_url
    link = build_share_link(token, url) if url else None
    qr_png = None
    qr_too_large = False
    if with_qr:
        try:
            qr_png = render_qr_png(link or token)
        except QrCapacityError as exc:
            logger.info("Skipping QR image: %s", exc)
            qr_too_large = True

    logger.info("Prepared share bundle (%d chars, link=%s)", len(token), link is not None)
    return ShareBundle(
        token=token,
        link=link,
        display_block=to_display_block(token),
        qr_png=qr_png,
        qr_too_large=qr_too_large,
        debug=_debug_trace("ENCRYPT", CURRENT_VERSION),
    )


def open_shared(text: str, password: str) -> DecryptOutcome:
    """Ejecuta un intento de descifrado y devuelve su estado terminal.

    El orden es fijo: contraseña vacía, después formato y versión, después
    verificación AES-GCM. Ningún error de la taxonomía escapa como excepción.

    Args:
        text (str): Token, enlace o bloque `(S)...(E)` pegado por el usuario.
        password (str): Contraseña introducida.

    Returns:
        DecryptOutcome: `success`, `missing_password`, `format_error` o `auth_failure`.

    """

    if not password:
        return DecryptOutcome(kind="missing_password")

    try:
        fields = parse_token(extract_token(text))
    except FormatError as exc:
        logger.info("Rejected token: %s", exc)
        return DecryptOutcome(kind="format_error")

    debug = _debug_trace("DECRYPT", fields.version)
    try:
        plaintext = decode(fields, password)
    except AuthFailure:
        return DecryptOutcome(kind="auth_failure", debug=debug)
    return DecryptOutcome(kind="success", plaintext=plaintext, debug=debug)


def outcome_message(outcome: DecryptOutcome) -> str:
    """Texto que la interfaz muestra para cada estado terminal."""

    return _MESSAGES[outcome.kind]


def outcome_text(outcome: DecryptOutcome) -> str:
    """Decodifica el contenido recuperado como UTF-8 para mostrarlo.

    Raises:
        ValueError: Si el resultado no es un éxito.

    """

    if not outcome.ok or outcome.plaintext is None:
        raise ValueError("Only successful outcomes carry content")
    return outcome.plaintext.decode("utf-8", errors="replace")
