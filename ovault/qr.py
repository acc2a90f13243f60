# --------------------------------------------------------------
# File: qr.py
# Description: Renderizado del enlace o token compartible como código QR en PNG.
# --------------------------------------------------------------
"""Generación de imágenes QR para tokens OV."""

import io
import logging
from typing import Optional

import qrcode
from qrcode.constants import ERROR_CORRECT_H, ERROR_CORRECT_L, ERROR_CORRECT_M, ERROR_CORRECT_Q
from qrcode.exceptions import DataOverflowError
from qrcode.image.pil import PilImage

from ovault import config
from ovault.errors import QrCapacityError

logger = logging.getLogger(__name__)

ERROR_LEVELS = {
    "L": ERROR_CORRECT_L,
    "M": ERROR_CORRECT_M,
    "Q": ERROR_CORRECT_Q,
    "H": ERROR_CORRECT_H,
}


def render_qr_png(
    data: str,
    *,
    box_size: Optional[int] = None,
    border: Optional[int] = None,
    error_correction: Optional[str] = None,
) -> bytes:
    """Codifica `data` en un QR y devuelve la imagen PNG.

    Los valores omitidos se toman de `ovault.config`.

    Args:
        data (str): Enlace o token; debe ser ASCII.
        box_size (Optional[int]): Píxeles por módulo.
        border (Optional[int]): Módulos de margen.
        error_correction (Optional[str]): Nivel `L`, `M`, `Q` o `H`.

    Returns:
        bytes: Imagen PNG.

    Raises:
        ValueError: Si el nivel de corrección es desconocido.
        QrCapacityError: Si los datos no caben en un QR de versión 40.

    """

    level_name = (error_correction or config.QR_ERROR_CORRECTION).upper()
    if level_name not in ERROR_LEVELS:
        raise ValueError(f"Unknown QR error correction level: {level_name}")

    qr = qrcode.QRCode(
        version=None,
        error_correction=ERROR_LEVELS[level_name],
        box_size=box_size or config.QR_BOX_SIZE,
        border=config.QR_BORDER if border is None else border,
    )
    qr.add_data(data)
    try:
        qr.make(fit=True)
    except (DataOverflowError, ValueError):
        # qrcode 8 reporta el desbordamiento como ValueError("Invalid version ...").
        raise QrCapacityError(
            f"{len(data)} characters do not fit in a QR code at level {level_name}"
        ) from None

    buffer = io.BytesIO()
    qr.make_image(image_factory=PilImage).save(buffer, format="PNG")
    logger.debug("Rendered QR version %s for %d chars", qr.version, len(data))
    return buffer.getvalue()
