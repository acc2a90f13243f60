# --------------------------------------------------------------
# File: config.py
# Description: Configuración de entorno para enlaces, QR y logging.
# --------------------------------------------------------------
"""Lee la configuración de la aplicación desde variables de entorno."""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

# URL base de la página de descifrado; vacía desactiva los enlaces compartibles.
DECRYPT_URL = os.getenv("OV_DECRYPT_URL", "")

QR_BOX_SIZE = int(os.getenv("OV_QR_BOX_SIZE", "8"))
QR_BORDER = int(os.getenv("OV_QR_BORDER", "4"))
QR_ERROR_CORRECTION = os.getenv("OV_QR_ERROR_CORRECTION", "M").upper()

LOG_LEVEL = os.getenv("OV_LOG_LEVEL", "WARNING").upper()


def configure_logging() -> None:
    """Configura el logging raíz con `OV_LOG_LEVEL`; las llamadas repetidas no tienen efecto."""

    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
