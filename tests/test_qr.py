# --------------------------------------------------------------
# File: test_qr.py
# Description: Pruebas del renderizado de códigos QR.
# --------------------------------------------------------------

import pytest

from ovault.errors import QrCapacityError
from ovault.qr import render_qr_png


def test_render_qr_png_returns_png():
    """El resultado es una imagen PNG no vacía."""
    png = render_qr_png("https://example.org/decrypt#%5BOV_v1%5DAAAA")
    assert png.startswith(b"\x89PNG\r\n\x1a\n")


def test_render_qr_png_capacity_error():
    """Un contenido que excede la versión 40 del QR produce `QrCapacityError`."""
    with pytest.raises(QrCapacityError):
        render_qr_png("A" * 5000, error_correction="H")


def test_render_qr_png_rejects_unknown_level():
    with pytest.raises(ValueError):
        render_qr_png("data", error_correction="X")


def test_render_qr_png_long_token_raises_capacity_error():
    """Un token de unos 2700 caracteres excede la versión 40 con corrección M."""
    with pytest.raises(QrCapacityError):
        render_qr_png("[OV_v1]" + "A" * 2700, error_correction="M")
