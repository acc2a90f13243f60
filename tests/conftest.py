# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar la configuración y reutilizar tokens.
# --------------------------------------------------------------

import base64
from typing import Callable, Dict, Iterator

import pytest

from ovault import config
from ovault.codec import encode


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch) -> Iterator[None]:
    """Fija la configuración de enlaces y QR para que no dependa del `.env` local.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar atributos del módulo.

    Returns:
        Iterator[None]: Control del fixture autouse durante cada test.
    """
    monkeypatch.setattr(config, "DECRYPT_URL", "")
    monkeypatch.setattr(config, "QR_BOX_SIZE", 4)
    monkeypatch.setattr(config, "QR_BORDER", 4)
    monkeypatch.setattr(config, "QR_ERROR_CORRECTION", "M")
    yield


@pytest.fixture(scope="session")
def sealed() -> Dict[str, object]:
    """Token de referencia cifrado una sola vez por sesión (Argon2id es costoso)."""

    plaintext = "Hello, this is a secret message!".encode("utf-8")
    password = "testPassword123"
    return {"plaintext": plaintext, "password": password, "token": encode(plaintext, password)}


@pytest.fixture
def tamper() -> Callable[[str, int], str]:
    """Devuelve una función que invierte un bit del byte `index` del payload binario."""

    def _tamper(token: str, index: int) -> str:
        tag_end = token.index("]") + 1
        raw = bytearray(base64.b64decode(token[tag_end:]))
        raw[index] ^= 0x01
        return token[:tag_end] + base64.b64encode(bytes(raw)).decode("ascii")

    return _tamper
