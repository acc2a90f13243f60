# --------------------------------------------------------------
# File: test_framing.py
# Description: Pruebas del layout binario, el texto Base64 y las formas de transporte.
# --------------------------------------------------------------

import base64

import pytest

from ovault.errors import FormatError, UnsupportedVersionError
from ovault.framing import (
    build_share_link,
    extract_token,
    format_token,
    from_display_block,
    from_fragment,
    pack_fields,
    parse_token,
    to_display_block,
    to_fragment,
)
from ovault.models import TokenFields
from ovault.versions import V1

SALT = bytes(range(16))
NONCE = bytes(range(100, 112))
BUNDLE = b"\xaa" * 9 + b"\xbb" * 16


def _fields() -> TokenFields:
    return TokenFields(version=V1, salt=SALT, nonce=NONCE, bundle=BUNDLE)


def _token_for(raw: bytes, tag: str = "[OV_v1]") -> str:
    return tag + base64.b64encode(raw).decode("ascii")


def test_layout_order_is_marker_salt_nonce_bundle():
    """El layout binario respeta el orden fijo de campos.

    Returns:
        None: Las aserciones comparan el resultado con la concatenación esperada.
    """
    assert pack_fields(_fields()) == b"\x01" + SALT + NONCE + BUNDLE


def test_format_and_parse_token():
    """El token lleva la etiqueta visible seguida de Base64 estándar con relleno."""
    token = format_token(_fields())
    assert token.startswith("[OV_v1]")
    assert token == _token_for(b"\x01" + SALT + NONCE + BUNDLE)

    parsed = parse_token("  " + token + "\n")
    assert parsed.version == V1
    assert (parsed.salt, parsed.nonce, parsed.bundle) == (SALT, NONCE, BUNDLE)


def test_pack_rejects_wrong_salt_length():
    fields = TokenFields(version=V1, salt=b"short", nonce=NONCE, bundle=BUNDLE)
    with pytest.raises(ValueError):
        pack_fields(fields)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "61883g1J/nskSKh2UH2lsQ==",  # sin etiqueta
        "OV_v1]AAAA",  # etiqueta incompleta
        "[OV_v1]@@@@not-base64@@@@",  # alfabeto inválido
        "[OV_v1]AAECAwQ",  # relleno incorrecto
        "[OV_v1]" + base64.b64encode(b"\x01" + b"\x00" * 43).decode(),  # truncado
    ],
)
def test_parse_rejects_malformed(text):
    """Comprueba que entradas mal formadas produzcan `FormatError`.

    Args:
        text (str): Token inválido proporcionado por la parametrización.

    Returns:
        None: Se espera la excepción de formato.
    """
    with pytest.raises(FormatError):
        parse_token(text)


def test_parse_rejects_unknown_version_tag():
    """Una etiqueta no registrada falla antes de decodificar el Base64."""
    with pytest.raises(UnsupportedVersionError):
        parse_token("[OV_v9]" + "!" * 10)


def test_parse_rejects_marker_mismatch():
    """La marca binaria debe coincidir con la etiqueta visible."""
    raw = b"\x02" + SALT + NONCE + BUNDLE
    with pytest.raises(FormatError):
        parse_token(_token_for(raw))


def test_minimum_payload_is_accepted():
    """Un plaintext vacío produce el payload mínimo de 45 bytes."""
    raw = b"\x01" + SALT + NONCE + b"\xbb" * 16
    parsed = parse_token(_token_for(raw))
    assert len(parsed.bundle) == V1.tag_len


def test_fragment_matches_encode_uri_component():
    """El escapado coincide con `encodeURIComponent` del navegador."""
    assert to_fragment("[OV_v1]ab+/=") == "%5BOV_v1%5Dab%2B%2F%3D"
    assert from_fragment("#%5BOV_v1%5Dab%2B%2F%3D") == "[OV_v1]ab+/="
    assert from_fragment("%5BOV_v1%5Dab%2B%2F%3D") == "[OV_v1]ab+/="


def test_build_share_link_replaces_existing_fragment():
    token = "[OV_v1]ab+/="
    link = build_share_link(token, "https://example.org/decrypt.html#old")
    assert link == "https://example.org/decrypt.html#%5BOV_v1%5Dab%2B%2F%3D"


def test_build_share_link_requires_base_url():
    with pytest.raises(ValueError):
        build_share_link("[OV_v1]AAAA", "")


def test_display_block_roundtrip():
    """El bloque `(S)...(E)` omite la etiqueta y la recupera al leerlo.

    Returns:
        None: Las aserciones comparan bloque y token restaurado.
    """
    token = format_token(_fields())
    block = to_display_block(token)
    assert block.startswith("(S)") and block.endswith("(E)")
    assert "[OV_v1]" not in block
    assert from_display_block(block) == token


def test_display_block_ignores_line_wraps():
    assert from_display_block("Code: (S)AAAA\nBBBB (E) fin") == "[OV_v1]AAAABBBB"


def test_display_block_requires_current_version():
    with pytest.raises(FormatError):
        to_display_block("[OV_v9]AAAA")
    with pytest.raises(FormatError):
        from_display_block("(S)AAAA")


@pytest.mark.parametrize(
    "pasted",
    [
        "[OV_v1]ab+/=",
        "  [OV_v1]ab+/=\n",
        "%5BOV_v1%5Dab%2B%2F%3D",
        "#%5BOV_v1%5Dab%2B%2F%3D",
        "https://example.org/decrypt.html#%5BOV_v1%5Dab%2B%2F%3D",
        "(S)ab+/=(E)",
    ],
)
def test_extract_token_accepts_every_transport_form(pasted):
    """Token, fragmento, enlace y bloque imprimible conducen al mismo token.

    Args:
        pasted (str): Texto pegado por el usuario.

    Returns:
        None: La aserción compara con el token original.
    """
    assert extract_token(pasted) == "[OV_v1]ab+/="


def test_extract_token_rejects_empty_input():
    with pytest.raises(FormatError):
        extract_token("   ")
