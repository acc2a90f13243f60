# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos inmutables compartidos por el códec y la UI.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan versiones, campos del token y resultados."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict


class VersionParams(BaseModel):
    """Parámetros fijos de una versión del formato de token.

    Attributes:
        tag (str): Etiqueta visible que precede al Base64, p. ej. `[OV_v1]`.
        marker (int): Byte de versión al inicio del layout binario.
        salt_len (int): Longitud de la salt Argon2id en bytes.
        nonce_len (int): Longitud del nonce AES-GCM en bytes.
        key_len (int): Longitud de la clave derivada en bytes.
        tag_len (int): Longitud de la etiqueta de autenticación en bytes.
        time_cost (int): Iteraciones Argon2id.
        memory_cost (int): Memoria Argon2id en KiB.
        parallelism (int): Paralelismo Argon2id.
        bind_tag_as_aad (bool): Si la etiqueta visible se autentica como AAD.

    """

    model_config = ConfigDict(frozen=True)

    tag: str
    marker: int
    salt_len: int
    nonce_len: int
    key_len: int
    tag_len: int
    time_cost: int
    memory_cost: int
    parallelism: int
    bind_tag_as_aad: bool = True

    @property
    def aad(self) -> Optional[bytes]:
        """Datos asociados que AES-GCM autentica para esta versión."""

        return self.tag.encode("ascii") if self.bind_tag_as_aad else None

    @property
    def min_payload_len(self) -> int:
        """Longitud binaria mínima de un token (plaintext vacío)."""

        return 1 + self.salt_len + self.nonce_len + self.tag_len


class TokenFields(BaseModel):
    """Campos de un token ya separado, antes de cualquier operación criptográfica.

    Attributes:
        version (VersionParams): Versión declarada por el token.
        salt (bytes): Salt de la derivación de clave.
        nonce (bytes): Nonce del cifrado AES-GCM.
        bundle (bytes): Ciphertext seguido de la etiqueta de autenticación.

    """

    model_config = ConfigDict(frozen=True)

    version: VersionParams
    salt: bytes
    nonce: bytes
    bundle: bytes


OutcomeKind = Literal["success", "missing_password", "format_error", "auth_failure"]


class DecryptOutcome(BaseModel):
    """Resultado terminal de un intento de descifrado.

    Attributes:
        kind (OutcomeKind): Estado final de la máquina de descifrado.
        plaintext (Optional[bytes]): Contenido recuperado, solo cuando `kind` es `success`.
        debug (str): Traza con parámetros de versión para la interfaz.

    """

    model_config = ConfigDict(frozen=True)

    kind: OutcomeKind
    plaintext: Optional[bytes] = None
    debug: str = ""

    @property
    def ok(self) -> bool:
        return self.kind == "success"


class ShareBundle(BaseModel):
    """Todo lo que la página de cifrado muestra tras sellar un contenido.

    Attributes:
        token (str): Token textual con etiqueta de versión.
        link (Optional[str]): Enlace a la página de descifrado con el token en el fragmento.
        display_block (str): Forma imprimible `(S)...(E)` bajo el QR.
        qr_png (Optional[bytes]): Imagen PNG del QR, si se generó.
        qr_too_large (bool): El contenido no cabía en un QR y se omitió la imagen.
        debug (str): Traza con parámetros KDF y de cifrado.

    """

    model_config = ConfigDict(frozen=True)

    token: str
    link: Optional[str] = None
    display_block: str
    qr_png: Optional[bytes] = None
    qr_too_large: bool = False
    debug: str = ""
