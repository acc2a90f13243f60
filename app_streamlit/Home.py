# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen del flujo.
# --------------------------------------------------------------

import streamlit as st

from ovault.config import configure_logging
from ovault.versions import CURRENT_VERSION

configure_logging()

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="OV Vault", page_icon="🔐", layout="centered")

# Presenta el nombre del producto y su propósito general.
st.title("🔐 OV Vault")
st.write(
    "Cifra un texto con una contraseña y compártelo como enlace o código QR. "
    "El token viaja en el fragmento de la URL (después de `#`), que nunca se envía al servidor."
)
st.info(
    "Ve a **Cifrar** para sellar un contenido y a **Descifrar** para abrir un enlace recibido."
)
st.caption(
    f"Formato actual: `{CURRENT_VERSION.tag}` · Argon2id t={CURRENT_VERSION.time_cost} "
    f"m={CURRENT_VERSION.memory_cost}KiB · AES-GCM-{CURRENT_VERSION.key_len * 8}"
)
