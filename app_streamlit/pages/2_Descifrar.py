# --------------------------------------------------------------
# File: 2_Descifrar.py
# Description: Abre un enlace o token recibido con la contraseña del remitente.
# --------------------------------------------------------------

import streamlit as st

from ovault.config import configure_logging
from ovault.share import open_shared, outcome_message, outcome_text

configure_logging()

# Presenta el título de la sección orientada al descifrado.
st.title("🔓 Descifrar")
st.caption(
    "Pega el enlace completo, el token `[OV_v1]...` o el bloque `(S)...(E)`. "
    "El fragmento se separa en local; el servidor nunca lo recibe en la URL."
)

# El formulario permite enviar con Enter desde el campo de contraseña.
with st.form("decrypt_form"):
    received = st.text_area("Enlace o token", key="received", height=120)
    password = st.text_input("Contraseña", type="password", key="password")
    submitted = st.form_submit_button("Decrypt")

if submitted:
    outcome = open_shared(received, password)
    if outcome.ok:
        st.success(outcome_message(outcome))
        st.code(outcome_text(outcome), language="text")
    else:
        st.error(outcome_message(outcome))
    if outcome.debug:
        st.code(outcome.debug)
