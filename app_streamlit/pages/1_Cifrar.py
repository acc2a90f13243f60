# --------------------------------------------------------------
# File: 1_Cifrar.py
# Description: Recoge contenido y contraseña y muestra token, enlace y QR.
# --------------------------------------------------------------

import streamlit as st

from ovault.config import configure_logging
from ovault.password_policy import check_password_strength
from ovault.share import MSG_MISSING_PASSWORD, share_text

configure_logging()

# Presenta el título de la sección dedicada al cifrado.
st.title("🔒 Cifrar")

content = st.text_area("Contenido", key="content", height=200)
password = st.text_input("Contraseña", type="password", key="password")

if password:
    # Medidor orientativo; no impide cifrar con contraseñas débiles.
    ok_pw, reasons, score = check_password_strength(password)
    st.progress(score / 100.0, text=f"Fortaleza estimada: {score}/100")
    if not ok_pw:
        st.warning("Mejoras recomendadas:\n- " + "\n- ".join(reasons))

if st.button("Encrypt", key="btn_encrypt"):
    if not password:
        st.error(MSG_MISSING_PASSWORD)
        st.stop()

    bundle = share_text(content, password)
    if bundle.qr_too_large:
        st.warning("El contenido es demasiado largo para un código QR; comparte el enlace.")

    st.success("Contenido cifrado.")
    if bundle.qr_png:
        st.image(bundle.qr_png, caption="Escanea para abrir la página de descifrado")

    if bundle.link:
        st.markdown("**Enlace compartible**")
        st.code(bundle.link, language="text")
    st.markdown("**Token**")
    st.code(bundle.token, language="text")
    st.markdown("**Bloque imprimible**")
    st.code(bundle.display_block, language="text")
    st.code(bundle.debug)
