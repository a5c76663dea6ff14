# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen del flujo.
# --------------------------------------------------------------

import streamlit as st

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="Password Hash", page_icon="🔑", layout="centered")

# Presenta el nombre del producto y su propósito general.
st.title("🔑 Password Hash")
st.write("Derivación de claves PBKDF2-HMAC a partir de password, salt y número de rondas.")
st.info("Ve a **Derivar Clave** para calcular o verificar una clave derivada.")
