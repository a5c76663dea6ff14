# --------------------------------------------------------------
# File: 1_Derivar_Clave.py
# Description: Vistas de derivación y verificación de claves PBKDF2 en Streamlit.
# --------------------------------------------------------------

import base64

import streamlit as st
from pydantic import ValidationError

from password_hash.config import default_params
from password_hash.keyed_hash import supported_hashes
from password_hash.models import DerivationParams
from password_hash.pbkdf2 import PBKDF2Error

st.title("🧮 Derivar Clave")

defaults = default_params()
algorithms = supported_hashes()

# Parámetros comunes a ambas pestañas.
algorithm = st.selectbox(
    "Algoritmo",
    algorithms,
    index=algorithms.index(defaults.algorithm),
)
rounds = st.number_input("Rondas", min_value=1, value=defaults.rounds, step=1000)
key_length = st.number_input("Longitud de clave (bytes)", min_value=0, value=defaults.key_length)

tab_gen, tab_ver = st.tabs(["Derivar", "Verificar"])

# Sección de derivación.
with tab_gen:
    password = st.text_input("Password", type="password", key="gen_pass")
    salt = st.text_input("Salt", key="gen_salt")

    if st.button("Derivar", key="btn_derive"):
        try:
            params = DerivationParams(
                algorithm=algorithm, rounds=int(rounds), key_length=int(key_length)
            )
            engine = params.build_engine()
            key = engine.generate_key(password, salt, params.rounds, params.key_length)
        except (ValidationError, PBKDF2Error) as exc:
            st.error(str(exc))
        else:
            st.success("Clave derivada.")
            st.text_input("Hex", key.hex(), disabled=True)
            st.text_input("Base64", base64.b64encode(key).decode("ascii"), disabled=True)
            st.code(
                f"[PBKDF2] HMAC-{engine.algorithm.name} block={engine.block_size} bytes\n"
                f"[PBKDF2] rounds={params.rounds} key_length={params.key_length} "
                f"blocks={-(-params.key_length // engine.block_size)}"
            )

# Sección de verificación contra una clave Base64 almacenada.
with tab_ver:
    password_v = st.text_input("Password", type="password", key="ver_pass")
    salt_v = st.text_input("Salt", key="ver_salt")
    expected = st.text_input("Clave esperada (Base64)", key="ver_expected")

    if st.button("Verificar", key="btn_verify"):
        try:
            engine = DerivationParams(algorithm=algorithm, rounds=int(rounds)).build_engine()
            ok = engine.verify_key(password_v, salt_v, int(rounds), expected)
        except (ValidationError, PBKDF2Error) as exc:
            st.error(str(exc))
        else:
            if ok:
                st.success("La clave coincide.")
            else:
                st.error("La clave no coincide.")
