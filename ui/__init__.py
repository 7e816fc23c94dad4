"""Streamlit front-end for Simple Notes."""
