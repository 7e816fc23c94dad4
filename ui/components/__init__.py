"""Streamlit page components."""
