"""Simple Notes: local notes store, editor state and persistence."""
