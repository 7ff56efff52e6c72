"""Core models, errors, session and panel state."""
