"""Gradio GUI."""
