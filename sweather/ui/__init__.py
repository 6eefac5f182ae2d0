"""Streamlit user interface for Sweather."""
