"""
Utility modules for the Streamlit frontend.

This package contains:
- state: Session state helpers (coordinator construction, layout setting)
"""
