"""Dashboard package namespace.

Streamlit page and presentation widgets for the student registration
dashboard. Widgets expose small ``render_*`` functions; the pieces that can be
checked without a running Streamlit server (figures, HTML snippets, dropdown
choices) are plain functions returning values.
"""
