"""Presentation widgets for the registration dashboard."""
