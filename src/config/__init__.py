"""Configuration constants, settings models and payload schemas."""
