"""
Core utilities shared across the customizer backend.

This package hosts configuration helpers (env vars, paths) and the logging
setup used by the app factory and the CLI scripts.
"""
