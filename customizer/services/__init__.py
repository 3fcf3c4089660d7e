"""
High-level use cases for the customizer backend.

Routers and scripts call these services instead of touching the character
files or the explorer process directly.
"""
