"""Backend for the character customizer desktop application."""
