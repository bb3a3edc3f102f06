"""Command-line interface for fieldwire."""
