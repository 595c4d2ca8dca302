"""Command-line interface for the Wave Link CLI."""
