"""Command groups for the Wave Link CLI."""
