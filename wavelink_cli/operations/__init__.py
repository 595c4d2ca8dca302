"""Async operations behind each CLI command, one module per entity group."""
