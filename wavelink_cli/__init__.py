"""Command-line controller for the Elgato Wave Link remote-control interface."""

from wavelink_cli.constants import VERSION

__version__ = VERSION
