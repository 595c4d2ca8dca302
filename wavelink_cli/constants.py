"""Application constants for the Wave Link CLI."""

from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME = "wavelink-cli"
APP_NAME = "Wave Link CLI"

try:
    VERSION = version(DISTRIBUTION_NAME)
except PackageNotFoundError:
    VERSION = "0.0.0"
