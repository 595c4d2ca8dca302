"""Entry point for ``python -m wavelink_cli``."""

from wavelink_cli.cli.app import app


if __name__ == "__main__":
    app()
