"""Allow running as ``python -m qodana_runner``."""

from .cli.main import cli

if __name__ == '__main__':
    cli()
