"""Allow ``python -m launchi3``."""

from launchi3.cli import cli

if __name__ == "__main__":
    cli()
