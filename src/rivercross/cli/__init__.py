"""rivercross CLI - Command line interface for rivercross."""

from rivercross.cli.commands import cli, setup_logging


def main() -> None:
    """Main entry point for the rivercross CLI."""
    cli()


__all__ = ["main", "cli", "setup_logging"]
