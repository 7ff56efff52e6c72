"""CLI entry point for VTranslate."""

from cli.commands.main import cli

if __name__ == "__main__":
    cli()
