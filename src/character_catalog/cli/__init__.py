"""
Character Catalog CLI

Command-line interface for browsing and exporting the character database.
"""

from .main import cli

__all__ = ["cli"]


def main() -> None:
    """Main CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
