"""Main entry point for the quizzical CLI."""

from quizzical.cli.app import app


def main():
    """Run the CLI application."""
    app()


if __name__ == "__main__":
    main()
