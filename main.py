#!/usr/bin/env python3
"""Entry point of the ``update-reporter`` command."""

import sys

from dotenv import load_dotenv
from rich.console import Console

# Service variables such as SLACK_URL may live in a .env file
load_dotenv()
console = Console(stderr=True)


def main():
    try:
        from update_reporter.presentation.cli.commands import app

        app()
    except KeyboardInterrupt:
        console.print("\nReport aborted.", style="yellow")
        sys.exit(0)
    except Exception as e:
        console.print(f"An error occurred: {e}", style="bold red")
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover
    main()
