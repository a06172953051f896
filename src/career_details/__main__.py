"""Entry point for ``python -m career_details``: runs the CLI."""

from career_details.cli import main

if __name__ == "__main__":
    main()
