"""Allow ``python -m booktracker``."""

from booktracker.cli import run

if __name__ == "__main__":
    run()
