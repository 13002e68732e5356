"""Allows `python -m autoproxy`."""

from autoproxy.cli.main import run

if __name__ == "__main__":
    run()
