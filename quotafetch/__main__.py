"""Main entry point when executing quotafetch as a package.

This allows running the package using python -m quotafetch.
"""

from quotafetch.main import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()
