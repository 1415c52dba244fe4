"""
Main Entry Point for Inventory Search

Runs the command line interface when the package is executed as a module.

Example Usage:
    $ python -m inventory_search search catalog.yaml "hammers under $40"
    $ python -m inventory_search suggest catalog.yaml ham
"""

import sys
from typing import Optional, Sequence

import click

from .cli import cli


def main(args: Optional[Sequence[str]] = None) -> int:
    """Main entry point.

    Args:
        args: Command line arguments.
            Defaults to sys.argv[1:].

    Returns:
        Exit code.
    """
    try:
        cli(args=args, standalone_mode=False)
        return 0

    except click.exceptions.Abort:
        return 1

    except click.ClickException as e:
        e.show()
        return e.exit_code

    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1


if __name__ == "__main__":
    sys.exit(main())
