"""
Main Entry Point for wp-env

Example Usage:
    $ python -m wp_env info
    $ python -m wp_env get WP_ENV
"""

import sys
from typing import Optional, Sequence

from .cli import cli


def main(args: Optional[Sequence[str]] = None) -> None:
    """Main entry point.

    Args:
        args: Command line arguments.
            Defaults to sys.argv[1:].
    """
    cli(args=args, prog_name="wp-env")


if __name__ == "__main__":
    sys.exit(main())
