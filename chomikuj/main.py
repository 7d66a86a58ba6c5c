"""
Chomikuj client - command line entry point.

Commands:
    folders   - List folders of an account
    search    - Search public files
    mkdir     - Create a folder
    rmdir     - Remove a folder
    upload    - Upload a file into a folder
    move      - Move a file to another folder
    copy      - Copy a file to another folder
    rename    - Rename a file
"""

import argparse
import logging
import sys
from typing import List, Optional

import httpx
from dotenv import load_dotenv

from chomikuj.cli import COMMANDS
from chomikuj.core.exceptions import (
    AuthenticationError,
    ChomikujError,
    RequestFailedError,
    TokenNotFoundError,
    UploadError,
)
from chomikuj.utils.config import ConfigLoader
from chomikuj.utils.logging_config import setup_logging

logger: logging.Logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with every sub-command registered."""
    parser = argparse.ArgumentParser(
        description="chomikuj.pl command line client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  chomikuj folders alice                     # List alice's root folders
  chomikuj search "holiday photos" --page 2  # Search public files
  chomikuj mkdir Music -u alice              # Create a folder
  chomikuj upload 1234 ./song.mp3 -u alice   # Upload a file
        """
    )

    parser.add_argument(
        "-c", "--config",
        default="config.yaml",
        help="Path to configuration file"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")
    for command_class in COMMANDS.values():
        command_class.register(subparsers)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args: argparse.Namespace = parser.parse_args(argv)

    # Setup logging
    log_level: int = logging.DEBUG if args.verbose else logging.INFO
    setup_logging(level=log_level)

    load_dotenv()

    command_class = COMMANDS.get(args.command)
    if command_class is None:
        parser.print_help()
        return 1

    # Handle command
    try:
        config = ConfigLoader(args.config)
        return command_class(config).execute(args)

    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        return 1
    except AuthenticationError as e:
        print(f"\nNot logged in: {e}")
        return 1
    except TokenNotFoundError as e:
        print(f"\nSecurity token missing: {e}")
        return 1
    except RequestFailedError as e:
        print(f"\nThe site rejected the request: {e}")
        return 1
    except UploadError as e:
        print(f"\nCannot upload: {e}")
        return 1
    except ChomikujError as e:
        print(f"\nError: {e}")
        return 1
    except httpx.HTTPError as e:
        print(f"\nNetwork error: {e}")
        return 1
    except Exception as e:
        logger.exception("An error occurred")
        print(f"\nError: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
