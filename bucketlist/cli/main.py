"""Main entry point for the bucketlist CLI."""
from __future__ import annotations

import asyncio
import logging
import sys

from bucketlist.board import BucketBoard
from bucketlist.cli import __version__
from bucketlist.cli.console_dialog import ConsoleDialog
from bucketlist.cli.repl import Repl
from bucketlist.client import BucketApi
from bucketlist.config import settings
from bucketlist.models.bucket import BoardContext


def print_help():
    """Print help message."""
    print(f"""
bucketlist CLI v{__version__}

Usage:
  bucketlist [options]

Options:
  --api-url URL     Override API endpoint (default: {settings.API_URL})
  --new ID          Id of the bucket that was just created (starts expanded)
  -h, --help        Show this help
  -v, --version     Show version

Environment:
  BUCKETLIST_API_URL              Override API endpoint (same as --api-url)
  BUCKETLIST_API_TOKEN            Bearer token sent with every request
  BUCKETLIST_DISCARD_STALE_WRITES Skip refreshes from superseded writes
  BUCKETLIST_LOG_LEVEL            Logging level (default WARNING)
""")


def parse_args(args: list[str]) -> dict:
    """
    Parse command line arguments.

    Returns dict with:
        api_url: str | None
        just_created_id: str | None
        show_help: bool
        show_version: bool
    """
    result = {
        "api_url": None,
        "just_created_id": None,
        "show_help": False,
        "show_version": False,
    }

    i = 0
    while i < len(args):
        arg = args[i]

        if arg == "--api-url":
            if i + 1 < len(args):
                result["api_url"] = args[i + 1]
                i += 1
            else:
                print("Error: --api-url requires a URL")
                sys.exit(1)
        elif arg == "--new":
            if i + 1 < len(args):
                result["just_created_id"] = args[i + 1]
                i += 1
            else:
                print("Error: --new requires an ID")
                sys.exit(1)
        elif arg in ("--help", "-h"):
            result["show_help"] = True
        elif arg in ("--version", "-v"):
            result["show_version"] = True
        else:
            print(f"Unknown option: {arg}")
            print("Run 'bucketlist --help' for usage.")
            sys.exit(1)

        i += 1

    return result


async def run(api_url: str | None, just_created_id: str | None) -> None:
    api = BucketApi(api_url)
    dialog = ConsoleDialog()
    board = BucketBoard(api, dialog, BoardContext(just_created_id=just_created_id))
    try:
        await Repl(board, dialog).start()
    finally:
        await board.drain()
        await api.close()


def main():
    """Main entry point."""
    args = parse_args(sys.argv[1:])

    if args["show_help"]:
        print_help()
        return

    if args["show_version"]:
        print(f"bucketlist {__version__}")
        return

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    asyncio.run(run(args["api_url"], args["just_created_id"]))


if __name__ == "__main__":
    main()
