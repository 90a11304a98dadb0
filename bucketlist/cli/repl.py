"""REPL for the bucketlist client."""

from __future__ import annotations

import asyncio

from bucketlist.board import BucketBoard
from bucketlist.cli.console_dialog import ConsoleDialog
from bucketlist.cli.render import render_bucket
from bucketlist.config import settings
from bucketlist.controller import BucketController
from bucketlist.models.image import ImageFile


class Repl:
    """Interactive REPL over one bucket board."""

    def __init__(self, board: BucketBoard, dialog: ConsoleDialog):
        self.board = board
        self.dialog = dialog
        self.current: BucketController | None = None
        self.running = True

    async def start(self):
        """Start the REPL."""
        await self.board.refresh()
        await self._settle()
        self._list_buckets()

        while self.running:
            try:
                line = (await asyncio.to_thread(input, "bucket > ")).strip()
            except (EOFError, KeyboardInterrupt):
                print()
                break

            if not line:
                continue

            if line.startswith("/"):
                await self._handle_command(line)
            else:
                print("  Commands start with '/'. Type /help for available commands.")
            await self._settle()

    async def _settle(self):
        """Let writes finish and answer any dialog they left open."""
        await self.board.drain()
        while self.dialog.is_open:
            await self.dialog.resolve()
            await self.board.drain()
        if self.current is not None and self.current.closed:
            self.current = None

    async def _handle_command(self, line: str):
        """Handle REPL commands."""
        parts = line.split(maxsplit=1)
        cmd = parts[0].lower()
        arg = parts[1] if len(parts) > 1 else None

        if cmd == "/quit":
            self.running = False
            print("Goodbye.")
        elif cmd == "/list":
            await self.board.refresh()
            self._list_buckets()
        elif cmd == "/open":
            if arg:
                self._open_bucket(arg)
            else:
                print("Usage: /open <number>")
        elif cmd == "/help":
            self._show_help()
        elif self.current is None:
            print("  No bucket open. Use /list and /open <n>.")
        elif cmd == "/title":
            self._set_title(arg or "")
        elif cmd == "/blur":
            self.current.commit_title()
        elif cmd == "/image":
            if arg:
                await self._select_image(arg)
            else:
                print("Usage: /image <path>")
        elif cmd == "/rmimage":
            self.current.request_delete_image()
        elif cmd == "/delete":
            self.current.request_delete_item()
        elif cmd == "/toggle":
            state = "expanded" if self.current.toggle() else "collapsed"
            print(f"  Bucket {state}.")
        else:
            print(f"Unknown command: {cmd}")
            print("Type /help for available commands.")

    def _list_buckets(self):
        """List all buckets."""
        buckets = self.board.buckets
        if not buckets:
            print("  No buckets yet.")
            return

        for i, controller in enumerate(buckets, 1):
            marker = "*" if controller is self.current else " "
            print(f"{marker}{render_bucket(i, controller)}")

    def _open_bucket(self, index: str):
        """Make a bucket the target of edit commands."""
        try:
            idx = int(index) - 1
        except ValueError:
            print("  Invalid number.")
            return

        buckets = self.board.buckets
        if 0 <= idx < len(buckets):
            self.current = buckets[idx]
            print(render_bucket(idx + 1, self.current))
        else:
            print("  Invalid index. Use /list to see buckets.")

    def _set_title(self, title: str):
        if not self.current.change_title(title):
            print(f"  Title unchanged: at most {settings.MAX_TITLE_LENGTH} characters.")

    async def _select_image(self, path: str):
        try:
            file = ImageFile.from_path(path.strip())
        except OSError as e:
            print(f"  Could not read {path}: {e}")
            return
        result = await self.current.select_file(file)
        if not result.blocking:
            print(f"  Selected {file.filename}.")

    def _show_help(self):
        """Show help message."""
        print("""
  REPL Commands:
    /list          - Refetch and show all buckets
    /open <n>      - Edit bucket number <n>
    /title <text>  - Change the title (written through immediately)
    /blur          - Commit the title on its own
    /image <path>  - Pick an image for the bucket
    /rmimage       - Delete the bucket's image
    /delete        - Delete the bucket
    /toggle        - Expand or collapse the bucket
    /help          - Show this help
    /quit          - Exit REPL
""")
