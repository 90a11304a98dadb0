"""Plain-text rendering of buckets for the console."""

from __future__ import annotations

from bucketlist.controller import BucketController
from bucketlist.services.progress import is_complete

BAR_WIDTH = 20


def progress_bar(percent: int, width: int = BAR_WIDTH) -> str:
    """A filled bar; a complete bucket gets a solid bar with no gap."""
    if is_complete(percent):
        return "█" * width
    filled = min(width, max(0, percent * width // 100))
    return "█" * filled + "░" * (width - filled)


def render_bucket(index: int, controller: BucketController) -> str:
    arrow = "▲" if controller.is_toggled else "▼"
    title = controller.buffer.title or "\033[90m(untitled)\033[0m"
    percent = controller.progress
    image = " [image]" if controller.preview.value else ""
    return f"  {index}. {arrow} {title}{image}  {progress_bar(percent)} {percent}%"
