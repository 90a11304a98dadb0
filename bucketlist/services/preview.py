"""
Local image preview for one bucket.

Holds what the bucket should show right now: a data URL of a file the user
just picked, the stored image URL, or nothing. It never waits on the
network.
"""

from __future__ import annotations

import asyncio
import base64
from collections.abc import Callable

from bucketlist.models.image import ImageFile

PreviewListener = Callable[[str | None], None]


def to_data_url(file: ImageFile) -> str:
    encoded = base64.b64encode(file.data).decode("ascii")
    return f"data:{file.content_type};base64,{encoded}"


class LocalPreview:
    """Current preview reference plus change listeners."""

    def __init__(self) -> None:
        self.value: str | None = None
        self._listeners: list[PreviewListener] = []
        # Bumped on every change so a slow decode cannot overwrite newer state.
        self._generation = 0

    def subscribe(self, listener: PreviewListener) -> None:
        self._listeners.append(listener)

    async def set_from_file(self, file: ImageFile) -> str | None:
        """Decode the file off the event loop and publish it."""
        self._generation += 1
        generation = self._generation
        data_url = await asyncio.to_thread(to_data_url, file)
        if generation != self._generation:
            return self.value
        self._publish(data_url)
        return data_url

    def set_from_url(self, url: str | None) -> None:
        self._generation += 1
        self._publish(url)

    def clear(self) -> None:
        self._generation += 1
        self._publish(None)

    def _publish(self, value: str | None) -> None:
        self.value = value
        for listener in list(self._listeners):
            listener(value)
