"""Dialog presentation for the console: notices are printed, prompts asked y/N."""

from __future__ import annotations

import asyncio

from bucketlist.models.dialog import Confirmable, DialogRequest, Informational
from bucketlist.services.dialog import DialogSlot


class ConsoleDialog(DialogSlot):
    def open(self, request: DialogRequest) -> None:
        super().open(request)
        if isinstance(request, Informational):
            print(f"  \033[33m!\033[0m {request.content}")

    async def resolve(self) -> None:
        """Answer whatever is open: acknowledge notices, ask about prompts."""
        request = self.current
        if isinstance(request, Informational):
            self.close()
        elif isinstance(request, Confirmable):
            answer = await asyncio.to_thread(
                input, f"  {request.content} [{request.confirm_text.lower()}=y / {request.cancel_text.lower()}=N] "
            )
            if answer.strip().lower() in ("y", "yes"):
                await self.confirm()
            else:
                self.cancel()
