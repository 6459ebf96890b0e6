from typing import Awaitable, Callable

import anyio
from fastapi.responses import FileResponse
from starlette.types import Receive, Scope, Send


class TemporaryFileResponse(FileResponse):
    """FileResponse that releases its file once sending is over, however it ends."""
    def __init__(self, path: str, release: Callable[[str], Awaitable[None]], **kwargs):
        super().__init__(path, **kwargs)
        self._release = release

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        try:
            await super().__call__(scope, receive, send)
        finally:
            # shielded so a client disconnect cannot cancel the release
            with anyio.CancelScope(shield=True):
                await self._release(str(self.path))
