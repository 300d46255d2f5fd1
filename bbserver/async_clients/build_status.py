"""Async build status resource client."""

from typing import TYPE_CHECKING

from bbserver import paths
from bbserver.types.build_status import BuildStatusUpdate

if TYPE_CHECKING:
    from bbserver.async_transport import AsyncHTTPTransport


class AsyncBuildStatusClient:
    """Async client for commit build statuses."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        self.transport = transport

    async def update(self, revision: str, update: BuildStatusUpdate) -> None:
        await self.transport.request(
            method="POST",
            path=paths.build_status(revision),
            body=update.to_dict(),
        )
