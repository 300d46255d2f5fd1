"""Async branches resource client."""

from typing import TYPE_CHECKING

from bbserver import paths
from bbserver.clients.branches import delete_branch_body

if TYPE_CHECKING:
    from bbserver.async_transport import AsyncHTTPTransport


class AsyncBranchesClient:
    """Async client for branch operations."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        self.transport = transport

    async def delete(self, project_key: str, repo_slug: str, branch: str) -> None:
        """Delete a branch given its short name."""
        await self.transport.request(
            method="DELETE",
            path=paths.branches(project_key, repo_slug),
            body=delete_branch_body(branch),
        )
