"""Async pull requests resource client."""

from typing import TYPE_CHECKING

from bbserver import paths
from bbserver.async_clients.branches import AsyncBranchesClient
from bbserver.envelope import decode
from bbserver.logging import get_logger
from bbserver.pagination import acollect_changed_paths
from bbserver.types.changes import PagedChangeSet
from bbserver.types.pulls import MergeabilityReport, PullRequestSnapshot

if TYPE_CHECKING:
    from bbserver.async_transport import AsyncHTTPTransport

logger = get_logger("pulls")


class AsyncPullsClient:
    """Async client for pull request operations."""

    def __init__(
        self, transport: "AsyncHTTPTransport", branches: AsyncBranchesClient | None = None
    ) -> None:
        """
        Initialize the async pulls client.

        Args:
            transport: Async HTTP transport for making requests
            branches: Client used to delete source branches after merging
        """
        self.transport = transport
        self.branches = branches if branches is not None else AsyncBranchesClient(transport)

    async def get(self, project_key: str, repo_slug: str, pull_num: int) -> PullRequestSnapshot:
        raw = await self.transport.request(
            method="GET",
            path=paths.pull_request(project_key, repo_slug, pull_num),
        )
        return decode(raw, PullRequestSnapshot)

    async def changes_page(
        self, project_key: str, repo_slug: str, pull_num: int, start: int = 0
    ) -> PagedChangeSet:
        raw = await self.transport.request(
            method="GET",
            path=paths.pull_request_changes(project_key, repo_slug, pull_num),
            params={"start": start},
        )
        return decode(raw, PagedChangeSet)

    async def modified_files(self, project_key: str, repo_slug: str, pull_num: int) -> list[str]:
        """List the distinct paths a pull request touches, across all pages."""

        async def fetch(start: int) -> PagedChangeSet:
            return await self.changes_page(project_key, repo_slug, pull_num, start)

        return await acollect_changed_paths(fetch)

    async def merge_status(
        self, project_key: str, repo_slug: str, pull_num: int
    ) -> MergeabilityReport:
        raw = await self.transport.request(
            method="GET",
            path=paths.pull_request_merge(project_key, repo_slug, pull_num),
        )
        return decode(raw, MergeabilityReport)

    async def merge(
        self,
        project_key: str,
        repo_slug: str,
        pull_num: int,
        head_branch: str,
        delete_source_branch: bool = False,
    ) -> None:
        """
        Merge a pull request at the version read just before.

        See :meth:`bbserver.clients.pulls.PullsClient.merge`.
        """
        snapshot = await self.get(project_key, repo_slug, pull_num)

        logger.info("merging pull request %d at version %d", pull_num, snapshot.version)
        await self.transport.request(
            method="POST",
            path=paths.pull_request_merge(project_key, repo_slug, pull_num),
            params={"version": snapshot.version},
        )

        if delete_source_branch:
            logger.info("deleting source branch %s", head_branch)
            await self.branches.delete(project_key, repo_slug, head_branch)
