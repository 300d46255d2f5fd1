"""Pull requests resource client."""

from typing import TYPE_CHECKING

from bbserver import paths
from bbserver.clients.branches import BranchesClient
from bbserver.envelope import decode
from bbserver.logging import get_logger
from bbserver.pagination import collect_changed_paths
from bbserver.types.changes import PagedChangeSet
from bbserver.types.pulls import MergeabilityReport, PullRequestSnapshot

if TYPE_CHECKING:
    from bbserver.transport import HTTPTransport

logger = get_logger("pulls")


class PullsClient:
    """Client for pull request operations."""

    def __init__(self, transport: "HTTPTransport", branches: BranchesClient | None = None) -> None:
        """
        Initialize the pulls client.

        Args:
            transport: HTTP transport for making requests
            branches: Client used to delete source branches after merging
        """
        self.transport = transport
        self.branches = branches if branches is not None else BranchesClient(transport)

    def get(self, project_key: str, repo_slug: str, pull_num: int) -> PullRequestSnapshot:
        """
        Get the current state of a pull request.

        Raises:
            NotFoundError: If the pull request does not exist
            SchemaError: If the response lacks the version or reviewers
        """
        raw = self.transport.request(
            method="GET",
            path=paths.pull_request(project_key, repo_slug, pull_num),
        )
        return decode(raw, PullRequestSnapshot)

    def changes_page(
        self, project_key: str, repo_slug: str, pull_num: int, start: int = 0
    ) -> PagedChangeSet:
        """Fetch one page of a pull request's changes starting at ``start``."""
        raw = self.transport.request(
            method="GET",
            path=paths.pull_request_changes(project_key, repo_slug, pull_num),
            params={"start": start},
        )
        return decode(raw, PagedChangeSet)

    def modified_files(self, project_key: str, repo_slug: str, pull_num: int) -> list[str]:
        """
        List the distinct paths a pull request touches, across all pages.

        Renamed files contribute both their new and previous path.
        """
        return collect_changed_paths(
            lambda start: self.changes_page(project_key, repo_slug, pull_num, start)
        )

    def merge_status(self, project_key: str, repo_slug: str, pull_num: int) -> MergeabilityReport:
        """Ask the server whether a pull request can be merged."""
        raw = self.transport.request(
            method="GET",
            path=paths.pull_request_merge(project_key, repo_slug, pull_num),
        )
        return decode(raw, MergeabilityReport)

    def merge(
        self,
        project_key: str,
        repo_slug: str,
        pull_num: int,
        head_branch: str,
        delete_source_branch: bool = False,
    ) -> None:
        """
        Merge a pull request.

        Reads the pull request to learn its current version, then merges at
        that version. The server rejects the merge if the pull request changed
        in between. When ``delete_source_branch`` is set the head branch is
        deleted afterwards; a failed deletion is raised even though the merge
        already happened.

        Raises:
            ConflictError: If the version went stale before the merge
            HTTPStatusError: If any step is refused
            SchemaError: If the pull request response has no version
        """
        snapshot = self.get(project_key, repo_slug, pull_num)

        logger.info("merging pull request %d at version %d", pull_num, snapshot.version)
        self.transport.request(
            method="POST",
            path=paths.pull_request_merge(project_key, repo_slug, pull_num),
            params={"version": snapshot.version},
        )

        if delete_source_branch:
            logger.info("deleting source branch %s", head_branch)
            self.branches.delete(project_key, repo_slug, head_branch)
