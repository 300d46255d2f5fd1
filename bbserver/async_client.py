"""
bbserver async client.

Async counterpart of :class:`bbserver.client.BitbucketServerClient`.
"""

from typing import Any

import httpx

from bbserver.async_clients import (
    AsyncBranchesClient,
    AsyncBuildStatusClient,
    AsyncCommentsClient,
    AsyncPullsClient,
)
from bbserver.async_transport import AsyncHTTPTransport
from bbserver.client import read_env_config
from bbserver.exceptions import UnsupportedOperationError
from bbserver.project import get_project_key
from bbserver.status import build_status_update
from bbserver.types.models import (
    ApprovalStatus,
    CommitStatus,
    PullRequest,
    PullRequestOptions,
    Repo,
    User,
)


class AsyncBitbucketServerClient:
    """
    Async client for a self-hosted Bitbucket Server.

    Every operation still runs its requests one after another.

    Example:
        ```python
        import asyncio
        from bbserver import AsyncBitbucketServerClient

        async def main():
            async with AsyncBitbucketServerClient.from_env() as client:
                mergeable = await client.pull_is_mergeable(repo, pull)

        asyncio.run(main())
        ```
    """

    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        base_url: str,
        token: str,
        status_url: str = "",
        http_client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """
        Initialize the async Bitbucket Server client.

        Args:
            base_url: Server URL without API version, e.g. https://corp.com:7990
            token: Personal access token, sent as a bearer token
            status_url: Link attached to build statuses when none is given
            http_client: Preconfigured httpx async client (optional)
            timeout: Request timeout in seconds for the default httpx client

        Raises:
            ConfigurationError: If base_url has no http/https scheme
        """
        self._transport = AsyncHTTPTransport(
            base_url=base_url,
            token=token,
            timeout=timeout,
            http_client=http_client,
        )
        self.base_url = self._transport.base_url
        self.status_url = status_url

        self.branches = AsyncBranchesClient(self._transport)
        self.pulls = AsyncPullsClient(self._transport, self.branches)
        self.comments = AsyncCommentsClient(self._transport)
        self.build_status = AsyncBuildStatusClient(self._transport)

    @classmethod
    def from_env(
        cls,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> "AsyncBitbucketServerClient":
        """
        Create a client from environment variables.

        Raises:
            ConfigurationError: If required environment variables are missing
        """
        return cls(**read_env_config(), http_client=http_client, timeout=timeout)

    @property
    def transport(self) -> AsyncHTTPTransport:
        return self._transport

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> "AsyncBitbucketServerClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def get_modified_files(self, repo: Repo, pull: PullRequest) -> list[str]:
        project_key = get_project_key(repo.name, repo.sanitized_clone_url)
        return await self.pulls.modified_files(project_key, repo.name, pull.num)

    async def create_comment(
        self, repo: Repo, pull_num: int, comment: str, command: str = ""
    ) -> None:
        project_key = get_project_key(repo.name, repo.sanitized_clone_url)
        await self.comments.create(project_key, repo.name, pull_num, comment)

    async def react_to_comment(
        self, repo: Repo, pull_num: int, comment_id: int, reaction: str
    ) -> None:
        return None

    async def hide_prev_command_comments(
        self, repo: Repo, pull_num: int, command: str, dir: str = ""
    ) -> None:
        return None

    async def pull_is_approved(self, repo: Repo, pull: PullRequest) -> ApprovalStatus:
        project_key = get_project_key(repo.name, repo.sanitized_clone_url)
        snapshot = await self.pulls.get(project_key, repo.name, pull.num)
        return ApprovalStatus(is_approved=snapshot.is_approved)

    async def discard_reviews(self, repo: Repo, pull: PullRequest) -> None:
        raise UnsupportedOperationError("discard_reviews")

    async def pull_is_mergeable(self, repo: Repo, pull: PullRequest) -> bool:
        project_key = get_project_key(repo.name, repo.sanitized_clone_url)
        report = await self.pulls.merge_status(project_key, repo.name, pull.num)
        return report.mergeable

    async def update_status(
        self,
        repo: Repo,
        pull: PullRequest,
        status: CommitStatus | str,
        src: str,
        description: str,
        url: str = "",
    ) -> None:
        update = build_status_update(status, src, description, url, self.status_url)
        await self.build_status.update(pull.head_commit, update)

    async def merge_pull(
        self, pull: PullRequest, options: PullRequestOptions | None = None
    ) -> None:
        options = options or PullRequestOptions()
        repo = pull.base_repo
        project_key = get_project_key(repo.name, repo.sanitized_clone_url)
        await self.pulls.merge(
            project_key,
            repo.name,
            pull.num,
            pull.head_branch,
            delete_source_branch=options.delete_source_branch_on_merge,
        )

    def markdown_pull_link(self, pull: PullRequest) -> str:
        return f"#{pull.num}"

    async def get_team_names_for_user(self, repo: Repo, user: User) -> list[str]:
        return []

    def supports_single_file_download(self, repo: Repo) -> bool:
        return False

    async def get_file_content(self, pull: PullRequest, file_name: str) -> tuple[bool, bytes]:
        raise UnsupportedOperationError("get_file_content")

    async def get_clone_url(self, vcs_host_type: str, repo_full_name: str) -> str:
        raise UnsupportedOperationError("get_clone_url")

    async def get_pull_labels(self, repo: Repo, pull: PullRequest) -> list[str]:
        raise UnsupportedOperationError("get_pull_labels")
