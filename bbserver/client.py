"""
bbserver main client.

Implements the pull request automation VCS interface on top of the Bitbucket
Server REST API.
"""

import os
from typing import Any

import httpx

from bbserver.clients import BranchesClient, BuildStatusClient, CommentsClient, PullsClient
from bbserver.exceptions import ConfigurationError, UnsupportedOperationError
from bbserver.project import get_project_key
from bbserver.status import build_status_update
from bbserver.transport import HTTPTransport
from bbserver.types.models import (
    ApprovalStatus,
    CommitStatus,
    PullRequest,
    PullRequestOptions,
    Repo,
    User,
)


def read_env_config() -> dict[str, str]:
    """
    Read client settings from the environment.

    Environment variables:
        BITBUCKET_SERVER_URL: Server URL, e.g. https://corp.com:7990 (required)
        BITBUCKET_SERVER_TOKEN: Personal access token (required)
        BITBUCKET_SERVER_STATUS_URL: Link attached to build statuses (optional)

    Raises:
        ConfigurationError: If a required variable is missing
    """
    base_url = os.environ.get("BITBUCKET_SERVER_URL")
    token = os.environ.get("BITBUCKET_SERVER_TOKEN")

    if not base_url:
        raise ConfigurationError("BITBUCKET_SERVER_URL environment variable not set")

    if not token:
        raise ConfigurationError("BITBUCKET_SERVER_TOKEN environment variable not set")

    return {
        "base_url": base_url,
        "token": token,
        "status_url": os.environ.get("BITBUCKET_SERVER_STATUS_URL", ""),
    }


class BitbucketServerClient:
    """
    Client for a self-hosted Bitbucket Server.

    Aggregates the resource clients and exposes the operations a pull request
    automation server needs.

    Example:
        ```python
        from bbserver import BitbucketServerClient
        from bbserver.types import PullRequest, Repo

        with BitbucketServerClient(
            base_url="https://bitbucket.corp:7990",
            token="personal-access-token",
            status_url="https://atlantis.corp",
        ) as client:
            repo = Repo(
                name="infra",
                sanitized_clone_url="https://bitbucket.corp:7990/scm/ops/infra.git",
            )
            pull = PullRequest(num=7, head_commit="abc123", head_branch="feature", base_repo=repo)
            files = client.get_modified_files(repo, pull)
        ```
    """

    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        base_url: str,
        token: str,
        status_url: str = "",
        http_client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """
        Initialize the Bitbucket Server client.

        Args:
            base_url: Server URL without API version, e.g. https://corp.com:7990
            token: Personal access token, sent as a bearer token
            status_url: Link attached to build statuses when none is given
            http_client: Preconfigured httpx client (optional)
            timeout: Request timeout in seconds for the default httpx client

        Raises:
            ConfigurationError: If base_url has no http/https scheme
        """
        self._transport = HTTPTransport(
            base_url=base_url,
            token=token,
            timeout=timeout,
            http_client=http_client,
        )
        self.base_url = self._transport.base_url
        self.status_url = status_url

        self.branches = BranchesClient(self._transport)
        self.pulls = PullsClient(self._transport, self.branches)
        self.comments = CommentsClient(self._transport)
        self.build_status = BuildStatusClient(self._transport)

    @classmethod
    def from_env(
        cls,
        http_client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> "BitbucketServerClient":
        """
        Create a client from environment variables.

        See :func:`read_env_config` for the variables read.

        Raises:
            ConfigurationError: If required environment variables are missing
        """
        return cls(**read_env_config(), http_client=http_client, timeout=timeout)

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "BitbucketServerClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def get_modified_files(self, repo: Repo, pull: PullRequest) -> list[str]:
        """
        Return the paths modified in the pull request, relative to the repo root.

        Renamed files are listed under both names. Paths are unique.
        """
        project_key = get_project_key(repo.name, repo.sanitized_clone_url)
        return self.pulls.modified_files(project_key, repo.name, pull.num)

    def create_comment(self, repo: Repo, pull_num: int, comment: str, command: str = "") -> None:
        """Comment on the pull request, using several comments if it is too long."""
        project_key = get_project_key(repo.name, repo.sanitized_clone_url)
        self.comments.create(project_key, repo.name, pull_num, comment)

    def react_to_comment(self, repo: Repo, pull_num: int, comment_id: int, reaction: str) -> None:
        """Reactions are not supported by Bitbucket Server; does nothing."""
        return None

    def hide_prev_command_comments(
        self, repo: Repo, pull_num: int, command: str, dir: str = ""
    ) -> None:
        """Hiding comments is not supported by Bitbucket Server; does nothing."""
        return None

    def pull_is_approved(self, repo: Repo, pull: PullRequest) -> ApprovalStatus:
        """A pull request is approved when at least one reviewer approved it."""
        project_key = get_project_key(repo.name, repo.sanitized_clone_url)
        snapshot = self.pulls.get(project_key, repo.name, pull.num)
        return ApprovalStatus(is_approved=snapshot.is_approved)

    def discard_reviews(self, repo: Repo, pull: PullRequest) -> None:
        raise UnsupportedOperationError("discard_reviews")

    def pull_is_mergeable(self, repo: Repo, pull: PullRequest) -> bool:
        """True if the pull request has no conflicts and the server allows the merge."""
        project_key = get_project_key(repo.name, repo.sanitized_clone_url)
        return self.pulls.merge_status(project_key, repo.name, pull.num).mergeable

    def update_status(
        self,
        repo: Repo,
        pull: PullRequest,
        status: CommitStatus | str,
        src: str,
        description: str,
        url: str = "",
    ) -> None:
        """Set the build status ``src`` on the pull request's head commit."""
        update = build_status_update(status, src, description, url, self.status_url)
        self.build_status.update(pull.head_commit, update)

    def merge_pull(self, pull: PullRequest, options: PullRequestOptions | None = None) -> None:
        """
        Merge the pull request, then delete its source branch if asked to.

        If the branch deletion fails the pull request stays merged and the
        error is raised.
        """
        options = options or PullRequestOptions()
        repo = pull.base_repo
        project_key = get_project_key(repo.name, repo.sanitized_clone_url)
        self.pulls.merge(
            project_key,
            repo.name,
            pull.num,
            pull.head_branch,
            delete_source_branch=options.delete_source_branch_on_merge,
        )

    def markdown_pull_link(self, pull: PullRequest) -> str:
        """Markdown reference to a pull request inside a comment."""
        return f"#{pull.num}"

    def get_team_names_for_user(self, repo: Repo, user: User) -> list[str]:
        return []

    def supports_single_file_download(self, repo: Repo) -> bool:
        return False

    def get_file_content(self, pull: PullRequest, file_name: str) -> tuple[bool, bytes]:
        raise UnsupportedOperationError("get_file_content")

    def get_clone_url(self, vcs_host_type: str, repo_full_name: str) -> str:
        raise UnsupportedOperationError("get_clone_url")

    def get_pull_labels(self, repo: Repo, pull: PullRequest) -> list[str]:
        raise UnsupportedOperationError("get_pull_labels")
