"""Branches resource client."""

from typing import TYPE_CHECKING

from bbserver import paths

if TYPE_CHECKING:
    from bbserver.transport import HTTPTransport


def delete_branch_body(branch: str) -> dict[str, str | bool]:
    return {"name": f"refs/heads/{branch}", "dryRun": False}


class BranchesClient:
    """Client for branch operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    def delete(self, project_key: str, repo_slug: str, branch: str) -> None:
        """
        Delete a branch.

        Args:
            project_key: Project key
            repo_slug: Repository slug
            branch: Short branch name, without ``refs/heads/``

        Raises:
            HTTPStatusError: If the server refuses the deletion
        """
        self.transport.request(
            method="DELETE",
            path=paths.branches(project_key, repo_slug),
            body=delete_branch_body(branch),
        )
