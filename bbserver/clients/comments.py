"""Pull request comments resource client."""

from typing import TYPE_CHECKING

from bbserver import paths
from bbserver.comments import MAX_COMMENT_LENGTH, SEP_END, SEP_START, split_comment
from bbserver.logging import get_logger

if TYPE_CHECKING:
    from bbserver.transport import HTTPTransport

logger = get_logger("comments")


class CommentsClient:
    """Client for pull request comments."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    def post(self, project_key: str, repo_slug: str, pull_num: int, text: str) -> None:
        """Post a single comment as-is."""
        self.transport.request(
            method="POST",
            path=paths.pull_request_comments(project_key, repo_slug, pull_num),
            body={"text": text},
        )

    def create(self, project_key: str, repo_slug: str, pull_num: int, comment: str) -> int:
        """
        Post a comment, split across several comments when it is too long.

        Chunks are posted in order; the first failure stops the sequence and
        propagates, leaving earlier chunks posted.

        Returns:
            Number of comments posted
        """
        chunks = split_comment(comment, MAX_COMMENT_LENGTH, SEP_END, SEP_START)
        if len(chunks) > 1:
            logger.debug("splitting %d character comment into %d parts", len(comment), len(chunks))
        for chunk in chunks:
            self.post(project_key, repo_slug, pull_num, chunk)
        return len(chunks)
