"""Async pull request comments resource client."""

from typing import TYPE_CHECKING

from bbserver import paths
from bbserver.comments import MAX_COMMENT_LENGTH, SEP_END, SEP_START, split_comment
from bbserver.logging import get_logger

if TYPE_CHECKING:
    from bbserver.async_transport import AsyncHTTPTransport

logger = get_logger("comments")


class AsyncCommentsClient:
    """Async client for pull request comments."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        self.transport = transport

    async def post(self, project_key: str, repo_slug: str, pull_num: int, text: str) -> None:
        await self.transport.request(
            method="POST",
            path=paths.pull_request_comments(project_key, repo_slug, pull_num),
            body={"text": text},
        )

    async def create(self, project_key: str, repo_slug: str, pull_num: int, comment: str) -> int:
        """
        Post a comment, split across several comments when it is too long.

        Returns:
            Number of comments posted
        """
        chunks = split_comment(comment, MAX_COMMENT_LENGTH, SEP_END, SEP_START)
        if len(chunks) > 1:
            logger.debug("splitting %d character comment into %d parts", len(comment), len(chunks))
        for chunk in chunks:
            await self.post(project_key, repo_slug, pull_num, chunk)
        return len(chunks)
