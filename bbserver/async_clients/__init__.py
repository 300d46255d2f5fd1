"""bbserver async resource clients."""

from bbserver.async_clients.branches import AsyncBranchesClient
from bbserver.async_clients.build_status import AsyncBuildStatusClient
from bbserver.async_clients.comments import AsyncCommentsClient
from bbserver.async_clients.pulls import AsyncPullsClient

__all__ = [
    "AsyncPullsClient",
    "AsyncCommentsClient",
    "AsyncBuildStatusClient",
    "AsyncBranchesClient",
]
