"""Mapping of orchestrator build statuses onto Bitbucket build states."""

from bbserver.logging import get_logger
from bbserver.types.build_status import BuildStatusUpdate
from bbserver.types.models import CommitStatus

logger = get_logger()

INPROGRESS = "INPROGRESS"
SUCCESSFUL = "SUCCESSFUL"
FAILED = "FAILED"

_STATES = {
    CommitStatus.PENDING: INPROGRESS,
    CommitStatus.SUCCESS: SUCCESSFUL,
    CommitStatus.FAILED: FAILED,
}


def to_bitbucket_state(status: CommitStatus | str) -> str:
    """
    Translate a commit status into Bitbucket's vocabulary.

    Unknown values map to FAILED.
    """
    try:
        return _STATES[CommitStatus(status)]
    except ValueError:
        return FAILED


def build_status_update(
    status: CommitStatus | str,
    src: str,
    description: str,
    url: str,
    default_url: str,
) -> BuildStatusUpdate:
    """
    Assemble a build status update for ``src``.

    Bitbucket requires a URL on every status, so an empty ``url`` falls back
    to ``default_url``.
    """
    state = to_bitbucket_state(status)
    logger.info("Updating Bitbucket commit status for '%s' to '%s'", src, state)
    return BuildStatusUpdate(
        key=src,
        url=url or default_url,
        state=state,
        description=description,
    )
