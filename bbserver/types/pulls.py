"""Pull request data models."""

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt


class Reviewer(BaseModel):
    """A reviewer entry on a pull request."""

    approved: StrictBool


class PullRequestSnapshot(BaseModel):
    """Point-in-time server state of a pull request."""

    version: StrictInt
    reviewers: list[Reviewer]

    @property
    def is_approved(self) -> bool:
        return any(reviewer.approved for reviewer in self.reviewers)


class MergeabilityReport(BaseModel):
    """Server answer to "can this pull request be merged?"."""

    model_config = ConfigDict(populate_by_name=True)

    can_merge: StrictBool = Field(alias="canMerge")
    conflicted: StrictBool

    @property
    def mergeable(self) -> bool:
        return self.can_merge and not self.conflicted
