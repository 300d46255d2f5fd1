"""Pull request change listing models."""

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, model_validator
from pydantic_core import PydanticCustomError


class PathRef(BaseModel):
    """A file path as Bitbucket reports it; only ``toString`` is read."""

    to_string: StrictStr = Field(alias="toString")


class ChangeEntry(BaseModel):
    """One changed file. ``src_path`` is set only for renames and moves."""

    model_config = ConfigDict(populate_by_name=True)

    path: PathRef
    src_path: PathRef | None = Field(default=None, alias="srcPath")

    def touched_paths(self) -> list[str]:
        """Paths the change touches; a rename touches both locations."""
        if self.src_path is not None:
            return [self.path.to_string, self.src_path.to_string]
        return [self.path.to_string]


class PagedChangeSet(BaseModel):
    """One page of a pull request's changes."""

    model_config = ConfigDict(populate_by_name=True)

    values: list[ChangeEntry]
    is_last_page: StrictBool = Field(alias="isLastPage")
    next_page_start: StrictInt | None = Field(default=None, alias="nextPageStart")

    @model_validator(mode="after")
    def require_next_page_start_unless_last(self) -> "PagedChangeSet":
        if not self.is_last_page and self.next_page_start is None:
            raise PydanticCustomError(
                "missing",
                "nextPageStart is required when isLastPage is false",
                {"field": "nextPageStart"},
            )
        return self
