from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from theme_purge_tools.errors import PurgeResultError

ThemeSet = tuple[str, ...]


class PurgeStatus(enum.StrEnum):
    PENDING = "pending"
    FINISHED = "finished"
    FAILED = "failed"


class PurgeRequest(BaseModel):
    path: list[str]

    @field_validator("path")
    @classmethod
    def not_empty(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("at least one path is required")
        return value


class PathResult(BaseModel):
    throttled: bool = False
    providers: dict[str, bool] = Field(default_factory=dict)

    @field_validator("throttled", "providers", mode="before")
    @classmethod
    def null_as_default(cls, value, info):
        if value is None:
            return False if info.field_name == "throttled" else {}
        return value

    model_config = ConfigDict(extra="allow")


class PurgeJob(BaseModel):
    id: str
    # Kept verbatim from the API, compare against PurgeStatus values
    status: str
    paths: dict[str, PathResult] | None = None

    model_config = ConfigDict(extra="allow")

    @property
    def is_finished(self) -> bool:
        return self.status == PurgeStatus.FINISHED

    @property
    def is_failed(self) -> bool:
        return self.status == PurgeStatus.FAILED


class PurgeReport(BaseModel):
    throttled_paths: list[str] = Field(default_factory=list)
    failed_paths: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed_paths

    def raise_for_failures(self) -> None:
        """Raise PurgeResultError if any provider failed a path."""
        if self.failed_paths:
            raise PurgeResultError(self.failed_paths)
