"""Upload outcome and batch result data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, TypedDict, Union


@dataclass(frozen=True)
class UploadSuccess:
    """A file that was uploaded and is reachable at ``url``."""

    filename: str
    url: str
    delete_url: str
    display_url: str = ""
    success: Literal[True] = field(default=True, init=False)


@dataclass(frozen=True)
class UploadFailure:
    """A file whose upload failed, with the reason reported to the user."""

    filename: str
    error_message: str
    success: Literal[False] = field(default=False, init=False)


UploadOutcome = Union[UploadSuccess, UploadFailure]


class ReportEntry(TypedDict):
    """One persisted record of a successful upload."""

    filename: str
    url: str
    deleteUrl: str


BatchReport = list[ReportEntry]


@dataclass
class BatchResult:
    """Ordered outcomes of one batch run, one per processed file."""

    outcomes: list[UploadOutcome] = field(default_factory=list)
    cancelled: bool = False

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def successes(self) -> list[UploadSuccess]:
        return [o for o in self.outcomes if isinstance(o, UploadSuccess)]

    @property
    def failures(self) -> list[UploadFailure]:
        return [o for o in self.outcomes if isinstance(o, UploadFailure)]

    @property
    def succeeded(self) -> int:
        return len(self.successes)

    @property
    def failed(self) -> int:
        return len(self.failures)
