"""Data models for folder validation results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field


class FileStatus(str, Enum):
    """Classification of a single verified file."""

    intact = "intact"
    corrupted = "corrupted"
    invalid_name = "invalid_name"
    errored = "errored"


@dataclass(frozen=True)
class FileOutcome:
    """Verdict for one file, consumed exactly once into a Report."""

    path: str
    status: FileStatus
    expected_hash: str | None = None
    actual_hash: str | None = None
    error: str | None = None

    @classmethod
    def errored(cls, path: str, error: str) -> FileOutcome:
        return cls(path=path, status=FileStatus.errored, error=error)


class CorruptedFile(BaseModel):
    """A file whose content no longer hashes to its name."""

    file_path: str
    expected_hash: str
    actual_hash: str


class ErroredFile(BaseModel):
    """A file skipped because it could not be read."""

    file_path: str
    error: str


class Report(BaseModel):
    """Validation summary for one folder root.

    ``intact_files + corrupted_files + invalid_files == total_files``.
    Errored files are tracked separately and are not part of the total.
    """

    folder_path: str
    total_files: int = 0
    intact_files: int = 0
    corrupted_files: int = 0
    corrupted_file_list: list[CorruptedFile] = Field(default_factory=list)
    invalid_files: int = 0
    invalid_file_list: list[str] = Field(default_factory=list)
    errored_files: int = 0
    errored_file_list: list[ErroredFile] = Field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        """True when every counted file is intact and nothing errored."""
        return not (self.corrupted_files or self.invalid_files or self.errored_files)


class ReportBuilder:
    """Accumulates FileOutcomes into a Report.

    Not thread-safe: the engine feeds it from a single aggregator thread.
    """

    def __init__(self, folder_path: str) -> None:
        self._report = Report(folder_path=folder_path)

    def add(self, outcome: FileOutcome) -> None:
        r = self._report
        if outcome.status is FileStatus.errored:
            r.errored_files += 1
            r.errored_file_list.append(
                ErroredFile(file_path=outcome.path, error=outcome.error or "")
            )
            return

        r.total_files += 1
        if outcome.status is FileStatus.intact:
            r.intact_files += 1
        elif outcome.status is FileStatus.corrupted:
            r.corrupted_files += 1
            r.corrupted_file_list.append(
                CorruptedFile(
                    file_path=outcome.path,
                    expected_hash=outcome.expected_hash or "",
                    actual_hash=outcome.actual_hash or "",
                )
            )
        else:
            r.invalid_files += 1
            r.invalid_file_list.append(outcome.path)

    def build(self) -> Report:
        return self._report
