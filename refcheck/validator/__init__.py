"""Concurrent digest validation of content-addressed folders."""

from refcheck.validator.coordinator import check_folders, exclusion_from_config, process_all
from refcheck.validator.digest import compute_file_digest, is_valid_digest_name, verify_file
from refcheck.validator.engine import iter_files, process_folder
from refcheck.validator.models import (
    CorruptedFile,
    ErroredFile,
    FileOutcome,
    FileStatus,
    Report,
    ReportBuilder,
)

__all__ = [
    "CorruptedFile",
    "ErroredFile",
    "FileOutcome",
    "FileStatus",
    "Report",
    "ReportBuilder",
    "check_folders",
    "compute_file_digest",
    "exclusion_from_config",
    "is_valid_digest_name",
    "iter_files",
    "process_all",
    "process_folder",
    "verify_file",
]
