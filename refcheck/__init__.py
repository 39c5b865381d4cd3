"""refcheck - integrity checks for content-addressed file stores."""

from refcheck.config import RefcheckConfig, load_config
from refcheck.errors import ConfigurationError, FileIOError, RefcheckError, RootWalkError
from refcheck.exclusion import DEFAULT_TEMPLATES, ExclusionFilter, build_exclusion_filter
from refcheck.validator import (
    FileOutcome,
    FileStatus,
    Report,
    check_folders,
    process_all,
    process_folder,
    verify_file,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "DEFAULT_TEMPLATES",
    "ExclusionFilter",
    "FileIOError",
    "FileOutcome",
    "FileStatus",
    "RefcheckConfig",
    "RefcheckError",
    "Report",
    "RootWalkError",
    "build_exclusion_filter",
    "check_folders",
    "load_config",
    "process_all",
    "process_folder",
    "verify_file",
]
