"""Exception types raised by refcheck."""

from __future__ import annotations


class RefcheckError(Exception):
    """Base class for all refcheck errors."""


class ConfigurationError(RefcheckError, ValueError):
    """Invalid settings detected before any validation work starts."""


class RootWalkError(RefcheckError):
    """A folder root could not be traversed; its report is discarded."""

    def __init__(self, folder_path: str, cause: OSError) -> None:
        self.folder_path = folder_path
        super().__init__(f"cannot walk {folder_path}: {cause}")
        self.__cause__ = cause


class FileIOError(RefcheckError):
    """A single file could not be opened or read during verification."""

    def __init__(self, file_path: str, cause: OSError) -> None:
        self.file_path = file_path
        super().__init__(f"cannot read {file_path}: {cause}")
        self.__cause__ = cause
