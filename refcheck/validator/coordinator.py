"""Sequential validation of several folder roots."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from typing import TYPE_CHECKING

from refcheck.exclusion import (
    DEFAULT_TEMPLATES,
    ExclusionFilter,
    build_exclusion_filter,
    merge_templates,
)
from refcheck.validator.engine import DEFAULT_WORKERS, check_workers, process_folder
from refcheck.validator.models import Report

if TYPE_CHECKING:
    from refcheck.config.models import RefcheckConfig

logger = logging.getLogger(__name__)


def process_all(
    folder_paths: Iterable[str | os.PathLike[str]],
    exclusion: ExclusionFilter | None = None,
    workers: int = DEFAULT_WORKERS,
) -> list[Report]:
    """Validate each root in order, one at a time.

    Fails fast: the first RootWalkError propagates and no reports are
    returned, not even for roots that already succeeded.
    """
    check_workers(workers)
    folders = list(folder_paths)
    reports: list[Report] = []
    for idx, folder in enumerate(folders, 1):
        logger.debug("Root %d/%d: %s", idx, len(folders), folder)
        reports.append(process_folder(folder, exclusion, workers))
    return reports


def exclusion_from_config(config: RefcheckConfig) -> ExclusionFilter:
    """Compile the exclusion filter described by *config*."""
    templates = merge_templates(DEFAULT_TEMPLATES, config.custom_templates)
    return build_exclusion_filter(config.exclude, config.templates, templates)


def check_folders(
    folder_paths: Iterable[str | os.PathLike[str]],
    config: RefcheckConfig,
) -> list[Report]:
    """Validate *folder_paths* using the workers and exclusions from *config*."""
    exclusion = exclusion_from_config(config)
    if exclusion:
        logger.debug("Exclusion pattern: %s", exclusion.pattern)
    return process_all(folder_paths, exclusion, config.workers)
