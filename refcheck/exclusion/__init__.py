"""Exclusion rules: templates and the compiled path filter."""

from refcheck.exclusion.filter import ExclusionFilter, build_exclusion_filter
from refcheck.exclusion.templates import (
    DEFAULT_TEMPLATES,
    default_template_names,
    merge_templates,
    platform_template_name,
)

__all__ = [
    "DEFAULT_TEMPLATES",
    "ExclusionFilter",
    "build_exclusion_filter",
    "default_template_names",
    "merge_templates",
    "platform_template_name",
]
