"""Built-in exclusion templates.

A template is a named, fixed set of regex fragments bundled for a backup
tool or a platform. Mappings returned here are read-only.
"""

from __future__ import annotations

import platform
from collections.abc import Iterable, Mapping
from types import MappingProxyType

# Fragments match against the full file path, so anchor on a path separator
# to avoid excluding roots whose own path happens to contain the word.
_SEP = r"(^|[\\/])"

DEFAULT_TEMPLATES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    # restic keeps its repository config next to content-addressed packs
    "restic": (_SEP + r"config$",),
    "darwin": (_SEP + r"\.DS_Store$", _SEP + r"\._[^\\/]*$"),
    "windows": (_SEP + r"Thumbs\.db$", _SEP + r"desktop\.ini$"),
    "linux": (),
})


def merge_templates(
    base: Mapping[str, Iterable[str]],
    extra: Mapping[str, Iterable[str]] | None = None,
) -> Mapping[str, tuple[str, ...]]:
    """Return a new read-only mapping of *base* overlaid with *extra*.

    A template in *extra* replaces a built-in template of the same name.
    """
    merged = {name: tuple(fragments) for name, fragments in base.items()}
    if extra:
        merged.update({name: tuple(fragments) for name, fragments in extra.items()})
    return MappingProxyType(merged)


def platform_template_name() -> str:
    """Name of the template for the running OS (darwin, linux, windows, ...)."""
    return platform.system().lower()


def default_template_names() -> list[str]:
    return ["restic", platform_template_name()]
