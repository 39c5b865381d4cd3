"""Compiled exclusion filter shared read-only by all workers."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping

from refcheck.errors import ConfigurationError
from refcheck.exclusion.templates import DEFAULT_TEMPLATES

logger = logging.getLogger(__name__)


class ExclusionFilter:
    """An alternation of regex fragments searched anywhere in a path.

    With no fragments the filter holds no pattern and excludes nothing.
    """

    def __init__(self, fragments: Iterable[str] = ()) -> None:
        self.fragments: tuple[str, ...] = tuple(fragments)
        self._pattern: re.Pattern[str] | None = None
        if not self.fragments:
            return

        for fragment in self.fragments:
            try:
                re.compile(fragment)
            except re.error as e:
                raise ConfigurationError(
                    f"invalid exclude pattern {fragment!r}: {e}"
                ) from e
        self._pattern = re.compile("|".join(f"(?:{f})" for f in self.fragments))

    @property
    def pattern(self) -> str | None:
        """The combined regex source, or None for an empty filter."""
        return self._pattern.pattern if self._pattern is not None else None

    def matches(self, path: str) -> bool:
        if self._pattern is None:
            return False
        return self._pattern.search(path) is not None

    def __bool__(self) -> bool:
        return self._pattern is not None

    def __repr__(self) -> str:
        return f"ExclusionFilter({list(self.fragments)!r})"


def build_exclusion_filter(
    patterns: Iterable[str] = (),
    template_names: Iterable[str] = (),
    templates: Mapping[str, Iterable[str]] = DEFAULT_TEMPLATES,
) -> ExclusionFilter:
    """Union explicit *patterns* with the fragments of each named template.

    Unknown template names contribute nothing. Duplicate fragments are kept
    once, in first-seen order.
    """
    fragments = list(patterns)
    for name in template_names:
        template = templates.get(name)
        if template is None:
            logger.debug("Unknown exclusion template %r ignored", name)
            continue
        fragments.extend(template)
    return ExclusionFilter(dict.fromkeys(fragments))
