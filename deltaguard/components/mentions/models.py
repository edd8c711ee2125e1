"""
Mentions component - Data models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from deltaguard.domain.links import SanitizerOptions

# --- Input Models ---


@dataclass(frozen=True)
class SanitizeMentionInput:
    """Input for sanitizing a mention sub-object."""

    mention: Mapping[str, Any] | None
    options: SanitizerOptions | None = None


# --- Output Models ---


@dataclass(frozen=True)
class SanitizeMentionOutput:
    """Output for a sanitized mention."""

    mention: dict[str, Any] = field(default_factory=dict)
    success: bool = True

    @property
    def is_empty(self) -> bool:
        return not self.mention
