"""
Mentions component - Port interfaces.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from deltaguard.domain.links import SanitizerOptions


class MentionPolicyPort(Protocol):
    """Allow-list validator for the `mention` attribute sub-object."""

    def sanitize(
        self,
        mention: Any,
        options: SanitizerOptions | None = None,
    ) -> Mapping[str, Any]:
        """Return the validated mention fields, empty when nothing passes."""
        ...
