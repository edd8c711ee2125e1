"""
Attributes component - Data models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from deltaguard.domain.links import SanitizerOptions

# --- Rejections ---


@dataclass(frozen=True)
class AttributeRejection:
    """A recognised attribute that was present but dropped."""

    code: str
    message: str
    path: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class SanitizeAttributesInput:
    """Input for sanitizing one op's attribute map."""

    attributes: Mapping[str, Any] | None
    options: SanitizerOptions | None = None


@dataclass(frozen=True)
class SanitizeLinkInput:
    """Input for sanitizing a single link value."""

    link: str
    options: SanitizerOptions | None = None


# --- Output Models ---


@dataclass(frozen=True)
class SanitizeAttributesOutput:
    """Output for sanitized attributes."""

    attributes: dict[str, Any] = field(default_factory=dict)
    rejections: list[AttributeRejection] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class SanitizeLinkOutput:
    """Output for a sanitized link."""

    link: str
    success: bool = True
