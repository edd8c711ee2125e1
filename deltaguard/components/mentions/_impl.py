"""
MentionPolicy - Allow-list validation for mention sub-objects.

Unlike attributes, mention fields are deny-by-default: only the keys
below survive, each with its own rule.

Functional Core - pure business logic.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from deltaguard.domain.links import SanitizerOptions, sanitize_link

logger = logging.getLogger(__name__)

CLASS_PATTERN = re.compile(r"[a-zA-Z0-9_\-]{1,500}")
ID_PATTERN = re.compile(r"[a-zA-Z0-9_\-:.]{1,500}")
VALID_TARGETS = frozenset(["_self", "_blank", "_parent", "_top"])

# Mention fields that carry URLs
LINK_FIELDS = ("avatar", "end-point")


# --- Validation Functions ---


def is_valid_class(value: Any) -> bool:
    return isinstance(value, str) and CLASS_PATTERN.fullmatch(value) is not None


def is_valid_id(value: Any) -> bool:
    return isinstance(value, str) and ID_PATTERN.fullmatch(value) is not None


def is_valid_target(value: Any) -> bool:
    return isinstance(value, str) and value in VALID_TARGETS


def sanitize_mention(
    raw: Any,
    options: SanitizerOptions | None = None,
) -> dict[str, Any]:
    """
    Sanitize a mention object.

    Returns:
        A new dict holding only the fields that validate; empty for
        missing or non-mapping input.
    """
    clean: dict[str, Any] = {}
    if not isinstance(raw, Mapping):
        return clean

    if raw.get("class") and is_valid_class(raw["class"]):
        clean["class"] = raw["class"]

    if raw.get("id") and is_valid_id(raw["id"]):
        clean["id"] = raw["id"]

    if is_valid_target(raw.get("target")):
        clean["target"] = raw["target"]

    for name in LINK_FIELDS:
        if raw.get(name):
            clean[name] = sanitize_link(str(raw[name]), options)

    if raw.get("slug"):
        clean["slug"] = str(raw["slug"])

    dropped = [key for key in raw if key not in clean]
    if dropped:
        logger.debug("Dropped mention fields: %s", ", ".join(map(str, dropped)))

    return clean


# --- Mention Policy ---


class MentionPolicy:
    """
    Default mention policy.

    Satisfies MentionPolicyPort for the attribute sanitizer.
    """

    def sanitize(
        self,
        mention: Any,
        options: SanitizerOptions | None = None,
    ) -> dict[str, Any]:
        """Sanitize a mention object."""
        return sanitize_mention(mention, options)


DEFAULT_MENTION_POLICY = MentionPolicy()
