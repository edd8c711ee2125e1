"""
InsertNormalizer - Raw delta ops to typed, sanitized insert ops.

Text inserts are split on newlines so every newline becomes its own op,
embeds are typed by their first recognised key, and attributes go
through the attribute sanitizer.

Functional Core - pure business logic.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from deltaguard.components.attributes import sanitize_attributes
from deltaguard.components.mentions import MentionPolicyPort
from deltaguard.domain.links import SanitizerOptions

from .models import EMBED_TYPES, NEWLINE, DataType, DeltaInsertOp, InsertData

logger = logging.getLogger(__name__)


def tokenize_with_newlines(text: str) -> list[str]:
    """
    Split text on newlines, keeping each newline as its own token.

    Empty segments between newlines are dropped.
    """
    if text == NEWLINE:
        return [text]

    lines = text.split(NEWLINE)
    if len(lines) == 1:
        return lines

    tokens: list[str] = []
    last_index = len(lines) - 1
    for index, line in enumerate(lines):
        if line:
            tokens.append(line)
        if index != last_index:
            tokens.append(NEWLINE)
    return tokens


def denormalize(op: Any) -> list[dict[str, Any]]:
    """
    Split a text op containing newlines into one op per token.

    Embeds and bare newlines are returned unchanged. Each new op is a
    shallow copy of the original with its own insert value.
    """
    if not isinstance(op, Mapping):
        return []

    insert = op.get("insert")
    if isinstance(insert, Mapping) or insert == NEWLINE:
        return [dict(op)]

    tokens = tokenize_with_newlines(str(insert) if insert is not None else "")
    if len(tokens) == 1:
        return [dict(op)]

    return [{**op, "insert": token} for token in tokens]


def convert_insert_value(value: Any) -> InsertData | None:
    """Type an insert value; None when it is neither text nor a known embed."""
    if isinstance(value, str):
        return InsertData(DataType.TEXT, value)

    if not isinstance(value, Mapping):
        return None

    for data_type in EMBED_TYPES:
        if data_type.value in value:
            return InsertData(data_type, value[data_type.value])
    return None


def convert_with_stats(
    ops: Any,
    options: SanitizerOptions | None = None,
    mention_policy: MentionPolicyPort | None = None,
) -> tuple[list[DeltaInsertOp], int]:
    """
    Convert raw ops.

    Returns:
        Tuple of (converted ops, number of denormalized ops skipped)
    """
    if not isinstance(ops, list):
        return [], 0

    results: list[DeltaInsertOp] = []
    skipped = 0

    for raw_op in ops:
        for op in denormalize(raw_op):
            insert = op.get("insert")
            data = convert_insert_value(insert) if insert else None
            if data is None:
                skipped += 1
                logger.debug("Skipped op with unsupported insert: %.50r", insert)
                continue

            attributes = sanitize_attributes(
                op.get("attributes"), options, mention_policy=mention_policy
            )
            results.append(DeltaInsertOp(data, attributes))

    return results, skipped


def convert(
    ops: Any,
    options: SanitizerOptions | None = None,
    *,
    mention_policy: MentionPolicyPort | None = None,
) -> list[DeltaInsertOp]:
    """Convert raw delta ops to denormalized, sanitized insert ops."""
    results, _ = convert_with_stats(ops, options, mention_policy)
    return results


# --- Insert Normalizer ---


class InsertNormalizer:
    """
    Insert normalizer service.

    Binds sanitizer options and a mention policy for repeated use.
    """

    def __init__(
        self,
        options: SanitizerOptions | None = None,
        mention_policy: MentionPolicyPort | None = None,
    ) -> None:
        self._options = options
        self._mention_policy = mention_policy

    def convert(self, ops: Any) -> list[DeltaInsertOp]:
        """Convert raw delta ops."""
        return convert(ops, self._options, mention_policy=self._mention_policy)
