"""
Inserts component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from deltaguard.domain.links import SanitizerOptions

NEWLINE = "\n"


class DataType(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    FORMULA = "formula"


# Embed keys checked in this order
EMBED_TYPES: tuple[DataType, ...] = (DataType.IMAGE, DataType.VIDEO, DataType.FORMULA)


@dataclass(frozen=True)
class InsertData:
    """Typed insert value of a delta op."""

    type: DataType
    value: Any


@dataclass
class DeltaInsertOp:
    """
    A denormalized insert op with sanitized attributes.

    The predicates are what renderers group and tag ops by.
    """

    insert: InsertData
    attributes: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create_new_line_op(cls) -> DeltaInsertOp:
        return cls(InsertData(DataType.TEXT, NEWLINE))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "insert": {"type": self.insert.type.value, "value": self.insert.value},
            "attributes": dict(self.attributes),
        }

    # --- Block attributes ---

    def is_container_block(self) -> bool:
        return (
            self.is_blockquote()
            or self.is_list()
            or self.is_code_block()
            or self.is_header()
            or self.is_block_attribute()
        )

    def is_block_attribute(self) -> bool:
        attrs = self.attributes
        return bool(attrs.get("align") or attrs.get("direction") or attrs.get("indent"))

    def is_blockquote(self) -> bool:
        return bool(self.attributes.get("blockquote"))

    def is_header(self) -> bool:
        return bool(self.attributes.get("header"))

    def is_same_header_as(self, other: DeltaInsertOp) -> bool:
        return self.attributes.get("header") == other.attributes.get("header") and self.is_header()

    def has_same_adi_as(self, other: DeltaInsertOp) -> bool:
        """Same align, direction and indent."""
        return all(
            self.attributes.get(name) == other.attributes.get(name)
            for name in ("align", "direction", "indent")
        )

    def has_same_indentation_as(self, other: DeltaInsertOp) -> bool:
        return self.attributes.get("indent") == other.attributes.get("indent")

    def has_same_attr(self, other: DeltaInsertOp) -> bool:
        return self.attributes == other.attributes

    def has_higher_indent_than(self, other: DeltaInsertOp) -> bool:
        return _indent(self) > _indent(other)

    def is_inline(self) -> bool:
        return not (
            self.is_container_block()
            or self.is_video()
            or (not self.is_text() and bool(self.attributes.get("renderAsBlock")))
        )

    def is_code_block(self) -> bool:
        return bool(self.attributes.get("code-block"))

    # --- Lists ---

    def is_list(self) -> bool:
        return self.is_ordered_list() or self.is_bullet_list()

    def is_ordered_list(self) -> bool:
        list_value = self.attributes.get("list")
        return isinstance(list_value, str) and list_value.split(":")[0] == "ordered"

    def is_bullet_list(self) -> bool:
        return self.attributes.get("list") == "bullet"

    def is_same_list_as(self, other: DeltaInsertOp) -> bool:
        return bool(self.attributes.get("list")) and (
            self.attributes.get("list") == other.attributes.get("list")
        )

    # --- Insert types ---

    def is_newline(self) -> bool:
        return self.insert.type is DataType.TEXT and self.insert.value == NEWLINE

    def is_just_newline(self) -> bool:
        return self.is_newline() and not self.attributes

    def is_text(self) -> bool:
        return self.insert.type is DataType.TEXT

    def is_image(self) -> bool:
        return self.insert.type is DataType.IMAGE

    def is_video(self) -> bool:
        return self.insert.type is DataType.VIDEO

    def is_formula(self) -> bool:
        return self.insert.type is DataType.FORMULA

    def is_link(self) -> bool:
        return (self.is_text() or self.is_image()) and bool(self.attributes.get("link"))

    def is_mentions(self) -> bool:
        return self.is_text() and bool(self.attributes.get("mentions"))


def _indent(op: DeltaInsertOp) -> int:
    try:
        return int(op.attributes.get("indent") or 0)
    except (TypeError, ValueError):
        return 0


# --- Input Models ---


@dataclass(frozen=True)
class ConvertOpsInput:
    """Input for converting raw delta ops."""

    ops: Any
    options: SanitizerOptions | None = None


# --- Output Models ---


@dataclass(frozen=True)
class ConvertOpsOutput:
    """Output for converted ops."""

    ops: list[DeltaInsertOp] = field(default_factory=list)
    skipped: int = 0
    success: bool = True
