"""
deltaguard - Sanitization and encoding for rich-text delta operations.
"""

from deltaguard.components.attributes import AttributeSanitizer, sanitize_attributes
from deltaguard.components.inserts import DeltaInsertOp, InsertNormalizer, convert
from deltaguard.components.mentions import MentionPolicy, sanitize_mention
from deltaguard.domain.html import (
    TagAttr,
    decode_html,
    encode_html,
    encode_link,
    encode_whitespaces,
    make_end_tag,
    make_start_tag,
)
from deltaguard.domain.links import SanitizerOptions, sanitize_link

__all__ = [
    "AttributeSanitizer",
    "DeltaInsertOp",
    "InsertNormalizer",
    "MentionPolicy",
    "SanitizerOptions",
    "TagAttr",
    "convert",
    "decode_html",
    "encode_html",
    "encode_link",
    "encode_whitespaces",
    "make_end_tag",
    "make_start_tag",
    "sanitize_attributes",
    "sanitize_link",
    "sanitize_mention",
]
