"""
Attributes component - Allow-list sanitization of delta op attributes.
"""

from deltaguard.components.mentions import MentionPolicyPort
from deltaguard.domain.links import SanitizerOptions, sanitize_link

from ._impl import (
    ATTRIBUTE_RULES,
    AttributeRule,
    AttributeSanitizer,
    RuleKind,
    is_valid_color,
    is_valid_color_literal,
    is_valid_font_name,
    is_valid_hex_color,
    is_valid_list,
    is_valid_rel,
    is_valid_rgb_color,
    is_valid_script,
    is_valid_size,
    is_valid_target,
    is_valid_width,
    sanitize_attributes,
    sanitize_with_report,
    to_number,
)
from .component import run, run_sanitize, run_sanitize_link
from .models import (
    AttributeRejection,
    SanitizeAttributesInput,
    SanitizeAttributesOutput,
    SanitizeLinkInput,
    SanitizeLinkOutput,
)

__all__ = [
    # Entry points
    "run",
    "run_sanitize",
    "run_sanitize_link",
    # Models
    "AttributeRejection",
    "SanitizeAttributesInput",
    "SanitizeAttributesOutput",
    "SanitizeLinkInput",
    "SanitizeLinkOutput",
    "SanitizerOptions",
    # Ports
    "MentionPolicyPort",
    # Rule table
    "ATTRIBUTE_RULES",
    "AttributeRule",
    "RuleKind",
    # Implementation
    "AttributeSanitizer",
    "is_valid_color",
    "is_valid_color_literal",
    "is_valid_font_name",
    "is_valid_hex_color",
    "is_valid_list",
    "is_valid_rel",
    "is_valid_rgb_color",
    "is_valid_script",
    "is_valid_size",
    "is_valid_target",
    "is_valid_width",
    "sanitize_attributes",
    "sanitize_link",
    "sanitize_with_report",
    "to_number",
]
