"""
Mentions component - Allow-list validation for mention sub-objects.
"""

from ._impl import (
    DEFAULT_MENTION_POLICY,
    MentionPolicy,
    is_valid_class,
    is_valid_id,
    is_valid_target,
    sanitize_mention,
)
from .component import run, run_sanitize
from .models import SanitizeMentionInput, SanitizeMentionOutput
from .ports import MentionPolicyPort

__all__ = [
    # Entry points
    "run",
    "run_sanitize",
    # Models
    "SanitizeMentionInput",
    "SanitizeMentionOutput",
    # Ports
    "MentionPolicyPort",
    # Implementation
    "DEFAULT_MENTION_POLICY",
    "MentionPolicy",
    "is_valid_class",
    "is_valid_id",
    "is_valid_target",
    "sanitize_mention",
]
