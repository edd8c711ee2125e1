"""
Attributes component - Sanitize delta op attribute maps.

Invariants:
- Every recognised key in the output passed its rule
- Unrecognised keys are copied through unchanged
- Boolean attributes never emit False
- A present link is always emitted, sanitized
- mentions and mention appear together or not at all
- Input is never mutated; malformed data never raises
"""

from __future__ import annotations

from deltaguard.components.mentions import MentionPolicyPort
from deltaguard.domain.links import sanitize_link

from ._impl import sanitize_with_report
from .models import (
    SanitizeAttributesInput,
    SanitizeAttributesOutput,
    SanitizeLinkInput,
    SanitizeLinkOutput,
)


def run_sanitize(
    inp: SanitizeAttributesInput,
    *,
    mention_policy: MentionPolicyPort | None = None,
) -> SanitizeAttributesOutput:
    """
    Sanitize an attribute map.

    Args:
        inp: Input containing the raw attributes and options.
        mention_policy: Optional policy for the mention sub-object.

    Returns:
        SanitizeAttributesOutput with the clean attributes and a record
        of every recognised attribute that was dropped.
    """
    attributes, rejections = sanitize_with_report(inp.attributes, inp.options, mention_policy)
    return SanitizeAttributesOutput(
        attributes=attributes,
        rejections=rejections,
        success=True,
    )


def run_sanitize_link(inp: SanitizeLinkInput) -> SanitizeLinkOutput:
    """Sanitize one link through the hook or the default policy."""
    return SanitizeLinkOutput(link=sanitize_link(inp.link, inp.options), success=True)


def run(
    inp: SanitizeAttributesInput | SanitizeLinkInput,
    *,
    mention_policy: MentionPolicyPort | None = None,
) -> SanitizeAttributesOutput | SanitizeLinkOutput:
    """
    Main entry point for the attributes component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, SanitizeAttributesInput):
        return run_sanitize(inp, mention_policy=mention_policy)
    elif isinstance(inp, SanitizeLinkInput):
        return run_sanitize_link(inp)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
