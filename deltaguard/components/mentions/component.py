"""
Mentions component - Validate mention sub-objects.

Invariants:
- Only class, id, target, avatar, end-point and slug survive
- avatar and end-point go through link sanitization
- Non-mapping input yields an empty result
"""

from __future__ import annotations

from ._impl import sanitize_mention
from .models import SanitizeMentionInput, SanitizeMentionOutput


def run_sanitize(inp: SanitizeMentionInput) -> SanitizeMentionOutput:
    """
    Sanitize a mention.

    Args:
        inp: Input containing the raw mention and options.

    Returns:
        SanitizeMentionOutput with the validated fields.
    """
    return SanitizeMentionOutput(
        mention=sanitize_mention(inp.mention, inp.options),
        success=True,
    )


def run(inp: SanitizeMentionInput) -> SanitizeMentionOutput:
    """Main entry point for the mentions component."""
    if isinstance(inp, SanitizeMentionInput):
        return run_sanitize(inp)
    raise ValueError(f"Unknown input type: {type(inp)}")
