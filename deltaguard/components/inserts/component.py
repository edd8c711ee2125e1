"""
Inserts component - Convert raw delta ops.

Invariants:
- Non-list input yields no ops
- Every newline in text is its own op
- Every emitted op carries sanitized attributes
"""

from __future__ import annotations

from deltaguard.components.mentions import MentionPolicyPort

from ._impl import convert_with_stats
from .models import ConvertOpsInput, ConvertOpsOutput


def run_convert(
    inp: ConvertOpsInput,
    *,
    mention_policy: MentionPolicyPort | None = None,
) -> ConvertOpsOutput:
    """
    Convert raw delta ops into typed insert ops.

    Args:
        inp: Input containing the raw ops and sanitizer options.
        mention_policy: Optional policy for mention sub-objects.

    Returns:
        ConvertOpsOutput with the converted ops and a skip count.
    """
    ops, skipped = convert_with_stats(inp.ops, inp.options, mention_policy)
    return ConvertOpsOutput(ops=ops, skipped=skipped, success=True)


def run(
    inp: ConvertOpsInput,
    *,
    mention_policy: MentionPolicyPort | None = None,
) -> ConvertOpsOutput:
    """Main entry point for the inserts component."""
    if isinstance(inp, ConvertOpsInput):
        return run_convert(inp, mention_policy=mention_policy)
    raise ValueError(f"Unknown input type: {type(inp)}")
