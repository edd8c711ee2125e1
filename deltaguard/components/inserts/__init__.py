"""
Inserts component - Denormalize and type raw delta ops.
"""

from ._impl import (
    InsertNormalizer,
    convert,
    convert_insert_value,
    convert_with_stats,
    denormalize,
    tokenize_with_newlines,
)
from .component import run, run_convert
from .models import (
    NEWLINE,
    ConvertOpsInput,
    ConvertOpsOutput,
    DataType,
    DeltaInsertOp,
    InsertData,
)

__all__ = [
    # Entry points
    "run",
    "run_convert",
    # Models
    "NEWLINE",
    "ConvertOpsInput",
    "ConvertOpsOutput",
    "DataType",
    "DeltaInsertOp",
    "InsertData",
    # Implementation
    "InsertNormalizer",
    "convert",
    "convert_insert_value",
    "convert_with_stats",
    "denormalize",
    "tokenize_with_newlines",
]
