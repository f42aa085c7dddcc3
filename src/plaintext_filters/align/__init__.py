"""对齐过滤器模块"""

from .errors import FormatError, InvalidArgumentType, InvalidInputType, MissingArgument
from .formatter import (
    FILTERS,
    Alignment,
    Filter,
    center,
    evaluate,
    format_row,
    left_align,
    pad,
    right_align,
)
from .value import ValueKind, classify, to_text

__all__ = [
    "FILTERS",
    "Alignment",
    "Filter",
    "center",
    "evaluate",
    "format_row",
    "left_align",
    "pad",
    "right_align",
    "FormatError",
    "InvalidArgumentType",
    "InvalidInputType",
    "MissingArgument",
    "ValueKind",
    "classify",
    "to_text",
]
