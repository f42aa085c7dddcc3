"""
plaintext-filters - 定宽纯文本输出的模板过滤器
用于在模板中生成 ASCII / Markdown 表格
"""

__version__ = "0.1.0"

from .align import (
    FILTERS,
    FormatError,
    InvalidArgumentType,
    InvalidInputType,
    MissingArgument,
    center,
    left_align,
    right_align,
)

__all__ = [
    "FILTERS",
    "FormatError",
    "InvalidArgumentType",
    "InvalidInputType",
    "MissingArgument",
    "center",
    "left_align",
    "right_align",
]
