"""输入值分类与文本转换

模板引擎传入的值是动态类型的，这里将其归类为有限的几种类型（ValueKind），
对齐逻辑只接受标量与空值，拒绝对象与数组。
"""

from collections.abc import Iterable, Mapping
from decimal import Decimal
from enum import Enum
from typing import Any


class ValueKind(Enum):
    """输入值类型"""
    TEXT = "text"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    NULL = "null"
    OBJECT = "object"  # 字典等映射
    ARRAY = "array"  # 列表、元组、生成器等可迭代对象

    @property
    def is_scalar(self) -> bool:
        """标量或空值，可以格式化为文本"""
        return self not in (ValueKind.OBJECT, ValueKind.ARRAY)


def classify(value: Any) -> ValueKind:
    """判断输入值的类型
    
    bool 是 int 的子类，必须先于 int 判断。
    bytes 按 UTF-8 文本处理；其余可迭代对象（range、生成器、dict.values() 等）
    均视为数组，不会被迭代。无法识别的对象按文本处理（通过 str() 转换）。
    
    Args:
        value: 任意输入值
        
    Returns:
        ValueKind
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, (str, bytes, bytearray)):
        return ValueKind.TEXT
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, (float, Decimal)):
        return ValueKind.FLOAT
    if isinstance(value, Mapping):
        return ValueKind.OBJECT
    if isinstance(value, Iterable):
        return ValueKind.ARRAY
    return ValueKind.TEXT


def to_text(value: Any) -> str:
    """将标量值转换为文本
    
    - None -> ""
    - 文本 -> 原样（bytes 按 UTF-8 解码）
    - 布尔 -> "true" / "false"
    - 数字 -> 默认打印形式（12.23 -> "12.23"，整数无小数点）
    
    Args:
        value: 标量或空值
        
    Returns:
        文本
        
    Raises:
        ValueError: 值为对象或数组
    """
    kind = classify(value)
    if kind is ValueKind.NULL:
        return ''
    if kind is ValueKind.BOOLEAN:
        return 'true' if value else 'false'
    if kind is ValueKind.TEXT and isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8", errors="replace")
    if not kind.is_scalar:
        raise ValueError(f"无法将 {kind.value} 类型转换为文本")
    return str(value)
