"""对齐过滤器异常定义

所有异常均为本地校验失败，直接抛给调用方（模板引擎）处理，不做重试。
"""

import json
from typing import Any


def display_value(value: Any) -> str:
    """以 JSON 形式展示值，用于错误信息"""
    try:
        return json.dumps(value, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return str(value)


class FormatError(Exception):
    """过滤器格式化错误基类
    
    Attributes:
        filter_name: 出错的过滤器名称
    """
    
    def __init__(self, filter_name: str, message: str):
        super().__init__(message)
        self.filter_name = filter_name
        self.message = message
    
    def __str__(self) -> str:
        return self.message


class InvalidInputType(FormatError, TypeError):
    """输入值为复合类型（对象/数组），无法渲染为定宽文本"""
    
    def __init__(self, filter_name: str, value: Any):
        super().__init__(
            filter_name,
            f"Filter `{filter_name}` was called on an incorrect value: "
            f"got `{display_value(value)}` but expected a text or number"
        )
        self.value = value


class MissingArgument(FormatError, ValueError):
    """缺少必需参数"""
    
    def __init__(self, filter_name: str, argument: str):
        super().__init__(
            filter_name,
            f"Filter `{filter_name}` expected an arg called `{argument}`"
        )
        self.argument = argument


class InvalidArgumentType(FormatError, TypeError):
    """参数存在但类型不符（length 必须为非负整数）"""
    
    def __init__(self, filter_name: str, argument: str, value: Any):
        super().__init__(
            filter_name,
            f"Filter `{filter_name}` received an incorrect type for arg `{argument}`: "
            f"got `{display_value(value)}` but expected a non-negative integer"
        )
        self.argument = argument
        self.value = value
