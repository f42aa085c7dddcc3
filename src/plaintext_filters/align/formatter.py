"""对齐过滤器

供模板引擎调用的三个过滤器：right_align / left_align / center。
按字符数（非终端显示宽度）用空格填充到指定长度，超长文本不截断。

模板用法：
    {{ name | right_align(length=20) }}
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Protocol, Sequence, Tuple, Union

from ..common.logger import get_logger
from .errors import InvalidArgumentType, InvalidInputType, MissingArgument
from .value import classify, to_text

logger = get_logger(__name__)

FILL_CHAR = ' '
LENGTH_ARG = 'length'


class Alignment(Enum):
    """对齐方式"""
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class Filter(Protocol):
    """过滤器接口：(value, args) -> str"""

    def __call__(self, value: Any, args: Mapping[str, Any]) -> str:
        ...


def pad(text: str, width: int, align: Union[str, Alignment] = Alignment.LEFT) -> str:
    """按字符数填充字符串
    
    居中时奇数的多余空格放在右侧。
    
    Args:
        text: 文本
        width: 目标宽度
        align: 'left'|'right'|'center'
        
    Returns:
        填充后的文本，长度不小于 width
    """
    align = Alignment(align)
    pad_len = width - len(text)
    if pad_len <= 0:
        return text
    if align is Alignment.LEFT:
        return text + FILL_CHAR * pad_len
    if align is Alignment.RIGHT:
        return FILL_CHAR * pad_len + text
    left = pad_len // 2
    right = pad_len - left
    return FILL_CHAR * left + text + FILL_CHAR * right


def _get_length(args: Mapping[str, Any], filter_name: str) -> int:
    if LENGTH_ARG not in args:
        raise MissingArgument(filter_name, LENGTH_ARG)
    length = args[LENGTH_ARG]
    # bool 是 int 的子类，需要排除
    if isinstance(length, bool) or not isinstance(length, int) or length < 0:
        raise InvalidArgumentType(filter_name, LENGTH_ARG, length)
    return length


def evaluate(value: Any, args: Mapping[str, Any], filter_name: str) -> Tuple[str, int]:
    """校验输入并转换为 (文本, 宽度)
    
    先检查值类型，再检查 length 参数，因此复合值无论参数是否合法都会报错。
    
    Args:
        value: 模板传入的值
        args: 过滤器参数表，仅识别 length
        filter_name: 过滤器名称，用于错误信息
        
    Returns:
        (文本, 目标宽度)
        
    Raises:
        InvalidInputType: 值为对象或数组
        MissingArgument: 缺少 length
        InvalidArgumentType: length 不是非负整数
    """
    if not classify(value).is_scalar:
        logger.debug(f"过滤器 {filter_name} 收到复合类型值: {type(value).__name__}")
        raise InvalidInputType(filter_name, value)
    length = _get_length(args, filter_name)
    return to_text(value), length


def right_align(value: Any, args: Mapping[str, Any]) -> str:
    """右对齐：在左侧补空格
    
    `{{ name | right_align(length=20) }}`
    """
    text, length = evaluate(value, args, "right_align")
    return pad(text, length, Alignment.RIGHT)


def left_align(value: Any, args: Mapping[str, Any]) -> str:
    """左对齐：在右侧补空格
    
    `{{ name | left_align(length=20) }}`
    """
    text, length = evaluate(value, args, "left_align")
    return pad(text, length, Alignment.LEFT)


def center(value: Any, args: Mapping[str, Any]) -> str:
    """居中：两侧补空格，奇数时右侧多一个
    
    `{{ name | center(length=20) }}`
    """
    text, length = evaluate(value, args, "center")
    return pad(text, length, Alignment.CENTER)


FILTERS: Mapping[str, Filter] = MappingProxyType({
    "right_align": right_align,
    "left_align": left_align,
    "center": center,
})


def format_row(
    values: Sequence[Any],
    widths: Sequence[int],
    aligns: Sequence[Union[str, Alignment]],
    sep: str = ' '
) -> str:
    """按列宽与对齐方式格式化一行并返回字符串。"""
    if not len(values) == len(widths) == len(aligns):
        raise ValueError(
            f"列数不一致: values={len(values)}, widths={len(widths)}, aligns={len(aligns)}"
        )
    parts = []
    for v, w, a in zip(values, widths, aligns):
        if not classify(v).is_scalar:
            raise InvalidInputType("format_row", v)
        parts.append(pad(to_text(v), w, a))
    return sep.join(parts)
