"""Jinja2 适配层

将 (value, args) 形式的过滤器包装为 Jinja2 过滤器并注册到 Environment。
注册会覆盖 Jinja2 内置的 center 过滤器。

示例：
    env = create_environment()
    env.from_string("{{ name | center(length=20) }}").render(name="some text")
"""

import functools
from typing import Any, Dict, Iterable, Optional

from jinja2 import Environment, Undefined

from ..align import FILTERS, Filter
from ..common.config import Config, get_config
from ..common.logger import get_logger

logger = get_logger(__name__)


def as_jinja_filter(func: Filter):
    """包装过滤器，使其接受 Jinja2 的关键字参数
    
    未定义变量先按环境配置的 Undefined 类型转换为文本：默认 Undefined 得到空串，
    按空值处理；StrictUndefined 在此抛出 UndefinedError。
    FormatError 直接抛出，由渲染调用方处理。
    """
    @functools.wraps(func)
    def jinja_filter(value: Any, **kwargs: Any) -> str:
        if isinstance(value, Undefined):
            value = str(value) or None
        return func(value, kwargs)
    
    return jinja_filter


def register_filters(env: Environment, names: Optional[Iterable[str]] = None) -> Environment:
    """注册对齐过滤器
    
    Args:
        env: Jinja2 环境
        names: 需要注册的过滤器名称，None 表示全部
        
    Returns:
        同一个 Environment
        
    Raises:
        KeyError: 未知的过滤器名称
    """
    names = list(FILTERS) if names is None else list(names)
    for name in names:
        if name not in FILTERS:
            raise KeyError(f"未知的过滤器: {name}")
        env.filters[name] = as_jinja_filter(FILTERS[name])
    logger.debug(f"已注册过滤器: {', '.join(names)}")
    return env


def create_environment(config: Optional[Config] = None) -> Environment:
    """创建已注册过滤器的 Jinja2 环境
    
    Args:
        config: 配置实例，None 则使用全局配置（render.* 选项）
        
    Returns:
        Environment
    """
    config = config or get_config()
    env = Environment(**config.render_options())
    return register_filters(env)


def render_str(
    source: str,
    context: Optional[Dict[str, Any]] = None,
    env: Optional[Environment] = None
) -> str:
    """渲染模板字符串"""
    env = env or create_environment()
    return env.from_string(source).render(context or {})
