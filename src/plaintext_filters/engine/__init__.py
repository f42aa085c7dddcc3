"""模板引擎适配模块"""

from .jinja import as_jinja_filter, create_environment, register_filters, render_str

__all__ = [
    "as_jinja_filter",
    "create_environment",
    "register_filters",
    "render_str",
]
