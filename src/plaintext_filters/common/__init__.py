"""Common模块初始化"""

from .config import Config, get_config, init_config
from .logger import get_logger, setup_logger

__all__ = [
    "Config",
    "get_config",
    "init_config",
    "setup_logger",
    "get_logger",
]
