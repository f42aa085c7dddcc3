"""Pytest配置文件"""

import sys
from pathlib import Path

# 添加项目根目录到Python路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest


@pytest.fixture
def mock_config():
    """提供模拟配置"""
    from src.plaintext_filters.common.config import Config
    
    config = Config()
    config.set("render.trim_blocks", True)
    config.set("render.lstrip_blocks", True)
    config.set("render.keep_trailing_newline", False)
    config.set("logging.level", "debug")
    
    return config


@pytest.fixture
def jinja_env(mock_config):
    """提供已注册过滤器的 Jinja2 环境"""
    from src.plaintext_filters.engine import create_environment
    
    return create_environment(mock_config)


@pytest.fixture
def length20():
    """提供 length=20 的参数表"""
    return {"length": 20}
