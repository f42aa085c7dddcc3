"""配置管理模块

配置来源（后者覆盖前者）：
1. 项目根目录下的 configs/base.yaml
2. 环境变量 PLAINTEXT_FILTERS_CONFIG 指定的 YAML 文件
3. 代码中通过 set() 设置的值
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

CONFIG_ENV_VAR = "PLAINTEXT_FILTERS_CONFIG"
# 仅在源码目录中存在；安装后可通过 PLAINTEXT_FILTERS_CONFIG 指定配置文件
DEFAULT_CONFIG = Path(__file__).parent.parent.parent.parent / "configs" / "base.yaml"

# 渲染选项及默认值，对应 jinja2.Environment 的同名参数。
# 与 configs/base.yaml 保持一致，安装后找不到该文件时渲染结果相同
RENDER_DEFAULTS: Dict[str, bool] = {
    "trim_blocks": True,
    "lstrip_blocks": True,
    "keep_trailing_newline": False,
}


class Config:
    """配置管理类
    
    支持从YAML文件加载配置，并支持环境变量指定覆盖文件
    """
    
    def __init__(self, config_path: Optional[str] = None):
        """初始化配置
        
        Args:
            config_path: 配置文件路径，如不提供则使用默认base.yaml
        """
        self._config: Dict[str, Any] = {}
        
        load_dotenv()
        
        if config_path:
            self.load_config(config_path)
        else:
            if DEFAULT_CONFIG.exists():
                self.load_config(str(DEFAULT_CONFIG))
            override = os.getenv(CONFIG_ENV_VAR)
            if override:
                self.merge_config(override)
    
    def load_config(self, config_path: str) -> None:
        """加载YAML配置文件（浅合并）"""
        with open(config_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)
            self._config.update(config or {})
    
    def merge_config(self, config_path: str) -> None:
        """合并另一个配置文件（深度覆盖已有配置）"""
        with open(config_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)
            self._deep_update(self._config, config or {})
    
    def _deep_update(self, base: Dict, update: Dict) -> None:
        for key, value in update.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_update(base[key], value)
            else:
                base[key] = value
    
    def get(self, key: str, default: Any = None) -> Any:
        """获取配置项，支持点号分隔的嵌套键
        
        Args:
            key: 配置键，支持 'render.trim_blocks' 格式
            default: 默认值
            
        Returns:
            配置值
        """
        value = self._config
        for k in key.split('.'):
            if not isinstance(value, dict):
                return default
            value = value.get(k)
            if value is None:
                return default
        return value
    
    def set(self, key: str, value: Any) -> None:
        """设置配置项，支持点号分隔的嵌套键"""
        keys = key.split('.')
        config = self._config
        for k in keys[:-1]:
            config = config.setdefault(k, {})
        config[keys[-1]] = value
    
    def get_env(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """获取环境变量"""
        return os.getenv(key, default)
    
    def render_options(self) -> Dict[str, bool]:
        """返回模板渲染选项
        
        Returns:
            可直接传给 jinja2.Environment 的关键字参数
        """
        return {
            name: bool(self.get(f"render.{name}", default))
            for name, default in RENDER_DEFAULTS.items()
        }
    
    @property
    def log_level(self) -> str:
        """日志级别，默认 INFO"""
        return str(self.get("logging.level", "INFO")).upper()
    
    @property
    def all(self) -> Dict[str, Any]:
        """返回所有配置"""
        return self._config.copy()


# 全局配置实例
_global_config: Optional[Config] = None


def get_config() -> Config:
    """获取全局配置实例"""
    global _global_config
    if _global_config is None:
        _global_config = Config()
    return _global_config


def init_config(config_path: str) -> Config:
    """初始化全局配置
    
    Args:
        config_path: 配置文件路径
        
    Returns:
        配置实例
    """
    global _global_config
    _global_config = Config(config_path)
    return _global_config
