"""测试配置管理模块"""

import yaml

from src.plaintext_filters.common.config import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG,
    RENDER_DEFAULTS,
    Config,
    get_config,
    init_config,
)


def test_config_init():
    """测试配置初始化"""
    config = Config()
    assert config is not None


def test_config_set_get():
    """测试配置设置和获取"""
    config = Config()
    
    config.set("test.key", "value")
    assert config.get("test.key") == "value"
    
    config.set("test.nested.key", 123)
    assert config.get("test.nested.key") == 123
    
    # 获取不存在的键
    assert config.get("not.exist", "default") == "default"
    assert config.get("test.key.deeper", "default") == "default"


def test_config_load_and_merge(tmp_path):
    """测试加载与深度合并配置文件"""
    base = tmp_path / "base.yaml"
    base.write_text("render:\n  trim_blocks: true\n  lstrip_blocks: true\n", encoding="utf-8")
    override = tmp_path / "override.yaml"
    override.write_text("render:\n  lstrip_blocks: false\nlogging:\n  level: debug\n", encoding="utf-8")
    
    config = Config(str(base))
    config.merge_config(str(override))
    
    assert config.get("render.trim_blocks") is True
    assert config.get("render.lstrip_blocks") is False
    assert config.log_level == "DEBUG"


def test_render_options(tmp_path):
    """测试渲染选项默认值"""
    path = tmp_path / "render.yaml"
    path.write_text("render:\n  keep_trailing_newline: true\n", encoding="utf-8")
    
    config = Config(str(path))
    
    assert config.render_options() == {
        "trim_blocks": True,
        "lstrip_blocks": True,
        "keep_trailing_newline": True,
    }
    assert config.log_level == "INFO"


def test_config_env_override(tmp_path, monkeypatch):
    """测试环境变量指定覆盖文件"""
    path = tmp_path / "override.yaml"
    path.write_text("logging:\n  level: warning\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    
    config = Config()
    
    assert config.log_level == "WARNING"


def test_config_get_env(monkeypatch):
    """测试环境变量获取"""
    config = Config()
    
    monkeypatch.setenv("TEST_VAR", "test_value")
    
    assert config.get_env("TEST_VAR") == "test_value"
    assert config.get_env("NOT_EXIST", "default") == "default"


def test_init_global_config(tmp_path):
    """测试全局配置初始化"""
    path = tmp_path / "global.yaml"
    path.write_text("logging:\n  level: error\n", encoding="utf-8")
    
    config = init_config(str(path))
    
    assert get_config() is config
    assert get_config().log_level == "ERROR"


def test_render_defaults_match_base_yaml(tmp_path):
    """测试内置默认值与 configs/base.yaml 一致（安装后无配置文件时渲染结果不变）"""
    with open(DEFAULT_CONFIG, 'r', encoding='utf-8') as f:
        base = yaml.safe_load(f)
    assert base["render"] == RENDER_DEFAULTS
    
    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")
    assert Config(str(empty)).render_options() == base["render"]
