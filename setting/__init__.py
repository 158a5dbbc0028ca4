"""
配置模块
提供仓库生成器配置的加载与校验接口
"""
from .generator_settings import GeneratorSettings
from .config_loader import ConfigLoader, load_settings, DEFAULT_CONFIG_PATH, PROJECT_CONFIG_PATH

__all__ = [
    'GeneratorSettings',
    'ConfigLoader',
    'load_settings',
    'DEFAULT_CONFIG_PATH',
    'PROJECT_CONFIG_PATH',
]
