"""
配置加载器
负责加载、合并和校验仓库生成器的YAML配置
"""
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from common.logger import logger
from repository_generator.exceptions import ConfigurationError
from .generator_settings import GeneratorSettings, DEFAULT_CONFIG_PATH, PROJECT_CONFIG_PATH

# 环境变量前缀: REPOGEN_MODELS_DIRECTORY -> models_directory
ENV_PREFIX = 'REPOGEN_'


class ConfigLoader:
    """
    配置加载器
    按优先级合并：内置默认配置 < 项目配置文件 < 环境变量
    """

    def __init__(self, base_path: Union[str, Path, None] = None,
                 config_path: Union[str, Path, None] = None,
                 environ: Optional[Dict[str, str]] = None):
        """
        初始化配置加载器

        Args:
            base_path: 项目根目录，默认为当前目录
            config_path: 显式指定的配置文件，必须存在
            environ: 环境变量映射，默认为 os.environ
        """
        self._base_path = Path(base_path) if base_path is not None else Path.cwd()
        self._config_path = Path(config_path) if config_path is not None else None
        self._environ = environ if environ is not None else os.environ
        self._config: Dict[str, Any] = {}
        self._settings: Optional[GeneratorSettings] = None

    @property
    def settings(self) -> GeneratorSettings:
        """获取校验后的配置（首次访问时加载）"""
        if self._settings is None:
            self._settings = self.load()
        return self._settings

    def load(self) -> GeneratorSettings:
        """加载并校验配置"""
        self._config = self._load_file(DEFAULT_CONFIG_PATH)

        project_config = self._project_config_path()
        if project_config is not None:
            logger.debug(f"加载项目配置: {project_config}")
            self._config.update(self._load_file(project_config))

        self._apply_env_overrides()

        try:
            self._settings = GeneratorSettings(**self._config)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid repository generator configuration: {e}") from e

        return self._settings

    def _project_config_path(self) -> Optional[Path]:
        """确定项目配置文件位置"""
        if self._config_path is not None:
            path = self._config_path
            if not path.is_absolute():
                path = self._base_path / path
            if not path.is_file():
                raise ConfigurationError(f"Configuration file does not exist: {path}", error_code=404)
            return path

        path = self._base_path / PROJECT_CONFIG_PATH
        return path if path.is_file() else None

    def _load_file(self, path: Path) -> Dict[str, Any]:
        """读取单个YAML配置文件"""
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read configuration file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file must contain a mapping: {path}")
        return data

    def _apply_env_overrides(self) -> None:
        """应用环境变量覆盖"""
        for key in GeneratorSettings.model_fields:
            env_key = f"{ENV_PREFIX}{key.upper()}"
            if env_key in self._environ:
                self._config[key] = self._parse_env_value(self._environ[env_key])

    def _parse_env_value(self, value: str) -> Any:
        """解析环境变量值"""
        if value.strip().lower() in ('', 'null', 'none'):
            return None
        return value

    def get(self, key: str, default: Any = None) -> Any:
        """获取合并后（校验前）的原始配置值"""
        if not self._config:
            self.load()
        return self._config.get(key, default)

    def reload(self) -> GeneratorSettings:
        """重新加载配置"""
        self._settings = None
        return self.settings

    def __getitem__(self, key: str) -> Any:
        return getattr(self.settings, key)


def load_settings(base_path: Union[str, Path, None] = None,
                  config_path: Union[str, Path, None] = None) -> GeneratorSettings:
    """加载配置的便捷函数"""
    return ConfigLoader(base_path=base_path, config_path=config_path).settings
