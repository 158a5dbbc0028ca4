"""
日志配置模块

该模块提供了日志系统的配置管理功能，支持从环境变量和字典读取配置，
包括日志级别、输出格式、文件轮转策略等。

命令行生成工具默认只输出到控制台，文件日志需要显式开启。
"""

import os
from typing import Dict, Any, Optional, Union
from pathlib import Path
from dataclasses import dataclass, field
from enum import Enum


class LogLevel(Enum):
    """日志级别枚举"""
    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass
class RotationConfig:
    """日志轮转配置"""
    # 按文件大小轮转
    size: Optional[str] = "10 MB"
    # 保留时间
    retention: Union[str, int] = "7 days"
    # 压缩格式
    compression: Optional[str] = None


@dataclass
class LoggerConfig:
    """日志配置类"""
    # 基础配置
    level: LogLevel = LogLevel.INFO
    format_string: str = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {extra[kind]: <10} | {message}"
    file_format_string: str = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[tool]} | {extra[kind]: <10} | {name}:{function}:{line} - {message}"

    # 输出配置
    log_dir: str = "storage/logs"
    enable_file_logging: bool = False
    enable_console_logging: bool = True
    colorize: bool = True

    # loguru 行为
    enable_async: bool = False
    backtrace: bool = False
    diagnose: bool = False

    # 轮转配置
    rotation: RotationConfig = field(default_factory=RotationConfig)

    # 上下文信息
    tool_name: str = "repository-generator"

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'LoggerConfig':
        """从字典创建配置对象"""
        config_dict = dict(config_dict)

        if isinstance(config_dict.get('level'), str):
            config_dict['level'] = LogLevel(config_dict['level'].upper())

        if isinstance(config_dict.get('rotation'), dict):
            config_dict['rotation'] = RotationConfig(**config_dict['rotation'])

        return cls(**config_dict)

    @classmethod
    def from_env(cls, prefix: str = "LOG_") -> 'LoggerConfig':
        """从环境变量创建配置"""
        config: Dict[str, Any] = {}

        if level := os.getenv(f"{prefix}LEVEL"):
            config['level'] = LogLevel(level.upper())

        if log_dir := os.getenv(f"{prefix}DIR"):
            config['log_dir'] = log_dir

        if format_str := os.getenv(f"{prefix}FORMAT"):
            config['format_string'] = format_str

        # 布尔配置
        for key, env_key in [
            ('enable_file_logging', 'ENABLE_FILE'),
            ('enable_console_logging', 'ENABLE_CONSOLE'),
            ('enable_async', 'ENABLE_ASYNC'),
            ('colorize', 'COLORIZE'),
            ('backtrace', 'BACKTRACE'),
            ('diagnose', 'DIAGNOSE'),
        ]:
            if value := os.getenv(f"{prefix}{env_key}"):
                config[key] = value.lower() in ('true', '1', 'yes', 'on')

        return cls(**config) if config else cls()

    def get_log_file_path(self, logger_name: str) -> str:
        """获取日志文件路径"""
        filename = f"{self.tool_name}_{logger_name}_{{time:YYYY-MM-DD}}.log"
        return str(Path(self.log_dir) / filename)

    def get_console_config(self, sink: Any) -> Dict[str, Any]:
        """获取控制台输出的loguru配置"""
        return {
            "sink": sink,
            "level": self.level.value,
            "format": self.format_string,
            "colorize": self.colorize,
            "enqueue": self.enable_async,
            "backtrace": self.backtrace,
            "diagnose": self.diagnose,
        }

    def get_file_config(self, logger_name: str) -> Dict[str, Any]:
        """获取文件输出的loguru配置"""
        return {
            "sink": self.get_log_file_path(logger_name),
            "level": self.level.value,
            "format": self.file_format_string,
            "rotation": self.rotation.size,
            "retention": self.rotation.retention,
            "compression": self.rotation.compression,
            "encoding": "utf-8",
            "enqueue": self.enable_async,
            "backtrace": self.backtrace,
            "diagnose": self.diagnose,
        }

    def create_log_directory(self) -> None:
        """创建日志目录"""
        if self.enable_file_logging:
            Path(self.log_dir).mkdir(parents=True, exist_ok=True)
