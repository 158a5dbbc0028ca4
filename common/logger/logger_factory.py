"""
日志工厂模块

该模块提供日志工厂类，负责安装loguru处理器、创建和缓存日志实例，
支持延迟初始化和运行期调整日志级别。
"""

import sys
import threading
from typing import Dict, Optional, Any, List

from loguru import logger as loguru_logger

from .logger_config import LoggerConfig, LogLevel
from .base_logger import BaseLogger


def _console_sink(message) -> None:
    """控制台输出，每次写入时重新获取sys.stderr以兼容输出重定向"""
    sys.stderr.write(str(message))


class LoggerFactory:
    """
    日志工厂类

    负责安装处理器并创建不同名称的日志实例。
    """

    def __init__(self):
        """初始化日志工厂"""
        self._loggers: Dict[str, BaseLogger] = {}
        self._handler_ids: List[int] = []
        self._lock = threading.Lock()
        self._config: Optional[LoggerConfig] = None
        self._default_removed = False

    @property
    def initialized(self) -> bool:
        return self._config is not None

    @property
    def config(self) -> LoggerConfig:
        if self._config is None:
            self.initialize()
        return self._config

    def initialize(self, config: Optional[LoggerConfig] = None,
                   config_dict: Optional[Dict[str, Any]] = None) -> None:
        """
        初始化日志工厂

        Args:
            config: 日志配置，为空时从环境变量读取
            config_dict: 配置字典，优先级高于config
        """
        with self._lock:
            if config_dict:
                config = LoggerConfig.from_dict(config_dict)
            self._config = config or LoggerConfig.from_env()
            self._install_handlers()

            # 已创建的日志器跟随新配置
            for logger in self._loggers.values():
                logger.config = self._config

    def _install_handlers(self) -> None:
        """移除现有处理器并按配置重新安装"""
        for handler_id in self._handler_ids:
            try:
                loguru_logger.remove(handler_id)
            except ValueError:
                # 处理器已被外部移除
                continue
        self._handler_ids.clear()

        # loguru在导入时自带一个stderr处理器（id为0），首次初始化时移除
        if not self._default_removed:
            try:
                loguru_logger.remove(0)
            except ValueError:
                pass
            self._default_removed = True

        config = self._config
        if config.enable_console_logging:
            self._handler_ids.append(
                loguru_logger.add(**config.get_console_config(_console_sink))
            )

        if config.enable_file_logging:
            config.create_log_directory()
            self._handler_ids.append(
                loguru_logger.add(**config.get_file_config("general"))
            )

    def get_logger(self, name: str = "general") -> BaseLogger:
        """
        获取日志器实例

        Args:
            name: 日志器名称

        Returns:
            BaseLogger: 日志器实例
        """
        if not self.initialized:
            self.initialize()

        if name in self._loggers:
            return self._loggers[name]

        with self._lock:
            if name not in self._loggers:
                self._loggers[name] = BaseLogger(name, self._config)
            return self._loggers[name]

    def set_global_level(self, level: str) -> None:
        """
        设置全局日志级别

        Args:
            level: 日志级别
        """
        config = self.config
        config.level = LogLevel(level.upper())
        with self._lock:
            self._install_handlers()

    def reset(self) -> None:
        """移除所有处理器并清空缓存（主要用于测试）"""
        with self._lock:
            for handler_id in self._handler_ids:
                try:
                    loguru_logger.remove(handler_id)
                except ValueError:
                    continue
            self._handler_ids.clear()
            self._loggers.clear()
            self._config = None


# 全局日志工厂实例
logger_factory = LoggerFactory()


def get_logger(name: str = "general") -> BaseLogger:
    """获取日志器的便捷函数"""
    return logger_factory.get_logger(name)


def initialize_logging(config: Optional[LoggerConfig] = None, **kwargs) -> None:
    """
    初始化日志系统的便捷函数

    Args:
        config: 日志配置
        **kwargs: 以字典方式提供的配置项
    """
    logger_factory.initialize(config=config, config_dict=kwargs or None)


def set_global_log_level(level: str) -> None:
    """设置全局日志级别的便捷函数"""
    logger_factory.set_global_level(level)
