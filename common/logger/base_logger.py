"""
基础日志模块

该模块提供基础日志类，封装loguru功能，提供统一的日志接口
和上下文信息绑定。处理器（sink）的安装由日志工厂统一负责，
BaseLogger本身只持有绑定了上下文的loguru日志对象。
"""

from typing import Any, Dict, Optional

from loguru import logger as loguru_logger

from .logger_config import LoggerConfig, LogLevel


class BaseLogger:
    """
    基础日志类

    封装loguru功能，提供统一的日志接口、上下文信息管理。
    """

    def __init__(self, name: str, config: LoggerConfig,
                 context: Optional[Dict[str, Any]] = None):
        """
        初始化基础日志器

        Args:
            name: 日志器名称
            config: 日志配置对象
            context: 初始上下文信息
        """
        self.name = name
        self.config = config
        self._context: Dict[str, Any] = {
            'tool': config.tool_name,
            'logger_name': name,
            # 当前处理的构件类型，未绑定时为 -
            'kind': '-',
        }
        if context:
            self._context.update(context)
        self._logger = loguru_logger.bind(**self._context)

    @property
    def context(self) -> Dict[str, Any]:
        """当前绑定的上下文信息（副本）"""
        return dict(self._context)

    def bind(self, **kwargs) -> 'BaseLogger':
        """绑定上下文信息，返回新的日志器"""
        return BaseLogger(self.name, self.config, {**self._context, **kwargs})

    def with_context(self, **kwargs) -> 'BaseLogger':
        """添加上下文信息（别名方法）"""
        return self.bind(**kwargs)

    def is_enabled_for(self, level: str) -> bool:
        """判断指定级别是否会被输出"""
        current = loguru_logger.level(self.config.level.value).no
        return loguru_logger.level(level.upper()).no >= current

    def _log(self, level: str, message: str, *args, **kwargs) -> None:
        """内部日志记录方法"""
        # depth=2 让loguru记录调用方而不是本包装类的位置
        self._logger.opt(depth=2).log(level, message, *args, **kwargs)

    def trace(self, message: str, *args, **kwargs) -> None:
        self._log(LogLevel.TRACE.value, message, *args, **kwargs)

    def debug(self, message: str, *args, **kwargs) -> None:
        self._log(LogLevel.DEBUG.value, message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs) -> None:
        self._log(LogLevel.INFO.value, message, *args, **kwargs)

    def success(self, message: str, *args, **kwargs) -> None:
        self._log(LogLevel.SUCCESS.value, message, *args, **kwargs)

    def warning(self, message: str, *args, **kwargs) -> None:
        self._log(LogLevel.WARNING.value, message, *args, **kwargs)

    def error(self, message: str, *args, **kwargs) -> None:
        self._log(LogLevel.ERROR.value, message, *args, **kwargs)

    def critical(self, message: str, *args, **kwargs) -> None:
        self._log(LogLevel.CRITICAL.value, message, *args, **kwargs)

    def __repr__(self) -> str:
        return f"BaseLogger(name={self.name!r}, level={self.config.level.value})"
