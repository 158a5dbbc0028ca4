"""
common/logger 模块

该模块提供了基于loguru的日志系统，供代码生成工具使用：
- 控制台输出，按需开启文件日志
- 支持日志级别动态配置（--verbose 切换到DEBUG）
- 支持上下文绑定（如当前生成的构件类型）
- 延迟初始化，使用时自动创建

使用示例：
    # 命令行入口初始化（可选，也可以延迟初始化）
    from common.logger import initialize_logging
    initialize_logging(level="DEBUG")

    # 业务代码中使用
    from common.logger import logger
    logger.info("开始生成仓库类")
    logger.bind(kind="policy").info("已创建策略文件: UserPolicy")
"""

from typing import Optional

from .logger_config import LoggerConfig, LogLevel, RotationConfig
from .base_logger import BaseLogger
from .logger_factory import (
    LoggerFactory,
    logger_factory,
    get_logger,
    initialize_logging,
    set_global_log_level,
)

_logger: Optional[BaseLogger] = None


def _get_or_create_logger() -> BaseLogger:
    """获取或创建通用日志器"""
    global _logger
    if _logger is None or not logger_factory.initialized:
        _logger = logger_factory.get_logger("general")
    return _logger


class _LoggerProxy:
    """日志器代理类，实现延迟初始化"""

    def __getattr__(self, name):
        return getattr(_get_or_create_logger(), name)


# 全局日志对象（使用代理实现延迟初始化）
logger = _LoggerProxy()

__all__ = [
    'LoggerConfig',
    'LogLevel',
    'RotationConfig',
    'BaseLogger',
    'LoggerFactory',
    'logger_factory',
    'logger',
    'get_logger',
    'initialize_logging',
    'set_global_log_level',
]
