"""
common 模块

该模块提供了生成工具共用的基础设施（日志）。
"""

from .logger import logger, logger_factory

__all__ = [
    "logger",
    "logger_factory",
]
