"""
repository_generator 模块

Laravel 仓库类生成工具，提供以下功能：
- 扫描模型目录下的模型文件
- 根据模板生成仓库类（Repository / RepositoryEloquent）
- 可选生成契约接口（Contract）和授权策略类（Policy）
- 支持按次覆盖命名空间，已存在文件每批次确认一次是否覆盖
- 发布默认配置和基础构件
"""

from .exceptions import (
    RepositoryGeneratorError,
    ConfigurationError,
    ModelsDirectoryNotFoundError,
    StubNotFoundError,
    NamespaceOutsideRootError,
    DirectoryPermissionError,
)
from .types import (
    ArtifactKind,
    FileResult,
    GenerationDecision,
    GenerationReport,
    PlaceholderSet,
    ResolvedLocation,
    RunConfiguration,
)
from .stub_store import StubStore
from .template_engine import substitute, render
from .path_resolver import PathResolver, normalize_namespace
from .model_scanner import ModelScanner
from .prompt import PromptProvider, ConsolePrompt, StaticPrompt
from .file_writer import FileWriter, decide, resolve_overwrite
from .generator import RepositoryGenerator, generate

__all__ = [
    'RepositoryGeneratorError',
    'ConfigurationError',
    'ModelsDirectoryNotFoundError',
    'StubNotFoundError',
    'NamespaceOutsideRootError',
    'DirectoryPermissionError',
    'ArtifactKind',
    'FileResult',
    'GenerationDecision',
    'GenerationReport',
    'PlaceholderSet',
    'ResolvedLocation',
    'RunConfiguration',
    'StubStore',
    'substitute',
    'render',
    'PathResolver',
    'normalize_namespace',
    'ModelScanner',
    'PromptProvider',
    'ConsolePrompt',
    'StaticPrompt',
    'FileWriter',
    'decide',
    'resolve_overwrite',
    'RepositoryGenerator',
    'generate',
]
