"""
路径解析模块

根据配置以及本次运行的命名空间覆盖，计算各类构件的命名空间与输出目录。
命名空间覆盖只接受应用根命名空间（默认 App）之下的值，
其余部分按段映射到应用根目录下的子目录。
"""

import re
from pathlib import Path
from typing import Callable, Dict, Optional, Union

from common.logger import logger
from .exceptions import ConfigurationError, NamespaceOutsideRootError
from .types import ArtifactKind, ResolvedLocation, RunConfiguration

NAMESPACE_SEPARATOR = "\\"

# 命名空间覆盖中允许的段分隔符
_SEGMENT_SPLIT = re.compile(r"[\\/.]+")

PHP_SUFFIX = ".php"


def normalize_namespace(value: str) -> str:
    """
    规范化命名空间覆盖

    `app/http/repositories`、`App.Http.Repositories` 都会变成
    `App\\Http\\Repositories`：每段首字母大写，其余字符保持不变。
    """
    segments = [s for s in _SEGMENT_SPLIT.split(value.strip()) if s]
    if not segments:
        raise ConfigurationError(f"Invalid namespace: '{value}'")
    return NAMESPACE_SEPARATOR.join(s[:1].upper() + s[1:] for s in segments)


def split_class_name(fqcn: str) -> tuple:
    """拆分完整类名为 (命名空间, 类名)"""
    namespace, _, name = fqcn.strip(NAMESPACE_SEPARATOR).rpartition(NAMESPACE_SEPARATOR)
    return namespace, name


def namespace_to_directory(namespace: str, root_namespace: str,
                           app_directory: Path) -> Optional[Path]:
    """
    将根命名空间之下的命名空间映射为目录

    Returns:
        Optional[Path]: 映射后的目录，不在根命名空间下时返回None
    """
    segments = [s for s in namespace.split(NAMESPACE_SEPARATOR) if s]
    if not segments or segments[0].lower() != root_namespace.lower():
        return None
    return app_directory.joinpath(*segments[1:])


class PathResolver:
    """
    路径解析器

    同一实例内对同一构件类型的解析结果会被缓存，保证一次运行内幂等。
    """

    def __init__(self, run: RunConfiguration):
        """
        初始化路径解析器

        Args:
            run: 本次运行配置
        """
        self.run = run
        self.settings = run.settings
        self.base_path = Path(run.base_path)
        self._cache: Dict[object, ResolvedLocation] = {}

        settings = self.settings
        self._resolvers: Dict[ArtifactKind, Callable[[], ResolvedLocation]] = {
            ArtifactKind.CONTRACT: lambda: self._resolve(
                settings.contracts_namespace, settings.contracts_directory, run.contracts_namespace),
            ArtifactKind.POLICY: lambda: self._resolve(
                settings.policies_namespace, settings.policies_directory, run.policies_namespace),
            ArtifactKind.REPOSITORY: lambda: self._resolve(
                settings.repositories_namespace, settings.repositories_directory, run.repositories_namespace),
        }
        self._default_directories: Dict[ArtifactKind, str] = {
            ArtifactKind.CONTRACT: settings.contracts_directory,
            ArtifactKind.POLICY: settings.policies_directory,
            ArtifactKind.REPOSITORY: settings.repositories_directory,
        }
        self._base_files: Dict[ArtifactKind, str] = {
            ArtifactKind.CONTRACT: settings.base_contract_file,
            ArtifactKind.POLICY: settings.base_policy_file,
            ArtifactKind.REPOSITORY: settings.base_repository_file,
        }

    @property
    def app_directory(self) -> Path:
        return self.absolute(self.settings.app_directory)

    def absolute(self, path: Union[str, Path]) -> Path:
        """相对路径按项目根目录展开"""
        path = Path(path)
        return path if path.is_absolute() else self.base_path / path

    def _resolve(self, namespace: str, directory: str, override: Optional[str]) -> ResolvedLocation:
        if override is None:
            return ResolvedLocation(namespace=namespace, directory=self.absolute(directory))

        normalized = normalize_namespace(override)
        mapped = namespace_to_directory(normalized, self.settings.root_namespace, self.app_directory)
        if mapped is None:
            raise NamespaceOutsideRootError(normalized, self.settings.root_namespace)

        logger.debug(f"命名空间覆盖: {override} -> {normalized} ({mapped})")
        return ResolvedLocation(namespace=normalized, directory=mapped)

    def models(self) -> ResolvedLocation:
        """模型的命名空间与目录"""
        if "models" not in self._cache:
            self._cache["models"] = self._resolve(
                self.settings.models_namespace,
                self.settings.models_directory,
                self.run.models_namespace,
            )
        return self._cache["models"]

    def location(self, kind: ArtifactKind) -> ResolvedLocation:
        """指定构件类型的命名空间与目录"""
        if kind not in self._cache:
            self._cache[kind] = self._resolvers[kind]()
        return self._cache[kind]

    def namespace(self, kind: ArtifactKind) -> str:
        return self.location(kind).namespace

    def directory(self, kind: ArtifactKind) -> Path:
        return self.location(kind).directory

    def target_path(self, kind: ArtifactKind, class_name: str) -> Path:
        """构件类对应的输出文件路径"""
        return self.directory(kind) / f"{class_name}{PHP_SUFFIX}"

    def default_directory(self, kind: ArtifactKind) -> Path:
        """配置文件中的默认目录（忽略命名空间覆盖）"""
        return self.absolute(self._default_directories[kind])

    def base_file_name(self, kind: ArtifactKind) -> str:
        return self._base_files[kind]

    def base_class_name(self, kind: ArtifactKind) -> str:
        """基础构件的类名（基础文件名去掉扩展名）"""
        name = self.base_file_name(kind)
        return name[:-len(PHP_SUFFIX)] if name.endswith(PHP_SUFFIX) else name

    def base_file(self, kind: ArtifactKind) -> Path:
        """基础构件文件的位置"""
        return self.default_directory(kind) / self.base_file_name(kind)

    def shares_base_directory(self, kind: ArtifactKind) -> bool:
        """输出目录是否与基础构件所在目录相同"""
        return self.directory(kind).resolve() == self.base_file(kind).parent.resolve()

    def class_path(self, fqcn: str) -> Optional[Path]:
        """将根命名空间下的完整类名映射为PHP文件路径"""
        namespace, name = split_class_name(fqcn)
        if not name:
            return None
        directory = namespace_to_directory(namespace, self.settings.root_namespace, self.app_directory)
        if directory is None:
            return None
        return directory / f"{name}{PHP_SUFFIX}"

    def class_exists(self, fqcn: str) -> bool:
        """类是否可在当前项目中找到"""
        path = self.class_path(fqcn)
        return path is not None and path.is_file()
