"""
生成器数据类型模块

定义一次生成运行中流转的数据结构：构件类型、解析后的位置、
占位符集合、生成决策、生成结果以及不可变的运行配置。
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple

from setting.generator_settings import GeneratorSettings


class ArtifactKind(Enum):
    """构件类型"""
    CONTRACT = "contracts"
    POLICY = "policies"
    REPOSITORY = "repositories"

    @property
    def label(self) -> str:
        """单数形式的名称，用于日志输出"""
        return {
            ArtifactKind.CONTRACT: "contract",
            ArtifactKind.POLICY: "policy",
            ArtifactKind.REPOSITORY: "repository",
        }[self]

    @property
    def base_file_setting(self) -> str:
        """该类构件的基础文件配置项名"""
        return f"base_{self.label}_file"


class GenerationDecision(Enum):
    """单个目标文件的生成决策"""
    CREATE = "created"
    OVERWRITE = "overridden"
    SKIP = "skipped"

    @property
    def writes(self) -> bool:
        return self is not GenerationDecision.SKIP


@dataclass(frozen=True)
class ResolvedLocation:
    """解析后的命名空间与目录"""
    namespace: str
    directory: Path


@dataclass(frozen=True)
class PlaceholderSet:
    """
    有序的 (占位符, 替换值) 集合

    顺序即替换顺序，与模板引擎的逐个字面替换一一对应。
    """
    pairs: Tuple[Tuple[str, str], ...]

    @classmethod
    def of(cls, *pairs: Tuple[str, str]) -> 'PlaceholderSet':
        return cls(tuple((token, value or "") for token, value in pairs))

    @property
    def tokens(self) -> List[str]:
        return [token for token, _ in self.pairs]

    @property
    def values(self) -> List[str]:
        return [value for _, value in self.pairs]

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)


@dataclass(frozen=True)
class FileResult:
    """单个文件的生成结果"""
    kind: ArtifactKind
    model: str
    class_name: str
    path: Path
    decision: GenerationDecision


@dataclass
class GenerationReport:
    """一次生成运行的结果汇总"""
    models: List[str] = field(default_factory=list)
    results: List[FileResult] = field(default_factory=list)
    no_models: bool = False

    def add(self, result: FileResult) -> None:
        self.results.append(result)

    def for_kind(self, kind: ArtifactKind) -> List[FileResult]:
        return [r for r in self.results if r.kind is kind]

    def _with_decision(self, decision: GenerationDecision) -> List[FileResult]:
        return [r for r in self.results if r.decision is decision]

    @property
    def created(self) -> List[FileResult]:
        return self._with_decision(GenerationDecision.CREATE)

    @property
    def overridden(self) -> List[FileResult]:
        return self._with_decision(GenerationDecision.OVERWRITE)

    @property
    def skipped(self) -> List[FileResult]:
        return self._with_decision(GenerationDecision.SKIP)

    @property
    def written(self) -> List[FileResult]:
        return [r for r in self.results if r.decision.writes]


@dataclass(frozen=True)
class RunConfiguration:
    """
    一次生成运行的不可变配置

    在命令行入口处构建一次，之后按值传递给各个生成步骤。
    命名空间覆盖为None时使用配置文件中的默认值。
    """
    base_path: Path
    settings: GeneratorSettings
    with_contracts: bool = False
    with_policies: bool = False
    models_namespace: Optional[str] = None
    contracts_namespace: Optional[str] = None
    repositories_namespace: Optional[str] = None
    policies_namespace: Optional[str] = None

    def override_for(self, kind: ArtifactKind) -> Optional[str]:
        """获取指定构件类型的命名空间覆盖"""
        return {
            ArtifactKind.CONTRACT: self.contracts_namespace,
            ArtifactKind.POLICY: self.policies_namespace,
            ArtifactKind.REPOSITORY: self.repositories_namespace,
        }[kind]

    @property
    def requested_kinds(self) -> Sequence[ArtifactKind]:
        """按生成顺序排列的本次需要生成的构件类型"""
        kinds = []
        if self.with_contracts:
            kinds.append(ArtifactKind.CONTRACT)
        if self.with_policies:
            kinds.append(ArtifactKind.POLICY)
        kinds.append(ArtifactKind.REPOSITORY)
        return tuple(kinds)
