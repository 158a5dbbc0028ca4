"""
发布模块

将默认配置文件以及基础构件（BaseRepository、RepositoryInterface、BasePolicy）
发布到项目中。生成的仓库类、契约与策略都继承这些基础构件。
已存在的文件默认保留，force 为真时覆盖。
"""

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from common.logger import logger
from setting.generator_settings import DEFAULT_CONFIG_PATH, PROJECT_CONFIG_PATH
from .file_writer import FileWriter, decide
from .path_resolver import PathResolver, split_class_name
from .stub_store import StubStore
from .template_engine import placeholder, render
from .types import ArtifactKind, GenerationDecision, PlaceholderSet, RunConfiguration

# 基础构件模板名称
BASE_STUBS = {
    ArtifactKind.REPOSITORY: "BaseRepository",
    ArtifactKind.CONTRACT: "RepositoryInterface",
    ArtifactKind.POLICY: "BasePolicy",
}


@dataclass(frozen=True)
class PublishedFile:
    """发布结果"""
    name: str
    path: Path
    decision: GenerationDecision


class Publisher:
    """
    配置与基础构件发布器
    """

    def __init__(self, run: RunConfiguration, force: bool = False,
                 stub_store: Optional[StubStore] = None,
                 writer: Optional[FileWriter] = None):
        """
        初始化发布器

        Args:
            run: 运行配置（只使用配置中的默认目录，不使用命名空间覆盖）
            force: 是否覆盖已存在的文件
            stub_store: 模板仓库
            writer: 文件写入器
        """
        self.run = run
        self.settings = run.settings
        self.force = force
        self.resolver = PathResolver(run)
        self.stub_store = stub_store or StubStore(
            custom_dir=self.resolver.absolute(self.settings.stubs_directory)
            if self.settings.stubs_directory else None
        )
        self.writer = writer or FileWriter()

    def publish(self, config: bool = True, base: bool = True) -> List[PublishedFile]:
        """
        发布文件

        Args:
            config: 是否发布配置文件
            base: 是否发布基础构件

        Returns:
            List[PublishedFile]: 发布结果
        """
        targets = []
        if config:
            targets.append(self.config_target())
        if base:
            targets.extend(self.resolver.base_file(kind) for kind in BASE_STUBS)

        # 先检查全部目标目录，避免只发布了一部分
        for target in targets:
            self.writer.check_writable(target.parent)
        if base:
            for stub in BASE_STUBS.values():
                self.stub_store.get(stub)

        results = []
        if config:
            results.append(self.publish_config())
        if base:
            for kind in BASE_STUBS:
                results.append(self.publish_base(kind))
        return results

    def config_target(self) -> Path:
        return self.resolver.absolute(PROJECT_CONFIG_PATH)

    def publish_config(self) -> PublishedFile:
        """发布默认配置文件"""
        target = self.config_target()
        decision = decide(target.exists(), self.force)
        if decision.writes:
            self.writer.ensure_directory(target.parent)
            shutil.copyfile(DEFAULT_CONFIG_PATH, target)
        self._log(decision, "config", target)
        return PublishedFile(name=target.name, path=target, decision=decision)

    def publish_base(self, kind: ArtifactKind) -> PublishedFile:
        """发布一个基础构件"""
        target = self.resolver.base_file(kind)
        class_name = self.resolver.base_class_name(kind)
        decision = decide(target.exists(), self.force)

        if decision.writes:
            stub = self.stub_store.get(BASE_STUBS[kind])
            self.writer.ensure_directory(target.parent)
            self.writer.write(target, render(stub, self.base_placeholders(kind)))

        self._log(decision, f"base {kind.label}", target)
        return PublishedFile(name=class_name, path=target, decision=decision)

    def base_placeholders(self, kind: ArtifactKind) -> PlaceholderSet:
        """基础构件的占位符集合"""
        fqcn = {
            ArtifactKind.REPOSITORY: self.settings.base_repository_class,
            ArtifactKind.CONTRACT: self.settings.base_contract_interface,
            ArtifactKind.POLICY: self.settings.base_policy_class,
        }[kind]
        namespace, _ = split_class_name(fqcn)
        pairs = [
            (placeholder("namespace"), namespace),
            (placeholder("class"), self.resolver.base_class_name(kind)),
        ]

        if kind is ArtifactKind.REPOSITORY:
            contract_fqcn = self.settings.base_contract_interface
            contract_namespace, contract_name = split_class_name(contract_fqcn)
            use = "" if contract_namespace == namespace else f"use {contract_fqcn};"
            pairs.append((placeholder("use_statement_for_contract"), use))
            pairs.append((placeholder("base_contract"), contract_name))
        elif kind is ArtifactKind.POLICY:
            user_namespace, user_name = split_class_name(self.settings.user_class)
            use = "" if user_namespace == namespace else f"use {self.settings.user_class};"
            pairs.append((placeholder("use_statement_for_user_model"), use))
            pairs.append((placeholder("user"), user_name))

        return PlaceholderSet.of(*pairs)

    def _log(self, decision: GenerationDecision, label: str, target: Path) -> None:
        if decision.writes:
            logger.info(f"{decision.value.capitalize()} {label} file: {target}")
        else:
            logger.info(f"Skipped existing {label} file: {target}")
