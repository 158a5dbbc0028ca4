"""
Repository类生成器模块

根据扫描到的模型，按顺序生成契约接口、策略类和仓库类：
扫描模型 -> 权限预检 -> [契约] -> [策略] -> 仓库。

每类构件一个批次：创建目录、收集已存在文件（排除基础构件文件）、
必要时询问一次是否覆盖，然后逐个模型渲染模板并写入或跳过。
"""

from pathlib import Path
from typing import Callable, Dict, List, Optional

from common.logger import logger
from .file_writer import FileWriter, decide, resolve_overwrite
from .model_scanner import ModelScanner
from .path_resolver import PathResolver, split_class_name
from .prompt import ConsolePrompt, PromptProvider
from .stub_store import StubStore
from .template_engine import placeholder, render
from .types import (
    ArtifactKind,
    FileResult,
    GenerationDecision,
    GenerationReport,
    PlaceholderSet,
    RunConfiguration,
)

# 模板名称
STUB_CONTRACT = "Contract"
STUB_POLICY = "Policy"
STUB_REPOSITORY = "Repository"
STUB_REPOSITORY_ELOQUENT = "RepositoryEloquent"


def use_statement(fqcn: str) -> str:
    """PHP use 语句"""
    return f"use {fqcn};"


class RepositoryGenerator:
    """
    Repository类生成器

    一次运行的全部输入都来自不可变的 RunConfiguration，
    覆盖标记只在单个批次内有效。
    """

    def __init__(self, run: RunConfiguration,
                 prompt: Optional[PromptProvider] = None,
                 stub_store: Optional[StubStore] = None,
                 writer: Optional[FileWriter] = None,
                 resolver: Optional[PathResolver] = None):
        """
        初始化生成器

        Args:
            run: 本次运行配置
            prompt: 覆盖确认提示器，默认从控制台读取
            stub_store: 模板仓库
            writer: 文件写入器
            resolver: 路径解析器
        """
        self.run = run
        self.settings = run.settings
        self.prompt = prompt or ConsolePrompt()
        self.resolver = resolver or PathResolver(run)
        self.stub_store = stub_store or StubStore(
            custom_dir=self.resolver.absolute(self.settings.stubs_directory)
            if self.settings.stubs_directory else None
        )
        self.writer = writer or FileWriter()

        self._placeholder_builders: Dict[ArtifactKind, Callable[[str], PlaceholderSet]] = {
            ArtifactKind.CONTRACT: self.contract_placeholders,
            ArtifactKind.POLICY: self.policy_placeholders,
            ArtifactKind.REPOSITORY: self.repository_placeholders,
        }

    # ------------------------------------------------------------------
    # 运行流程
    # ------------------------------------------------------------------

    def generate(self) -> GenerationReport:
        """
        执行一次完整的生成

        Returns:
            GenerationReport: 生成结果

        Raises:
            ConfigurationError: 目录、模板或命名空间配置错误
            DirectoryPermissionError: 输出目录不可写
        """
        report = GenerationReport()

        models_dir = self.resolver.models().directory
        report.models = ModelScanner(models_dir).scan()

        if not report.models:
            report.no_models = True
            logger.warning("Repository generator has stopped!")
            logger.warning(f"There are no model files to use in directory: \"{models_dir}\"")
            return report

        logger.info(f"找到 {len(report.models)} 个模型: {', '.join(report.models)}")

        kinds = self.run.requested_kinds
        self.check_permissions(kinds)

        # 模板缺失同样要在写入任何文件之前发现
        for kind in kinds:
            self.stub_store.get(self.stub_name(kind))

        for kind in kinds:
            self.generate_batch(kind, report.models, report)

        logger.info(
            f"生成完成: 新建 {len(report.created)} 个, 覆盖 {len(report.overridden)} 个, "
            f"跳过 {len(report.skipped)} 个"
        )
        return report

    def check_permissions(self, kinds) -> None:
        """在写入任何文件之前检查所有输出目录的权限"""
        for kind in kinds:
            self.writer.check_writable(self.resolver.directory(kind))

    def generate_batch(self, kind: ArtifactKind, models: List[str],
                       report: Optional[GenerationReport] = None) -> List[FileResult]:
        """
        生成一类构件

        Args:
            kind: 构件类型
            models: 模型名列表
            report: 结果汇总，可为空

        Returns:
            List[FileResult]: 本批次的生成结果
        """
        kind_logger = logger.bind(kind=kind.label)
        directory = self.writer.ensure_directory(self.resolver.directory(kind))

        base_file = directory / self.resolver.base_file_name(kind)
        existing = self.writer.existing_files(directory, exclude=base_file)

        # 覆盖标记只在本批次内有效
        overwrite = resolve_overwrite(existing, self.prompt)

        stub = self.stub_store.get(self.stub_name(kind))
        build_placeholders = self._placeholder_builders[kind]

        results = []
        for model in models:
            class_name = self.class_name(kind, model)
            target = self.resolver.target_path(kind, class_name)
            if target == base_file:
                # 与基础构件同名，不能覆盖基础构件
                decision = GenerationDecision.SKIP
                kind_logger.warning(f"Skipped {kind.label} file: {class_name}, the name is reserved for the base file")
            else:
                decision = decide(target in existing, overwrite)
                if not decision.writes:
                    kind_logger.debug(f"Skipped {kind.label} file: {class_name}")

            if decision.writes:
                content = render(stub, build_placeholders(model))
                self.writer.write(target, content)
                kind_logger.info(f"{decision.value.capitalize()} {kind.label} file: {class_name}")

            result = FileResult(kind=kind, model=model, class_name=class_name,
                                path=target, decision=decision)
            results.append(result)
            if report is not None:
                report.add(result)

        return results

    # ------------------------------------------------------------------
    # 命名
    # ------------------------------------------------------------------

    def stub_name(self, kind: ArtifactKind) -> str:
        if kind is ArtifactKind.CONTRACT:
            return STUB_CONTRACT
        if kind is ArtifactKind.POLICY:
            return STUB_POLICY
        return STUB_REPOSITORY_ELOQUENT if self.run.with_contracts else STUB_REPOSITORY

    def class_name(self, kind: ArtifactKind, model: str) -> str:
        if kind is ArtifactKind.CONTRACT:
            return self.contract_name(model)
        if kind is ArtifactKind.POLICY:
            return f"{model}Policy"
        return f"{model}RepositoryEloquent" if self.run.with_contracts else f"{model}Repository"

    def contract_name(self, model: str) -> str:
        return f"{model}Repository"

    def _base_use_statement(self, kind: ArtifactKind, base_fqcn: str) -> str:
        """基础构件的 use 语句，输出目录与基础构件目录相同时省略"""
        if self.resolver.shares_base_directory(kind):
            return ""
        return use_statement(base_fqcn)

    # ------------------------------------------------------------------
    # 占位符
    # ------------------------------------------------------------------

    def repository_placeholders(self, model: str) -> PlaceholderSet:
        """仓库类的占位符集合"""
        pairs = [
            (placeholder("use_statement_for_repository"),
             self._base_use_statement(ArtifactKind.REPOSITORY, self.settings.base_repository_class)),
            (placeholder("repositories_namespace"), self.resolver.namespace(ArtifactKind.REPOSITORY)),
            (placeholder("base_repository"), self.resolver.base_class_name(ArtifactKind.REPOSITORY)),
            (placeholder("repository"), self.class_name(ArtifactKind.REPOSITORY, model)),
            (placeholder("models_namespace"), self.resolver.models().namespace),
            (placeholder("model"), model),
        ]

        if self.run.with_contracts:
            contract_use, implementation = "", ""
            # 只有契约文件已经存在时才实现该契约
            contract = self.contract_name(model)
            if self.resolver.target_path(ArtifactKind.CONTRACT, contract).is_file():
                namespace = self.resolver.namespace(ArtifactKind.CONTRACT)
                contract_use = use_statement(f"{namespace}\\{contract}")
                implementation = f" implements {contract}"
            pairs.append((placeholder("use_statement_for_contract"), contract_use))
            pairs.append((placeholder("contract_implementation"), implementation))

        return PlaceholderSet.of(*pairs)

    def contract_placeholders(self, model: str) -> PlaceholderSet:
        """契约接口的占位符集合"""
        return PlaceholderSet.of(
            (placeholder("use_statement_for_contract"),
             self._base_use_statement(ArtifactKind.CONTRACT, self.settings.base_contract_interface)),
            (placeholder("contracts_namespace"), self.resolver.namespace(ArtifactKind.CONTRACT)),
            (placeholder("base_contract"), self.resolver.base_class_name(ArtifactKind.CONTRACT)),
            (placeholder("contract"), self.contract_name(model)),
        )

    def policy_placeholders(self, model: str) -> PlaceholderSet:
        """策略类的占位符集合"""
        user_class = self.settings.user_class
        use_user = use_statement(user_class) if self.resolver.class_exists(user_class) else ""
        _, user_name = split_class_name(user_class)

        return PlaceholderSet.of(
            (placeholder("use_statement_for_user_model"), use_user),
            (placeholder("user"), user_name),
            (placeholder("use_statement_for_base_policy"),
             self._base_use_statement(ArtifactKind.POLICY, self.settings.base_policy_class)),
            (placeholder("policies_namespace"), self.resolver.namespace(ArtifactKind.POLICY)),
            (placeholder("base_policy"), self.resolver.base_class_name(ArtifactKind.POLICY)),
            (placeholder("policy"), self.class_name(ArtifactKind.POLICY, model)),
            (placeholder("models_namespace"), self.resolver.models().namespace),
            (placeholder("modelVariable"), model.lower()),
            (placeholder("model"), model),
        )


def generate(run: RunConfiguration, prompt: Optional[PromptProvider] = None) -> GenerationReport:
    """执行一次生成的便捷函数"""
    return RepositoryGenerator(run, prompt=prompt).generate()
