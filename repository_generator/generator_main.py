"""
Repository类生成工具主程序

提供命令行接口：
- make-repositories: 根据模型生成仓库类，可选生成契约接口与策略类
- publish-repository-generator: 发布默认配置与基础构件
"""

import argparse
from pathlib import Path
from typing import List, Optional

from common.logger import logger, LoggerConfig, LogLevel, initialize_logging
from setting.config_loader import ConfigLoader
from setting.generator_settings import GeneratorSettings
from .exceptions import (
    ConfigurationError,
    DirectoryPermissionError,
    RepositoryGeneratorError,
)
from .generator import RepositoryGenerator
from .prompt import ConsolePrompt, PromptProvider, StaticPrompt
from .publisher import Publisher
from .types import RunConfiguration


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    解析命令行参数

    Returns:
        argparse.Namespace: 解析后的参数
    """
    parser = argparse.ArgumentParser(
        prog="make-repositories",
        description="Generating repositories from existing model files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
示例用法:
  %(prog)s                              # 只生成仓库类
  %(prog)s -c -p                        # 同时生成契约接口和策略类
  %(prog)s --rn App/Repositories/Admin  # 覆盖仓库类命名空间
  %(prog)s -c --force                   # 不询问，直接覆盖已存在的文件
        """
    )

    parser.add_argument(
        "--contracts", "-c",
        action="store_true",
        help="同时生成契约接口，仓库类将实现对应的契约"
    )
    parser.add_argument(
        "--policies", "-p",
        action="store_true",
        help="同时生成授权策略类"
    )

    # 命名空间覆盖
    parser.add_argument(
        "--models-namespace", "--mn",
        dest="models_namespace",
        help="模型所在的命名空间（如 App/Models/Shop）"
    )
    parser.add_argument(
        "--contracts-namespace", "--cn",
        dest="contracts_namespace",
        help="契约接口生成到的命名空间"
    )
    parser.add_argument(
        "--repositories-namespace", "--rn",
        dest="repositories_namespace",
        help="仓库类生成到的命名空间"
    )
    parser.add_argument(
        "--policies-namespace", "--pn",
        dest="policies_namespace",
        help="策略类生成到的命名空间"
    )

    _add_common_arguments(parser)

    answer_group = parser.add_mutually_exclusive_group()
    answer_group.add_argument(
        "--force", "-f",
        action="store_true",
        help="不询问，直接覆盖已存在的文件"
    )
    answer_group.add_argument(
        "--no-interaction", "-n",
        action="store_true",
        help="不询问，保留已存在的文件"
    )

    return parser.parse_args(argv)


def parse_publish_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """解析发布命令的参数"""
    parser = argparse.ArgumentParser(
        prog="publish-repository-generator",
        description="Publishing the generator configuration and base classes",
    )

    _add_common_arguments(parser)

    parser.add_argument(
        "--force", "-f",
        action="store_true",
        help="覆盖已存在的文件"
    )

    only_group = parser.add_mutually_exclusive_group()
    only_group.add_argument(
        "--config-only",
        action="store_true",
        help="只发布配置文件"
    )
    only_group.add_argument(
        "--base-only",
        action="store_true",
        help="只发布基础仓库类、契约接口与策略类"
    )

    return parser.parse_args(argv)


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--base-path",
        default=".",
        help="Laravel项目根目录 (默认: 当前目录)"
    )
    parser.add_argument(
        "--config",
        help="配置文件路径 (默认: config/repository_generator.yml)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="详细输出"
    )


def setup_logging(verbose: bool) -> None:
    """初始化命令行日志"""
    config = LoggerConfig.from_env()
    if verbose:
        config.level = LogLevel.DEBUG
    initialize_logging(config)


def create_run_configuration(args: argparse.Namespace,
                             settings: GeneratorSettings) -> RunConfiguration:
    """
    从命令行参数创建运行配置

    Args:
        args: 命令行参数
        settings: 已加载的配置

    Returns:
        RunConfiguration: 运行配置
    """
    return RunConfiguration(
        base_path=Path(args.base_path),
        settings=settings,
        with_contracts=getattr(args, "contracts", False),
        with_policies=getattr(args, "policies", False),
        models_namespace=getattr(args, "models_namespace", None),
        contracts_namespace=getattr(args, "contracts_namespace", None),
        repositories_namespace=getattr(args, "repositories_namespace", None),
        policies_namespace=getattr(args, "policies_namespace", None),
    )


def create_prompt(args: argparse.Namespace) -> PromptProvider:
    """根据参数选择覆盖确认方式"""
    if args.force:
        return StaticPrompt(True)
    if args.no_interaction:
        return StaticPrompt(False)
    return ConsolePrompt()


def main(argv: Optional[List[str]] = None) -> int:
    """主程序入口"""
    args = parse_arguments(argv)
    setup_logging(args.verbose)

    try:
        settings = ConfigLoader(base_path=args.base_path, config_path=args.config).settings
        run = create_run_configuration(args, settings)

        RepositoryGenerator(run, prompt=create_prompt(args)).generate()
        return 0

    except ConfigurationError as e:
        logger.error(str(e))
        return 1
    except DirectoryPermissionError as e:
        logger.error(str(e))
        return 1
    except RepositoryGeneratorError as e:
        logger.error(f"生成失败: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("用户中断操作")
        return 1


def publish_main(argv: Optional[List[str]] = None) -> int:
    """发布命令入口"""
    args = parse_publish_arguments(argv)
    setup_logging(args.verbose)

    try:
        settings = ConfigLoader(base_path=args.base_path, config_path=args.config).settings
        run = create_run_configuration(args, settings)

        Publisher(run, force=args.force).publish(
            config=not args.base_only,
            base=not args.config_only,
        )
        return 0

    except RepositoryGeneratorError as e:
        logger.error(str(e))
        return 1
    except KeyboardInterrupt:
        logger.info("用户中断操作")
        return 1


if __name__ == "__main__":
    exit(main())
