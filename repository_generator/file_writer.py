"""
文件写入模块

负责输出目录的创建、可写性检查、已存在文件的收集，
以及覆盖策略的判定。覆盖判定是纯函数，交互确认通过注入的提示器完成。
"""

import os
from pathlib import Path
from typing import Iterable, Optional, Set, Union

from common.logger import logger
from .exceptions import DirectoryPermissionError
from .prompt import PromptProvider
from .types import GenerationDecision

OVERWRITE_QUESTION = "Do you want to overwrite the existing files? (Yes/No):"


def decide(target_exists: bool, overwrite: bool) -> GenerationDecision:
    """
    计算单个目标文件的生成决策

    Args:
        target_exists: 目标文件是否在已存在文件集合中
        overwrite: 本批次的覆盖标记

    Returns:
        GenerationDecision: 生成决策
    """
    if not target_exists:
        return GenerationDecision.CREATE
    return GenerationDecision.OVERWRITE if overwrite else GenerationDecision.SKIP


def resolve_overwrite(existing_files: Iterable[Path], prompt: PromptProvider) -> bool:
    """
    计算一个批次的覆盖标记

    已存在文件集合非空时才会询问，且每个批次只询问一次。
    """
    if not list(existing_files):
        return False
    return prompt.confirm(OVERWRITE_QUESTION)


class FileWriter:
    """文件写入器"""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def ensure_directory(self, path: Union[str, Path]) -> Path:
        """创建目录（含父目录），已存在时不做任何事"""
        path = Path(path)
        if not path.is_dir():
            path.mkdir(parents=True, exist_ok=True)
            logger.debug(f"创建目录: {path}")
        return path

    def check_writable(self, path: Union[str, Path]) -> None:
        """
        检查目录是否可写

        目录已存在时检查其本身，不存在时检查最近的已存在上级目录。

        Raises:
            DirectoryPermissionError: 目录不可写
        """
        path = Path(path)
        if path.exists():
            if not os.access(path, os.W_OK):
                raise DirectoryPermissionError(path)
            return

        parent = self._nearest_existing_parent(path)
        if parent is None or not os.access(parent, os.W_OK):
            raise DirectoryPermissionError(parent if parent is not None else path.parent)

    def _nearest_existing_parent(self, path: Path) -> Optional[Path]:
        for parent in path.parents:
            if parent.exists():
                return parent
        return None

    def existing_files(self, directory: Union[str, Path],
                       exclude: Optional[Union[str, Path]] = None,
                       pattern: str = "*.php") -> Set[Path]:
        """
        收集目录中已存在的文件

        Args:
            directory: 目录
            exclude: 需要排除的基础构件文件
            pattern: 文件匹配模式

        Returns:
            Set[Path]: 已存在文件集合
        """
        directory = Path(directory)
        if not directory.is_dir():
            return set()

        files = {p for p in directory.glob(pattern) if p.is_file()}
        if exclude is not None:
            files.discard(Path(exclude))
        return files

    def write(self, path: Union[str, Path], content: str) -> Path:
        """写入文件（覆盖）"""
        path = Path(path)
        with open(path, 'w', encoding=self.encoding, newline='') as f:
            f.write(content)
        return path
