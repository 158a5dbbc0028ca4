"""
模板仓库模块

按名称查找 `<name>.stub` 模板文本。项目内自定义模板目录优先，
其次使用随包发布的内置模板。
"""

from pathlib import Path
from typing import Dict, List, Optional, Union

from common.logger import logger
from .exceptions import StubNotFoundError

# 内置模板目录
PACKAGE_STUBS_DIR = Path(__file__).parent / "stubs"

STUB_SUFFIX = ".stub"


class StubStore:
    """
    模板仓库

    纯查找：给定模板名称返回模板文本，读取结果按名称缓存。
    """

    def __init__(self, custom_dir: Union[str, Path, None] = None,
                 package_dir: Union[str, Path] = PACKAGE_STUBS_DIR):
        """
        初始化模板仓库

        Args:
            custom_dir: 自定义模板目录，可为空
            package_dir: 内置模板目录
        """
        self.custom_dir = Path(custom_dir) if custom_dir else None
        self.package_dir = Path(package_dir)
        self._cache: Dict[str, str] = {}

    def search_dirs(self) -> List[Path]:
        """按优先级排列的模板目录"""
        dirs = [self.package_dir]
        if self.custom_dir is not None:
            dirs.insert(0, self.custom_dir)
        return dirs

    def locate(self, name: str) -> Optional[Path]:
        """定位模板文件，找不到时返回None"""
        for directory in self.search_dirs():
            candidate = directory / f"{name}{STUB_SUFFIX}"
            if candidate.is_file():
                return candidate
        return None

    def has(self, name: str) -> bool:
        return name in self._cache or self.locate(name) is not None

    def get(self, name: str) -> str:
        """
        获取模板文本

        Args:
            name: 模板名称（不含扩展名），如 Repository

        Returns:
            str: 模板文本

        Raises:
            StubNotFoundError: 模板不存在
        """
        if name in self._cache:
            return self._cache[name]

        path = self.locate(name)
        if path is None:
            raise StubNotFoundError(name)

        logger.debug(f"读取模板: {path}")
        text = path.read_text(encoding="utf-8")
        self._cache[name] = text
        return text
