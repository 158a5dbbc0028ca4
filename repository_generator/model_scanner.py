"""
模型扫描器模块

扫描模型目录（不递归）下的 `*.php` 文件，文件名去掉扩展名即为模型名。
"""

from pathlib import Path
from typing import Iterator, List, Union

from common.logger import logger
from .exceptions import ModelsDirectoryNotFoundError

MODEL_FILE_PATTERN = "*.php"


class ModelScanner:
    """
    模型扫描器

    只扫描目录的直接子文件（不含隐藏文件），结果按文件名排序。
    """

    def __init__(self, directory: Union[str, Path]):
        """
        初始化扫描器

        Args:
            directory: 模型目录
        """
        self.directory = Path(directory)

    def iter_model_files(self) -> Iterator[Path]:
        """
        遍历模型文件

        Raises:
            ModelsDirectoryNotFoundError: 模型目录不存在
        """
        if not self.directory.is_dir():
            raise ModelsDirectoryNotFoundError(self.directory)

        for path in sorted(self.directory.glob(MODEL_FILE_PATTERN), key=lambda p: p.name):
            # 与PHP glob一致，跳过隐藏文件（如 ._User.php）
            if path.is_file() and not path.name.startswith("."):
                yield path

    def iter_models(self) -> Iterator[str]:
        """遍历模型名"""
        for path in self.iter_model_files():
            yield path.stem

    def scan(self) -> List[str]:
        """
        扫描模型名

        Returns:
            List[str]: 模型名列表，目录为空时返回空列表
        """
        models = list(self.iter_models())
        logger.debug(f"在目录 {self.directory} 中找到 {len(models)} 个模型: {', '.join(models)}")
        return models
