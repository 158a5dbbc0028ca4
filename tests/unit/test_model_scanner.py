"""
测试模型扫描器
"""

import pytest

from repository_generator.exceptions import ConfigurationError, ModelsDirectoryNotFoundError
from repository_generator.model_scanner import ModelScanner


class TestModelScanner:
    """测试模型扫描器"""

    def test_scan_sorted(self, tmp_path):
        """测试按文件名排序"""
        for name in ("Order", "User", "Address"):
            (tmp_path / f"{name}.php").write_text("<?php", encoding="utf-8")

        assert ModelScanner(tmp_path).scan() == ["Address", "Order", "User"]

    def test_only_php_files(self, tmp_path):
        """测试只识别PHP文件"""
        (tmp_path / "User.php").write_text("<?php", encoding="utf-8")
        (tmp_path / "README.md").write_text("", encoding="utf-8")
        (tmp_path / ".gitkeep").write_text("", encoding="utf-8")
        (tmp_path / "Legacy.php.bak").write_text("", encoding="utf-8")
        # macOS 生成的资源文件
        (tmp_path / "._User.php").write_text("", encoding="utf-8")
        (tmp_path / ".Hidden.php").write_text("", encoding="utf-8")

        assert ModelScanner(tmp_path).scan() == ["User"]

    def test_not_recursive(self, tmp_path):
        """测试不扫描子目录"""
        (tmp_path / "User.php").write_text("<?php", encoding="utf-8")
        nested = tmp_path / "Shop"
        nested.mkdir()
        (nested / "Product.php").write_text("<?php", encoding="utf-8")

        assert ModelScanner(tmp_path).scan() == ["User"]

    def test_directory_named_like_model_is_ignored(self, tmp_path):
        """测试忽略以.php结尾的目录"""
        (tmp_path / "Weird.php").mkdir()
        assert ModelScanner(tmp_path).scan() == []

    def test_empty_directory(self, tmp_path):
        """测试空目录"""
        assert ModelScanner(tmp_path).scan() == []

    def test_missing_directory(self, tmp_path):
        """测试目录不存在"""
        with pytest.raises(ModelsDirectoryNotFoundError) as exc_info:
            ModelScanner(tmp_path / "missing").scan()

        assert isinstance(exc_info.value, ConfigurationError)
        assert exc_info.value.error_code == 404
        assert "missing" in str(exc_info.value)

    def test_iter_model_files(self, tmp_path):
        """测试遍历模型文件"""
        path = tmp_path / "User.php"
        path.write_text("<?php", encoding="utf-8")
        assert list(ModelScanner(str(tmp_path)).iter_model_files()) == [path]
