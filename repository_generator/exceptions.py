"""
生成器异常模块

定义仓库生成工具相关的异常类。配置错误与权限错误都会终止整次生成，
由命令行入口统一捕获并输出提示。
"""

from pathlib import Path
from typing import Optional, Union


class RepositoryGeneratorError(Exception):
    """生成器基础异常"""

    def __init__(self, message: str, error_code: Optional[int] = None):
        """
        初始化异常

        Args:
            message: 异常消息
            error_code: 错误代码
        """
        super().__init__(message)
        self.error_code = error_code


class ConfigurationError(RepositoryGeneratorError):
    """配置异常（目录缺失、配置无效等）"""

    def __init__(self, message: str, error_code: int = 400):
        super().__init__(message, error_code=error_code)


class ModelsDirectoryNotFoundError(ConfigurationError):
    """模型目录不存在"""

    def __init__(self, directory: Union[str, Path]):
        super().__init__(f"The models directory does not exist: {directory}", error_code=404)
        self.directory = str(directory)


class StubNotFoundError(ConfigurationError):
    """模板文件不存在"""

    def __init__(self, stub_name: str):
        super().__init__(f"Stub file does not exist: {stub_name}", error_code=404)
        self.stub_name = stub_name


class NamespaceOutsideRootError(ConfigurationError):
    """命名空间不在应用根命名空间之下，无法映射到目录"""

    def __init__(self, namespace: str, root_namespace: str):
        super().__init__(
            f"Namespace '{namespace}' is not under the application root namespace '{root_namespace}'"
        )
        self.namespace = namespace
        self.root_namespace = root_namespace


class DirectoryPermissionError(RepositoryGeneratorError, PermissionError):
    """目录不可写"""

    def __init__(self, directory: Union[str, Path]):
        message = f"Not writable directory, check permissions: {directory}"
        RepositoryGeneratorError.__init__(self, message, error_code=403)
        self.directory = str(directory)
