"""
生成器配置模型

使用pydantic对合并后的配置做校验，校验通过后配置对象不可修改。
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

# 内置默认配置
DEFAULT_CONFIG_PATH = Path(__file__).with_name('repository_generator.yml')

# 项目内发布后的配置位置（相对项目根目录）
PROJECT_CONFIG_PATH = Path('config') / 'repository_generator.yml'


class GeneratorSettings(BaseModel):
    """
    仓库生成器配置

    目录均相对于项目根目录（除非是绝对路径）；
    命名空间使用PHP的反斜杠分隔形式。
    """

    model_config = ConfigDict(frozen=True, extra='forbid')

    # 应用根目录与根命名空间（命名空间覆盖只能落在该根之下）
    app_directory: str = "app"
    root_namespace: str = "App"

    # 策略类中引用的用户模型
    user_class: str = "App\\Models\\User"

    # 默认目录结构
    models_directory: str = "app/Models"
    contracts_directory: str = "app/Contracts"
    repositories_directory: str = "app/Repositories"
    policies_directory: str = "app/Policies"

    # 默认命名空间
    models_namespace: str = "App\\Models"
    contracts_namespace: str = "App\\Contracts"
    repositories_namespace: str = "App\\Repositories"
    policies_namespace: str = "App\\Policies"

    # 基础构件：只写文件名，目录取对应的 *_directory 配置
    base_repository_file: str = "BaseRepository.php"
    base_repository_class: str = "App\\Repositories\\BaseRepository"
    base_contract_file: str = "RepositoryInterface.php"
    base_contract_interface: str = "App\\Contracts\\RepositoryInterface"
    base_policy_file: str = "BasePolicy.php"
    base_policy_class: str = "App\\Policies\\BasePolicy"

    # 项目内自定义模板目录，优先于内置模板
    stubs_directory: Optional[str] = None

    @field_validator(
        'root_namespace', 'user_class',
        'models_namespace', 'contracts_namespace', 'repositories_namespace', 'policies_namespace',
        'base_repository_class', 'base_contract_interface', 'base_policy_class',
    )
    @classmethod
    def _strip_namespace(cls, value: str) -> str:
        value = value.strip().strip('\\')
        if not value:
            raise ValueError("namespace must not be empty")
        return value

    @field_validator('base_repository_file', 'base_contract_file', 'base_policy_file')
    @classmethod
    def _bare_php_file_name(cls, value: str) -> str:
        # 完整路径会导致基础文件识别错误
        value = value.strip()
        if '/' in value or '\\' in value:
            raise ValueError("only the file name is allowed, the directory comes from *_directory")
        if not value.endswith('.php') or value == '.php':
            raise ValueError("base file must be a .php file name")
        return value

    @field_validator(
        'app_directory', 'models_directory', 'contracts_directory',
        'repositories_directory', 'policies_directory',
    )
    @classmethod
    def _non_empty_directory(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("directory must not be empty")
        return value
