"""
测试路径解析模块
"""

import pytest

from repository_generator.exceptions import ConfigurationError, NamespaceOutsideRootError
from repository_generator.path_resolver import (
    PathResolver,
    namespace_to_directory,
    normalize_namespace,
    split_class_name,
)
from repository_generator.types import ArtifactKind, RunConfiguration


class TestNormalizeNamespace:
    """测试命名空间规范化"""

    @pytest.mark.parametrize("value", [
        "App/Http/Repositories",
        "app/http/repositories",
        "App.Http.Repositories",
        "App\\Http\\Repositories",
        "/App/Http/Repositories/",
    ])
    def test_separators(self, value):
        """测试分隔符统一为反斜杠"""
        assert normalize_namespace(value) == "App\\Http\\Repositories"

    def test_keeps_inner_case(self):
        """测试保留中间部分的大小写"""
        assert normalize_namespace("app/userProfiles") == "App\\UserProfiles"

    def test_empty(self):
        """测试空命名空间"""
        with pytest.raises(ConfigurationError):
            normalize_namespace(" / ")


class TestHelpers:
    """测试辅助函数"""

    def test_split_class_name(self):
        """测试拆分完整类名"""
        assert split_class_name("App\\Models\\User") == ("App\\Models", "User")
        assert split_class_name("\\App\\Models\\User") == ("App\\Models", "User")
        assert split_class_name("User") == ("", "User")

    def test_namespace_to_directory(self, tmp_path):
        """测试命名空间转换为目录"""
        app = tmp_path / "app"
        assert namespace_to_directory("App\\Http\\Repositories", "App", app) == app / "Http" / "Repositories"
        assert namespace_to_directory("App", "App", app) == app

    def test_root_compared_case_insensitively(self, tmp_path):
        """测试根命名空间比较不区分大小写"""
        app = tmp_path / "app"
        assert namespace_to_directory("APP\\Policies", "App", app) == app / "Policies"

    def test_outside_root(self, tmp_path):
        """测试命名空间不在根命名空间下"""
        assert namespace_to_directory("Domain\\Repositories", "App", tmp_path) is None


class TestPathResolver:
    """测试路径解析器"""

    def test_defaults(self, make_run, project):
        """测试默认位置"""
        resolver = PathResolver(make_run())

        assert resolver.namespace(ArtifactKind.REPOSITORY) == "App\\Repositories"
        assert resolver.directory(ArtifactKind.REPOSITORY) == project / "app" / "Repositories"
        assert resolver.directory(ArtifactKind.CONTRACT) == project / "app" / "Contracts"
        assert resolver.directory(ArtifactKind.POLICY) == project / "app" / "Policies"
        assert resolver.models().directory == project / "app" / "Models"
        assert resolver.models().namespace == "App\\Models"

    def test_override(self, make_run, project):
        """测试覆盖命名空间"""
        resolver = PathResolver(make_run(repositories_namespace="app/Http/repositories"))

        location = resolver.location(ArtifactKind.REPOSITORY)
        assert location.namespace == "App\\Http\\Repositories"
        assert location.directory == project / "app" / "Http" / "Repositories"

        # 其他构件不受影响
        assert resolver.namespace(ArtifactKind.CONTRACT) == "App\\Contracts"

    def test_models_override(self, make_run, project):
        """测试覆盖模型命名空间"""
        resolver = PathResolver(make_run(models_namespace="App/Models/Shop"))
        assert resolver.models().directory == project / "app" / "Models" / "Shop"
        assert resolver.models().namespace == "App\\Models\\Shop"

    def test_override_outside_root(self, make_run):
        """测试覆盖的命名空间不在根命名空间下"""
        resolver = PathResolver(make_run(policies_namespace="Domain/Policies"))
        with pytest.raises(NamespaceOutsideRootError):
            resolver.location(ArtifactKind.POLICY)

    def test_location_is_cached(self, make_run):
        """测试位置缓存"""
        resolver = PathResolver(make_run(contracts_namespace="App/Contracts/Shop"))
        assert resolver.location(ArtifactKind.CONTRACT) is resolver.location(ArtifactKind.CONTRACT)

    def test_target_path(self, make_run, project):
        """测试目标文件路径"""
        resolver = PathResolver(make_run())
        path = resolver.target_path(ArtifactKind.POLICY, "UserPolicy")
        assert path == project / "app" / "Policies" / "UserPolicy.php"

    def test_base_file(self, make_run, project):
        """测试基础构件路径"""
        resolver = PathResolver(make_run(repositories_namespace="App/Http/Repositories"))

        # 基础文件始终位于配置中的默认目录
        assert resolver.base_file(ArtifactKind.REPOSITORY) == project / "app" / "Repositories" / "BaseRepository.php"
        assert resolver.base_class_name(ArtifactKind.CONTRACT) == "RepositoryInterface"
        assert not resolver.shares_base_directory(ArtifactKind.REPOSITORY)
        assert resolver.shares_base_directory(ArtifactKind.CONTRACT)

    def test_absolute_directory_setting(self, project, settings, tmp_path):
        """测试绝对路径的目录配置"""
        custom = settings.model_copy(update={"policies_directory": str(tmp_path / "elsewhere")})
        resolver = PathResolver(RunConfiguration(base_path=project, settings=custom))
        assert resolver.directory(ArtifactKind.POLICY) == tmp_path / "elsewhere"

    def test_class_exists(self, make_run):
        """测试类文件是否存在"""
        resolver = PathResolver(make_run())
        assert resolver.class_exists("App\\Models\\User")
        assert not resolver.class_exists("App\\Models\\Customer")
        assert not resolver.class_exists("Illuminate\\Foundation\\Auth\\User")
        assert resolver.class_path("Vendor\\Thing") is None
