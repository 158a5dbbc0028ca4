"""
测试配置加载器
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from repository_generator.exceptions import ConfigurationError
from setting.config_loader import ConfigLoader, load_settings
from setting.generator_settings import DEFAULT_CONFIG_PATH, PROJECT_CONFIG_PATH, GeneratorSettings


def write_project_config(project: Path, text: str) -> Path:
    path = project / PROJECT_CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestGeneratorSettings:
    """测试配置模型"""

    def test_defaults_match_packaged_yaml(self, tmp_path):
        """测试默认值与内置配置文件一致"""
        settings = ConfigLoader(base_path=tmp_path, environ={}).settings
        assert settings == GeneratorSettings()
        assert settings.models_namespace == "App\\Models"
        assert settings.user_class == "App\\Models\\User"
        assert settings.stubs_directory is None

    def test_frozen(self):
        """测试配置不可修改"""
        settings = GeneratorSettings()
        with pytest.raises(ValidationError):
            settings.models_directory = "other"

    def test_unknown_key(self):
        """测试未知配置项"""
        with pytest.raises(ValidationError):
            GeneratorSettings(model_directory="app/Models")

    def test_namespace_is_stripped(self):
        """测试命名空间去除首尾分隔符"""
        settings = GeneratorSettings(repositories_namespace="\\App\\Repositories\\ ")
        assert settings.repositories_namespace == "App\\Repositories"

    @pytest.mark.parametrize("value", ["app/Repositories/BaseRepository.php", "BaseRepository", ".php"])
    def test_base_file_must_be_bare_php_name(self, value):
        """测试基础构件文件名必须是PHP文件名"""
        with pytest.raises(ValidationError):
            GeneratorSettings(base_repository_file=value)

    def test_empty_directory(self):
        """测试目录配置为空"""
        with pytest.raises(ValidationError):
            GeneratorSettings(policies_directory="  ")


class TestConfigLoader:
    """测试配置合并"""

    def test_packaged_defaults_exist(self):
        """测试内置默认配置存在"""
        assert DEFAULT_CONFIG_PATH.is_file()

    def test_project_config_overrides_defaults(self, tmp_path):
        """测试项目配置覆盖默认配置"""
        write_project_config(tmp_path, "repositories_directory: app/Data/Repositories\n"
                                       "repositories_namespace: 'App\\Data\\Repositories'\n")

        settings = ConfigLoader(base_path=tmp_path, environ={}).settings
        assert settings.repositories_directory == "app/Data/Repositories"
        assert settings.repositories_namespace == "App\\Data\\Repositories"
        # 未配置的项保持默认值
        assert settings.policies_directory == "app/Policies"

    def test_explicit_config_path(self, tmp_path):
        """测试指定配置文件路径"""
        custom = tmp_path / "generator.yml"
        custom.write_text("user_class: 'App\\User'\n", encoding="utf-8")

        settings = ConfigLoader(base_path=tmp_path, config_path="generator.yml", environ={}).settings
        assert settings.user_class == "App\\User"

    def test_explicit_config_path_must_exist(self, tmp_path):
        """测试指定的配置文件必须存在"""
        loader = ConfigLoader(base_path=tmp_path, config_path="missing.yml", environ={})
        with pytest.raises(ConfigurationError) as exc_info:
            loader.load()
        assert exc_info.value.error_code == 404

    def test_environment_overrides_file(self, tmp_path):
        """测试环境变量覆盖配置文件"""
        write_project_config(tmp_path, "models_directory: app/Entities\n")
        environ = {
            "REPOGEN_MODELS_DIRECTORY": "app/Domain/Models",
            "REPOGEN_STUBS_DIRECTORY": "stubs",
            "UNRELATED": "x",
        }

        loader = ConfigLoader(base_path=tmp_path, environ=environ)
        assert loader.settings.models_directory == "app/Domain/Models"
        assert loader.settings.stubs_directory == "stubs"
        assert loader["stubs_directory"] == "stubs"

    def test_environment_null(self, tmp_path):
        """测试环境变量设置空值"""
        write_project_config(tmp_path, "stubs_directory: stubs\n")
        loader = ConfigLoader(base_path=tmp_path, environ={"REPOGEN_STUBS_DIRECTORY": "null"})
        assert loader.settings.stubs_directory is None

    def test_invalid_yaml(self, tmp_path):
        """测试无效的YAML"""
        write_project_config(tmp_path, "models_directory: [unclosed\n")
        with pytest.raises(ConfigurationError):
            ConfigLoader(base_path=tmp_path, environ={}).load()

    def test_non_mapping(self, tmp_path):
        """测试配置文件不是映射"""
        write_project_config(tmp_path, "- a\n- b\n")
        with pytest.raises(ConfigurationError):
            ConfigLoader(base_path=tmp_path, environ={}).load()

    def test_validation_error_is_configuration_error(self, tmp_path):
        """测试校验错误转换为配置错误"""
        write_project_config(tmp_path, "base_policy_file: app/Policies/BasePolicy.php\n")
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader(base_path=tmp_path, environ={}).load()
        assert "base_policy_file" in str(exc_info.value)

    def test_empty_project_config(self, tmp_path):
        """测试空的项目配置文件"""
        write_project_config(tmp_path, "")
        assert ConfigLoader(base_path=tmp_path, environ={}).settings == GeneratorSettings()

    def test_get_and_reload(self, tmp_path):
        """测试读取与重新加载"""
        path = write_project_config(tmp_path, "models_directory: app/Entities\n")
        loader = ConfigLoader(base_path=tmp_path, environ={})

        assert loader.get("models_directory") == "app/Entities"
        assert loader.get("missing", "fallback") == "fallback"

        path.write_text("models_directory: app/Models/Core\n", encoding="utf-8")
        assert loader.reload().models_directory == "app/Models/Core"

    def test_load_settings(self, tmp_path, monkeypatch):
        """测试加载配置"""
        monkeypatch.delenv("REPOGEN_MODELS_DIRECTORY", raising=False)
        assert load_settings(base_path=tmp_path).models_directory == "app/Models"
