"""
测试公共夹具

提供一个最小的Laravel项目目录结构，以及每个测试前后的日志工厂重置。
"""

from pathlib import Path

import pytest

from common.logger import logger_factory
from setting.generator_settings import GeneratorSettings
from repository_generator.types import RunConfiguration

MODEL_TEMPLATE = """<?php

namespace App\\Models;

use Illuminate\\Database\\Eloquent\\Model;

class {name} extends Model
{{
    //
}}
"""


def write_model(project: Path, name: str, directory: str = "app/Models") -> Path:
    """在项目中创建一个模型文件"""
    path = project / directory / f"{name}.php"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(MODEL_TEMPLATE.format(name=name), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    logger_factory.reset()
    yield
    logger_factory.reset()


@pytest.fixture
def project(tmp_path) -> Path:
    """包含 User、Order 两个模型的Laravel项目"""
    root = tmp_path / "project"
    write_model(root, "User")
    write_model(root, "Order")
    return root


@pytest.fixture
def settings() -> GeneratorSettings:
    return GeneratorSettings()


@pytest.fixture
def make_run(project, settings):
    """创建运行配置的工厂"""

    def _make_run(**kwargs) -> RunConfiguration:
        kwargs.setdefault("base_path", project)
        kwargs.setdefault("settings", settings)
        return RunConfiguration(**kwargs)

    return _make_run


@pytest.fixture
def make_model():
    """在项目中创建模型文件的工厂"""
    return write_model
