"""
Laravel仓库类生成工具安装配置

该文件定义了项目的安装配置、依赖管理和脚本入口点。
"""

from setuptools import setup, find_packages
import os

# 读取版本信息
def get_version():
    """从版本文件获取版本号"""
    version_file = os.path.join(os.path.dirname(__file__), 'VERSION')
    if os.path.exists(version_file):
        with open(version_file, 'r', encoding='utf-8') as f:
            return f.read().strip()
    return '1.0.0'

# 读取README文件
def get_long_description():
    """获取长描述"""
    readme_file = os.path.join(os.path.dirname(__file__), 'README.md')
    if os.path.exists(readme_file):
        with open(readme_file, 'r', encoding='utf-8') as f:
            return f.read()
    return ''

# 读取依赖文件
def get_requirements():
    """获取依赖列表"""
    requirements_file = os.path.join(os.path.dirname(__file__), 'requirements.txt')
    if os.path.exists(requirements_file):
        with open(requirements_file, 'r', encoding='utf-8') as f:
            requirements = []
            for line in f:
                line = line.strip()
                if line and not line.startswith('#'):
                    requirements.append(line)
            return requirements
    return []

# 开发依赖
dev_requirements = [
    'pytest>=7.4.0',
    'pytest-cov>=4.1.0',
]

setup(
    # 基本信息
    name='repository-generator',
    version=get_version(),
    description='根据Laravel模型生成仓库类、契约接口与授权策略类的命令行工具',
    long_description=get_long_description(),
    long_description_content_type='text/markdown',

    # 分类信息
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: PHP',
        'Topic :: Software Development :: Code Generators',
    ],

    # 关键词
    keywords=['laravel', 'repository', 'code generator', 'scaffolding', 'policy'],

    # 许可证
    license='MIT',

    # Python版本要求
    python_requires='>=3.8',

    # 包信息
    packages=find_packages(exclude=['tests*', 'docs*']),
    include_package_data=True,
    package_data={
        'repository_generator': ['stubs/*.stub'],
        'setting': ['*.yml'],
    },

    # 依赖信息
    install_requires=get_requirements(),
    extras_require={
        'dev': dev_requirements,
    },

    # 脚本入口点
    entry_points={
        'console_scripts': [
            'make-repositories=repository_generator.generator_main:main',
            'publish-repository-generator=repository_generator.generator_main:publish_main',
        ],
    },

    # ZIP安全（模板和默认配置按文件路径读取）
    zip_safe=False,

    # 测试套件
    test_suite='tests',
    tests_require=dev_requirements,
)
