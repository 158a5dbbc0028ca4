"""
Repository生成工具主入口

使用方式：
    python -m repository_generator [options]
"""

import sys

from .generator_main import main

if __name__ == "__main__":
    sys.exit(main())
