"""
占位符替换模块

模板中的占位符形如 `{{ model }}`，按给定顺序逐个做字面替换，
不使用正则，同一占位符的所有出现位置都会被替换。
"""

from typing import Sequence, Union

from .types import PlaceholderSet


def placeholder(name: str) -> str:
    """构造占位符字面量"""
    return "{{ " + name + " }}"


def substitute(template: str, tokens: Sequence[str], values: Sequence[str]) -> str:
    """
    按顺序替换模板中的占位符

    Args:
        template: 模板文本
        tokens: 占位符列表
        values: 替换值列表，长度必须与占位符列表一致

    Returns:
        str: 替换后的文本
    """
    if len(tokens) != len(values):
        raise ValueError(
            f"placeholder count ({len(tokens)}) does not match value count ({len(values)})"
        )

    result = template
    for token, value in zip(tokens, values):
        if not token:
            raise ValueError("placeholder token must not be empty")
        result = result.replace(token, value)
    return result


def render(template: str, placeholders: Union[PlaceholderSet, Sequence]) -> str:
    """使用占位符集合渲染模板"""
    if not isinstance(placeholders, PlaceholderSet):
        placeholders = PlaceholderSet.of(*placeholders)
    return substitute(template, placeholders.tokens, placeholders.values)
