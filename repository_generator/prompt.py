"""
交互确认模块

生成流程只通过 PromptProvider 询问用户，便于在非交互场景
（--force / --no-interaction）和测试中替换。
"""

import sys
from abc import ABC, abstractmethod
from typing import Callable, Optional, TextIO

YES_ANSWERS = ('y', 'yes')


class PromptProvider(ABC):
    """确认提示器基类"""

    @abstractmethod
    def confirm(self, question: str) -> bool:
        """询问是/否问题，返回用户是否确认"""


class ConsolePrompt(PromptProvider):
    """
    控制台提示器

    从标准输入读取回答，y/yes（不区分大小写）为确认，其余（含空输入）为否。
    """

    def __init__(self, input_func: Optional[Callable[[str], str]] = None,
                 stream: Optional[TextIO] = None):
        self._input = input_func or input
        self._stream = stream

    def confirm(self, question: str) -> bool:
        stream = self._stream or sys.stdout
        stream.flush()
        try:
            answer = self._input(f"{question} [no] ")
        except EOFError:
            return False
        return answer.strip().lower() in YES_ANSWERS


class StaticPrompt(PromptProvider):
    """固定回答的提示器"""

    def __init__(self, answer: bool):
        self.answer = answer
        self.questions = []

    def confirm(self, question: str) -> bool:
        self.questions.append(question)
        return self.answer
