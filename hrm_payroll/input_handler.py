"""
输入采集层：提示、校验、不合法则重新提示，直到拿到合法值。
核心层只接收已去除首尾空白、已完成类型校验的值。读到 EOF 时 EOFError 向上抛出，由控制台结束会话。
"""
from __future__ import annotations

import math
from typing import Callable

BLANK_MESSAGES = ("\nYou must not leave blank this information ...", "\nPlease enter again ...")
WHOLE_NUMBER_MESSAGE = "\nPlease enter a whole number more than 0 !!!"
POSITIVE_FLOAT_MESSAGE = "You must enter a number that more than 0 !!!"
SINGLE_CHAR_MESSAGE = "\nPlease enter only a single character. Try again: "
PAUSE_PROMPT = "\n------------------------------\nPress ENTER to continue. . ."
CLEAR_SEQUENCE = "\033[2J\033[H"


def is_blank(text: str) -> bool:
    return not (text or "").strip()


def is_whole_number(text: str) -> bool:
    """仅十进制数字（去首尾空白后），不接受符号、小数点与空串。"""
    t = (text or "").strip()
    return bool(t) and t.isascii() and t.isdigit()


class InputHandler:
    def __init__(self, read: Callable[[str], str] = input, write: Callable[[str], None] = print) -> None:
        self.read = read
        self.write = write

    def _blank(self) -> None:
        for line in BLANK_MESSAGES:
            self.write(line)

    def ask_text(self, prompt: str) -> str:
        while True:
            value = self.read(prompt).strip()
            if value:
                return value
            self._blank()

    def ask_whole_number(self, prompt: str) -> int:
        while True:
            raw = self.read(prompt)
            if is_blank(raw):
                self._blank()
            elif not is_whole_number(raw):
                self.write(WHOLE_NUMBER_MESSAGE)
            else:
                try:
                    return int(raw.strip())
                except ValueError:
                    # 超过解释器整数字符串位数上限
                    self.write(WHOLE_NUMBER_MESSAGE)

    def ask_positive_float(self, prompt: str) -> float:
        while True:
            raw = self.read(prompt)
            if is_blank(raw):
                self._blank()
                continue
            try:
                value = float(raw.strip())
            except ValueError:
                value = 0.0
            if math.isfinite(value) and value > 0:
                return value
            self.write(POSITIVE_FLOAT_MESSAGE)

    def ask_choice(self, prompt: str) -> str:
        """菜单选择：恰好一个非空白字符。"""
        raw = self.read(prompt).strip()
        while len(raw) != 1:
            raw = self.read(SINGLE_CHAR_MESSAGE).strip()
        return raw

    def pause(self, clear: bool = False) -> None:
        self.read(PAUSE_PROMPT)
        if clear:
            self.write(CLEAR_SEQUENCE)
