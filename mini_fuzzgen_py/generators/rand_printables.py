"""
Random printables generator

与 RandBytesGenerator 相同的长度策略，但每个符号从固定的 99 字符可打印字母表中均匀选取。

注意：generate_dummy 仍然产出零字节（不是字母表字符），下游把 dummy 视为原始占位数据。
"""
from typing import Any

from ..inputs import BytesInput
from .base import SizedGenerator, draw_size

# 固定顺序的可打印字母表：数字、大写、小写、空格/制表/换行、标点
PRINTABLES = (
    b"0123456789"
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    b"abcdefghijklmnopqrstuvwxyz"
    b" \t\n"
    b"!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"
)


class RandPrintablesGenerator(SizedGenerator):
    """生成最多 `max_size` 个随机可打印字符。"""

    def generate(self, state: Any) -> BytesInput:
        rand = state.rand
        size = draw_size(rand, self.max_size)
        return BytesInput(bytes(rand.choose(PRINTABLES) for _ in range(size)))
