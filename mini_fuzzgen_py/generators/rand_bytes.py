"""
Random bytes generator

生成长度随机、内容随机的字节序列。

抽取顺序：先抽一次长度（[0, max_size)，0 视为 1），再按下标递增依次抽取每个字节（below(256)）。
给定确定的随机源序列，输出逐字节可复现。
"""
from typing import Any

from ..inputs import BytesInput
from .base import SizedGenerator, draw_size


class RandBytesGenerator(SizedGenerator):
    """生成最多 `max_size` 个随机字节。"""

    def generate(self, state: Any) -> BytesInput:
        rand = state.rand
        size = draw_size(rand, self.max_size)
        return BytesInput(bytes(rand.below(256) for _ in range(size)))
