"""
Generator interface

生成器接口与共享的长度/常量逻辑。

- `Generator.generate(state)`：使用 `state.rand` 抽取熵生成新输入，可能抛出 `GenerationError`；
- `Generator.generate_dummy(state)`：确定性占位输入，不抽取随机数、不会失败。

生成器实例在整个模糊过程中复用，除构造时固定的配置外不保存任何逐次调用的状态。
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from ..core.rands import RandomSource
from ..inputs import BytesInput

log = logging.getLogger(__name__)

# dummy 输入长度上限
DUMMY_BYTES_MAX = 64


class Generator(ABC):
    """输入生成策略的抽象基类。"""

    @abstractmethod
    def generate(self, state: Any) -> BytesInput:
        """
        生成一个新输入。

        Args:
            state: 暴露 `rand`（RandomSource）的状态对象

        Returns:
            新生成的输入（调用方独占）

        Raises:
            GenerationError: 策略无法为当前状态产生有效输入
        """

    @abstractmethod
    def generate_dummy(self, state: Any) -> BytesInput:
        """生成确定性的占位输入，不得失败。"""


def normalize_max_size(max_size: int, owner: str) -> int:
    """校验并规范化 max_size。

    - 非整数（含 bool）抛出 TypeError；
    - 负数抛出 ValueError；
    - 0 规范化为 1 并记录警告。
    """
    if isinstance(max_size, bool) or not isinstance(max_size, int):
        raise TypeError(f"{owner}: max_size must be an int, got {type(max_size).__name__}")
    if max_size < 0:
        raise ValueError(f"{owner}: max_size must be >= 0, got {max_size}")
    if max_size == 0:
        log.warning("%s: max_size=0 is degenerate, using max_size=1", owner)
        return 1
    return max_size


def draw_size(rand: RandomSource, max_size: int) -> int:
    """在 [0, max_size) 内抽取长度，抽到 0 时取 1。"""
    size = rand.below(max_size)
    if size == 0:
        size = 1
    return size


def dummy_bytes(max_size: int) -> BytesInput:
    """min(max_size, DUMMY_BYTES_MAX) 个零字节。"""
    return BytesInput(bytes(min(max_size, DUMMY_BYTES_MAX)))


class SizedGenerator(Generator):
    """持有 `max_size` 配置的生成器基类。

    参数:
      max_size: 生成长度的上界（含）。
    """

    def __init__(self, max_size: int):
        self._max_size = normalize_max_size(max_size, type(self).__name__)

    @property
    def max_size(self) -> int:
        return self._max_size

    def generate_dummy(self, state: Any) -> BytesInput:
        # 不依赖 state，也不抽取随机数
        return dummy_bytes(self._max_size)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._max_size == other._max_size

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._max_size))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(max_size={self._max_size})"


__all__ = [
    "DUMMY_BYTES_MAX",
    "Generator",
    "SizedGenerator",
    "draw_size",
    "dummy_bytes",
    "normalize_max_size",
]
