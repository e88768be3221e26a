"""
随机源

生成器只依赖一个很窄的随机能力接口 `RandomSource`：
- below(bound): 返回 [0, bound) 内的整数
- choose(items): 从非空的固定集合中均匀选取一个元素

生成器从不持有随机源，每次调用都经由 state 参数（`state.rand`）取得。
随机源自身的失败（例如 below(0)、choose([])）视为随机源的缺陷，直接抛出，不在生成器内部恢复。

`StdRand` 是基于 `random.Random` 的可播种实现：给定相同种子，抽取序列逐位可复现。
"""
from __future__ import annotations

import random
import time
from abc import ABC, abstractmethod
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(ABC):
    """随机能力接口。"""

    @abstractmethod
    def below(self, bound: int) -> int:
        """返回 [0, bound) 内均匀分布的整数。"""

    def choose(self, items: Sequence[T]) -> T:
        """从非空序列中均匀选取一个元素。

        通过一次 `below(len(items))` 抽取实现，因此抽取序列完全由 below 决定。
        """
        if not items:
            raise ValueError("choose() from an empty collection")
        return items[self.below(len(items))]


class StdRand(RandomSource):
    """基于 `random.Random` 的标准随机源。

    参数:
      seed: 随机种子；为 None 时使用当前时间（纳秒）作为种子。
    """

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random()
        self.seed = 0
        self.set_seed(seed if seed is not None else time.time_ns())

    @classmethod
    def with_seed(cls, seed: int) -> "StdRand":
        return cls(seed)

    def set_seed(self, seed: int) -> None:
        """重新播种，之后的抽取序列由新种子决定。"""
        self.seed = seed
        self.rng.seed(seed)

    def next(self) -> int:
        """返回一个 64 位无符号随机数。"""
        return self.rng.getrandbits(64)

    def below(self, bound: int) -> int:
        if bound <= 0:
            raise ValueError(f"below() requires a positive bound, got {bound}")
        return self.rng.randrange(bound)

    def between(self, lo: int, hi: int) -> int:
        """返回 [lo, hi] 闭区间内的整数。"""
        if hi < lo:
            raise ValueError(f"between() requires lo <= hi, got {lo} > {hi}")
        return lo + self.below(hi - lo + 1)

    def __repr__(self) -> str:
        return f"StdRand(seed={self.seed})"


__all__ = ["RandomSource", "StdRand"]
