"""
模糊状态

生成器只通过 `state.rand` 使用状态中的随机源；语料池等其余部分由模糊循环使用。
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol, runtime_checkable

from .corpus import Corpus
from .rands import RandomSource, StdRand


@runtime_checkable
class HasRand(Protocol):
    """暴露随机源的状态。"""

    rand: RandomSource


@dataclass
class FuzzState:
    """最小的模糊状态：随机源 + 语料池。"""

    rand: RandomSource
    corpus: Corpus = field(default_factory=Corpus)

    @classmethod
    def with_seed(cls, seed: Optional[int] = None) -> "FuzzState":
        """以给定种子（None 表示按时间播种）构造带 StdRand 的状态。"""
        return cls(rand=StdRand(seed))


__all__ = ["HasRand", "FuzzState"]
