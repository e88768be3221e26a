"""
初始语料生成

在模糊循环开始前用生成器填充语料池：
- `seed_corpus`: 调用 `generate` 生成 num 条输入；遇到 GenerationError 时记录警告，
  按配置回退到 `generate_dummy` 或重新抛出；
- `seed_dummies`: 只生成 dummy 输入（不消耗熵），用于随机源尚不可信时的预热。
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from ..errors import GenerationError
from .monitor import GenerationMonitor
from .state import FuzzState

if TYPE_CHECKING:
    from ..generators.base import Generator

log = logging.getLogger(__name__)


def seed_corpus(state: FuzzState, generator: Generator, num: int,
                fallback_to_dummy: bool = True,
                stats: Optional[GenerationMonitor] = None) -> List[int]:
    """生成 num 条输入加入 `state.corpus`，返回新条目的 id 列表。"""
    if num < 0:
        raise ValueError(f"num must be >= 0, got {num}")
    added: List[int] = []
    for i in range(num):
        dummy = False
        try:
            inp = generator.generate(state)
        except GenerationError as e:
            if not fallback_to_dummy:
                raise
            log.warning("generator %r failed on input %d, using dummy: %s", generator, i, e)
            inp = generator.generate_dummy(state)
            dummy = True
        added.append(state.corpus.add(inp))
        if stats is not None:
            stats.record(inp, dummy=dummy)
    log.debug("seeded %d inputs with %r", len(added), generator)
    return added


def seed_dummies(state: FuzzState, generator: Generator, num: int,
                 stats: Optional[GenerationMonitor] = None) -> List[int]:
    """加入 num 条 dummy 输入，返回新条目的 id 列表。"""
    if num < 0:
        raise ValueError(f"num must be >= 0, got {num}")
    added: List[int] = []
    for _ in range(num):
        inp = generator.generate_dummy(state)
        added.append(state.corpus.add(inp))
        if stats is not None:
            stats.record(inp, dummy=True)
    return added


__all__ = ["seed_corpus", "seed_dummies"]
