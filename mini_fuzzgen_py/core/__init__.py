"""core 子模块

随机源、模糊状态、语料池、初始语料生成与生成统计。
"""

from .corpus import Corpus
from .monitor import GenerationMonitor, GenRecord, export_histogram_csv
from .rands import RandomSource, StdRand
from .seeding import seed_corpus, seed_dummies
from .state import FuzzState, HasRand

__all__ = [
    "Corpus",
    "FuzzState",
    "GenRecord",
    "GenerationMonitor",
    "HasRand",
    "RandomSource",
    "StdRand",
    "export_histogram_csv",
    "seed_corpus",
    "seed_dummies",
]
