"""
生成统计

功能：
- 记录每次生成的元数据（时间戳、长度、是否为 dummy、内容哈希）
- 计算长度分布直方图
- 导出 JSON 记录与 `size,count` CSV，供 utils.length_plot 绘图
"""
from __future__ import annotations

import csv
import json
import os
import time
from collections import Counter
from dataclasses import asdict, dataclass
from typing import List, Tuple

from ..inputs import BytesInput


@dataclass
class GenRecord:
    timestamp: float
    size: int
    dummy: bool
    name: str


class GenerationMonitor:
    """维护生成历史。"""

    def __init__(self) -> None:
        self.records: List[GenRecord] = []

    def record(self, inp: BytesInput, dummy: bool = False) -> GenRecord:
        rec = GenRecord(timestamp=time.time(), size=len(inp), dummy=dummy,
                        name=inp.generate_name())
        self.records.append(rec)
        return rec

    @property
    def dummy_count(self) -> int:
        return sum(1 for r in self.records if r.dummy)

    def size_histogram(self) -> List[Tuple[int, int]]:
        """返回按长度升序排列的 (size, count) 列表。"""
        counts = Counter(r.size for r in self.records)
        return sorted(counts.items())

    def export_records(self, path: str) -> str:
        """把记录导出为 JSON 文件，返回文件路径。"""
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump([asdict(r) for r in self.records], f, ensure_ascii=False, indent=2)
        return path


def export_histogram_csv(hist: List[Tuple[int, int]], path: str) -> None:
    """把长度直方图导出为 CSV，列为 `size,count`。"""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["size", "count"])
        for size, count in hist:
            writer.writerow([size, count])


__all__ = ["GenRecord", "GenerationMonitor", "export_histogram_csv"]
