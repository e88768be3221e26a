"""
语料池

管理生成得到的输入：按 id 存储、遍历、落盘与从目录加载种子。

id 从 1 开始单调递增，删除不会复用 id。
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Union

from ..inputs import BytesInput

log = logging.getLogger(__name__)


class Corpus:
    """内存语料池。

    - `add` 将输入加入语料池并返回分配的 id；
    - `dump_to_dir` 以内容哈希为文件名写出全部输入（同名文件只写一次）；
    - `load_dir` 把目录中的普通文件作为输入加入语料池。
    """

    def __init__(self) -> None:
        self._next_id = 1
        self._entries: Dict[int, BytesInput] = {}

    def add(self, inp: BytesInput) -> int:
        """将输入加入语料池并返回分配的 id。"""
        if not isinstance(inp, BytesInput):
            raise TypeError(f"corpus entries must be BytesInput, got {type(inp).__name__}")
        cid = self._next_id
        self._next_id += 1
        self._entries[cid] = inp
        return cid

    def get(self, cid: int) -> BytesInput:
        try:
            return self._entries[cid]
        except KeyError:
            raise KeyError(f"no corpus entry with id {cid}") from None

    def ids(self) -> List[int]:
        return list(self._entries.keys())

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[BytesInput]:
        return iter(list(self._entries.values()))

    def __contains__(self, cid: object) -> bool:
        return cid in self._entries

    def dump_to_dir(self, outdir: Union[str, Path]) -> List[Path]:
        """把语料写入目录，返回实际写出的文件路径（按 id 顺序）。"""
        out = Path(outdir)
        out.mkdir(parents=True, exist_ok=True)
        written: List[Path] = []
        seen = set()
        for inp in self._entries.values():
            name = inp.generate_name()
            # 内容相同的输入只写一次
            if name in seen:
                continue
            seen.add(name)
            written.append(inp.to_file(out / name))
        log.debug("dumped %d corpus entries to %s", len(written), out)
        return written

    def load_dir(self, path: Union[str, Path]) -> List[int]:
        """从目录加载种子文件，返回新加入条目的 id。"""
        src = Path(path)
        if not src.is_dir():
            raise NotADirectoryError(f"seeds directory not found: {src}")
        added: List[int] = []
        for sf in sorted(src.iterdir()):
            if sf.is_file():
                added.append(self.add(BytesInput.from_file(sf)))
        return added


__all__ = ["Corpus"]
