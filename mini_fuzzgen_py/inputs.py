"""
输入类型

BytesInput：变长字节序列形式的模糊测试输入。

设计要点：
- 构造时复制传入数据，生成器产出的输入与生成器本身、以及其他输入之间不共享可变存储；
- 下游（变异器等）可通过 `mutable()` 原地修改；
- 可序列化：以内容哈希作为文件名落盘，或从文件读回。
"""
from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Union


class BytesInput:
    """持有一段字节数据的输入。"""

    __slots__ = ("_data",)

    def __init__(self, data: Union[bytes, bytearray, memoryview] = b"") -> None:
        # 始终复制一份，避免与调用方的缓冲区别名
        self._data = bytearray(data)

    def bytes(self) -> bytes:
        """返回数据的不可变副本。"""
        return bytes(self._data)

    def mutable(self) -> bytearray:
        """返回内部 bytearray，供下游原地修改。"""
        return self._data

    def generate_name(self) -> str:
        """基于内容的名称（sha256 十六进制），用于语料落盘。"""
        return hashlib.sha256(self._data).hexdigest()

    def to_file(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        p.write_bytes(bytes(self._data))
        return p

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "BytesInput":
        return cls(Path(path).read_bytes())

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BytesInput):
            return NotImplemented
        return self._data == other._data

    # 内容可变，不可哈希；需要作为键时使用 generate_name()
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        preview = bytes(self._data[:16])
        suffix = "..." if len(self._data) > 16 else ""
        return f"BytesInput(len={len(self._data)}, data={preview!r}{suffix})"


__all__ = ["BytesInput"]
