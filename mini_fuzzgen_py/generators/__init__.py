"""generators 子模块

输入生成器接口与实现：
- base: Generator 抽象接口、dummy 常量与共享长度逻辑
- rand_bytes: RandBytesGenerator（随机字节）
- rand_printables: RandPrintablesGenerator（随机可打印字符）

`create_generator(kind, max_size)` 按名称构造生成器。
"""

from .base import DUMMY_BYTES_MAX, Generator, SizedGenerator
from .rand_bytes import RandBytesGenerator
from .rand_printables import PRINTABLES, RandPrintablesGenerator

GENERATOR_KINDS = {
    "bytes": RandBytesGenerator,
    "printables": RandPrintablesGenerator,
}


def create_generator(kind: str, max_size: int) -> Generator:
    """
    按名称创建生成器。

    Args:
        kind: "bytes" 或 "printables"
        max_size: 生成长度上界（含）

    Returns:
        配置好的 Generator 实例
    """
    try:
        cls = GENERATOR_KINDS[kind]
    except KeyError:
        raise ValueError(f"Unknown generator: {kind}") from None
    return cls(max_size)


__all__ = [
    "DUMMY_BYTES_MAX",
    "GENERATOR_KINDS",
    "Generator",
    "PRINTABLES",
    "RandBytesGenerator",
    "RandPrintablesGenerator",
    "SizedGenerator",
    "create_generator",
]
