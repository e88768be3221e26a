"""
mini_fuzzgen_py

MiniFuzzGen 的 Python 包入口。

模糊测试引擎的输入生成层：从随机源抽取熵并合成新的测试输入，
在随机生成不可用时退化为确定性的 dummy 输入。

子模块：
- core: 随机源、状态、语料池、初始语料生成与统计
- generators: 生成器接口与字节/可打印字符生成器
- inputs: 输入类型（BytesInput）
- utils: 配置与绘图小工具
"""

__all__ = [
    "core",
    "errors",
    "generators",
    "inputs",
    "utils",
]

__version__ = "0.1.0"
