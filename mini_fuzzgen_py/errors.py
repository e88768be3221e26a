"""
异常定义

包内统一的异常层级：
- FuzzGenError: 基类
- GenerationError: 生成器无法为当前状态产生有效输入（仅由 generate 抛出）
- ConfigError: 配置文件缺失、格式错误或取值非法
"""


class FuzzGenError(Exception):
    """mini_fuzzgen_py 的异常基类。"""


class GenerationError(FuzzGenError):
    """生成策略无法产生有效输入。

    对调用方（模糊循环）而言是非致命错误：记录后重试或回退到 generate_dummy。
    """


class ConfigError(FuzzGenError):
    """配置加载或校验失败。"""


__all__ = ["FuzzGenError", "GenerationError", "ConfigError"]
