"""utils 子模块

公共工具：配置加载（config）与长度分布绘图（length_plot）。
"""

__all__ = [
    "config",
    "length_plot",
]
