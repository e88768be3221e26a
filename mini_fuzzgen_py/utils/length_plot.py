#!/usr/bin/env python3
"""
length_plot.py

小工具：把生成统计导出的 `size,count` CSV 画成长度分布图（支持 bar / line）。

用法示例:
  mini-fuzzgen-plot generated/size_hist.csv -o sizes.png --kind bar

用于直观检查长度是否在 [1, max_size] 内近似均匀分布。
"""
from __future__ import annotations

import argparse
import csv
import sys
from typing import List, Optional, Sequence, Tuple

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description='size histogram CSV -> plot tool')
    p.add_argument('csvfile', help='输入 CSV 文件路径（表头 size,count）')
    p.add_argument('-o', '--output', default='sizes.png', help='输出文件，例如 sizes.png 或 sizes.pdf')
    p.add_argument('--kind', choices=['bar', 'line'], default='bar', help='图类型')
    p.add_argument('--title', default='Generated input sizes', help='图标题')
    p.add_argument('--dpi', type=int, default=150, help='输出分辨率 DPI')
    p.add_argument('--style', default=None, help='matplotlib style (例如 ggplot)')
    p.add_argument('--ylog', action='store_true', help='Y 轴对数刻度')
    return p.parse_args(argv)


def read_histogram_csv(path: str) -> Tuple[List[int], List[int]]:
    """读取 `size,count` CSV，返回 (sizes, counts)。"""
    with open(path, newline='', encoding='utf-8') as f:
        reader = csv.DictReader(f)
        if reader.fieldnames is None or not {'size', 'count'} <= set(reader.fieldnames):
            raise ValueError(f'CSV 缺少 size/count 列: {path}')
        sizes: List[int] = []
        counts: List[int] = []
        for row in reader:
            sizes.append(int(row['size']))
            counts.append(int(row['count']))
    return sizes, counts


def plot_histogram(sizes: Sequence[int], counts: Sequence[int], output: str,
                   kind: str = 'bar', title: str = '', dpi: int = 150,
                   style: Optional[str] = None, ylog: bool = False) -> str:
    """绘制长度分布并保存到 output，返回输出路径。"""
    if style:
        plt.style.use(style)
    fig, ax = plt.subplots()
    if kind == 'line':
        ax.plot(sizes, counts, marker='o')
    else:
        ax.bar(sizes, counts)
    if title:
        ax.set_title(title)
    ax.set_xlabel('Input size (bytes)')
    ax.set_ylabel('Count')
    if ylog:
        ax.set_yscale('log')
    ax.grid(True)
    fig.tight_layout()
    fig.savefig(output, dpi=dpi)
    plt.close(fig)
    return output


def main(argv: Optional[list] = None) -> int:
    args = parse_args(argv)
    try:
        sizes, counts = read_histogram_csv(args.csvfile)
    except (OSError, ValueError) as e:
        print(f'error: {e}', file=sys.stderr)
        return 2
    if not sizes:
        print('CSV 内容为空', file=sys.stderr)
        return 2
    plot_histogram(sizes, counts, args.output, kind=args.kind, title=args.title,
                   dpi=args.dpi, style=args.style, ylog=args.ylog)
    print(f'plot written to: {args.output}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
