"""
配置模块

提供默认配置与 JSON 配置文件解析；命令行参数可覆盖文件中的值。
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..errors import ConfigError

DEFAULTS: Dict[str, Any] = {
    # 生成器类型：'bytes' | 'printables'
    "generator": "bytes",
    "max_size": 32,
    "num_inputs": 8,
    # None 表示按当前时间播种
    "seed": None,
    # generate 失败时是否回退为 dummy 输入
    "fallback_to_dummy": True,
    "outdir": "generated",
}

GENERATOR_CHOICES = ("bytes", "printables")


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """校验配置项的类型与取值，非法时抛出 ConfigError。"""
    unknown = sorted(set(cfg) - set(DEFAULTS))
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(unknown)}")
    if cfg["generator"] not in GENERATOR_CHOICES:
        raise ConfigError(f"generator must be one of {GENERATOR_CHOICES}, got {cfg['generator']!r}")
    if not _is_int(cfg["max_size"]) or cfg["max_size"] < 0:
        raise ConfigError(f"max_size must be a non-negative int, got {cfg['max_size']!r}")
    if not _is_int(cfg["num_inputs"]) or cfg["num_inputs"] < 0:
        raise ConfigError(f"num_inputs must be a non-negative int, got {cfg['num_inputs']!r}")
    if cfg["seed"] is not None and not _is_int(cfg["seed"]):
        raise ConfigError(f"seed must be an int or null, got {cfg['seed']!r}")
    if not isinstance(cfg["fallback_to_dummy"], bool):
        raise ConfigError(f"fallback_to_dummy must be a bool, got {cfg['fallback_to_dummy']!r}")
    if not isinstance(cfg["outdir"], str) or not cfg["outdir"]:
        raise ConfigError(f"outdir must be a non-empty string, got {cfg['outdir']!r}")
    return cfg


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """加载配置。

    path 为 None 时返回 DEFAULTS 的副本；否则读取 JSON 对象并覆盖默认值。
    """
    cfg = DEFAULTS.copy()
    if path is None:
        return cfg
    p = Path(path)
    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"cannot read config {p}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid JSON in config {p}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"config {p} must contain a JSON object")
    cfg.update(raw)
    return validate_config(cfg)


def merge_overrides(cfg: Dict[str, Any], **overrides: Any) -> Dict[str, Any]:
    """用非 None 的覆盖值更新配置并重新校验，返回新字典。"""
    merged = dict(cfg)
    for k, v in overrides.items():
        if v is not None:
            merged[k] = v
    return validate_config(merged)


__all__ = ["DEFAULTS", "GENERATOR_CHOICES", "load_config", "merge_overrides", "validate_config"]
