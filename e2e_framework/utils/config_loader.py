from __future__ import annotations

from pathlib import Path

import yaml


PROJECT_ROOT = Path(__file__).resolve().parents[2]


def load_config(path: str | Path = "config.yaml") -> dict:
    """中文：加载 YAML 配置文件并返回字典。
    参数:
        path: 配置文件路径，支持相对路径。
    """

    p = Path(path)
    if not p.is_absolute():
        p = (PROJECT_ROOT / p).resolve()

    with p.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    cfg["_project_root"] = str(PROJECT_ROOT)
    return cfg


def cfg_get(cfg: dict, keys: list, default=None):
    """Walk nested dict keys, falling back to ``default`` on any gap."""
    cur = cfg
    for k in keys:
        if not isinstance(cur, dict):
            return default
        cur = cur.get(k)
        if cur is None:
            return default
    return cur


def resolve_path(cfg: dict, value: str) -> str:
    """中文：将相对路径解析为项目根目录下的绝对路径。"""
    p = Path(value)
    if p.is_absolute():
        return str(p)
    return str((Path(cfg.get("_project_root", PROJECT_ROOT)) / p).resolve())
