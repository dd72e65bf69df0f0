"""Performance sentinel benchmarks (gated perf tests)."""

from __future__ import annotations

import os
import random
from typing import Any, Dict


def _budget_from_env(var_name: str, default_ms: float) -> float:
    raw = os.getenv(var_name)
    if not raw:
        return default_ms
    try:
        return float(raw)
    except ValueError:
        return default_ms


MAX_WIDE_MAP_MS = _budget_from_env("KEYSORT_MAX_WIDE_MAP_MS", 1500.0)
MAX_DEEP_CHAIN_MS = _budget_from_env("KEYSORT_MAX_DEEP_CHAIN_MS", 1000.0)
MAX_SHARED_DAG_MS = _budget_from_env("KEYSORT_MAX_SHARED_DAG_MS", 1000.0)

WIDE_MAP_KEYS = 10_000
DEEP_CHAIN_DEPTH = 50_000
SHARED_DAG_LAYERS = 200


def build_wide_map(n: int = WIDE_MAP_KEYS, seed: int = 7) -> Dict[str, Any]:
    """Flat mapping mixing index keys and word keys in shuffled order."""
    rng = random.Random(seed)
    keys = [str(i) for i in range(n // 2)] + [f"key_{i:05d}" for i in range(n - n // 2)]
    rng.shuffle(keys)
    return {k: i for i, k in enumerate(keys)}


def build_deep_chain(depth: int = DEEP_CHAIN_DEPTH) -> Dict[str, Any]:
    """Nested mappings far deeper than the interpreter recursion limit."""
    root: Dict[str, Any] = {}
    node = root
    for i in range(depth):
        child: Dict[str, Any] = {}
        node["z"] = i
        node["next"] = child
        node = child
    return root


def build_shared_dag(layers: int = SHARED_DAG_LAYERS) -> Dict[str, Any]:
    """Each layer references the previous one twice (exponential if unrolled)."""
    node: Dict[str, Any] = {"leaf": True}
    for i in range(layers):
        node = {"right": node, "left": node, "depth": i}
    return node
