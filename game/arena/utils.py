"""
Utility functions for arena mechanics
"""

from __future__ import annotations
import math
import random
from typing import Tuple, Optional
import numpy as np


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def vec_len(x: float, y: float) -> float:
    """Calculate vector length (magnitude)"""
    return math.hypot(x, y)


def normalize(x: float, y: float, eps: float = 1e-8) -> Tuple[float, float]:
    """Normalize a vector to unit length, (0, 0) for a degenerate vector"""
    l = math.hypot(x, y)
    if l < eps:
        return 0.0, 0.0
    return x / l, y / l


def aim_direction(dx: float, dy: float, eps: float = 1e-8) -> Tuple[float, float]:
    """Unit aim direction; falls back to +x when the target is on top of the shooter"""
    if dx * dx + dy * dy <= eps * eps:
        return 1.0, 0.0
    return normalize(dx, dy)


def point_in_circle(px: float, py: float, cx: float, cy: float, r: float) -> bool:
    """Strict point-in-circle test (distance < r)"""
    dx = px - cx
    dy = py - cy
    return (dx * dx + dy * dy) < (r * r)


def in_bounds(x: float, y: float, width: float, height: float) -> bool:
    """Inclusive rectangle test: points on the edge are inside"""
    return 0.0 <= x <= width and 0.0 <= y <= height


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)
