"""Barycentric sampling and interpolation on a single triangle."""
from __future__ import annotations

from typing import Optional, Tuple

import numpy as np


def sample_barycentric_uv(n: int, rng: Optional[np.random.Generator] = None) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Sample barycentric weights (u, v, w) uniformly over a triangle's area.

    Uses the reflection trick:
      r1, r2 ~ U(0,1)
      if r1 + r2 > 1: r1, r2 = 1 - r1, 1 - r2
      u = r1
      v = r2
      w = 1 - u - v
    """
    rng = rng or np.random.default_rng()
    r1 = rng.random(n)
    r2 = rng.random(n)

    flip = (r1 + r2) > 1.0
    r1[flip] = 1.0 - r1[flip]
    r2[flip] = 1.0 - r2[flip]

    u = r1
    v = r2
    w = np.maximum(1.0 - u - v, 0.0)
    return u, v, w


def combine_barycentric(
    v1: np.ndarray,
    v2: np.ndarray,
    v3: np.ndarray,
    w1: np.ndarray,
    w2: np.ndarray,
    w3: np.ndarray,
) -> np.ndarray:
    """
    Affine blend w1*v1 + w2*v2 + w3*v3.

    v*: shape (N,)
    w*: shape (n,)
    returns: (n, N) float64
    """
    pts = (w1[:, None] * v1[None, :]) + (w2[:, None] * v2[None, :]) + (w3[:, None] * v3[None, :])
    return pts.astype(np.float64)


def barycentric_weights(points: np.ndarray, v1: np.ndarray, v2: np.ndarray, v3: np.ndarray) -> np.ndarray:
    """
    Recover (w1, w2, w3) for points lying in the plane of (v1, v2, v3).

    Works in any dimension N >= 2 by solving the (N, 2) edge system in the
    least-squares sense. The triangle must not be degenerate.

    points: (n, N)
    returns: (n, 3)
    """
    points = np.atleast_2d(np.asarray(points, dtype=np.float64))
    E = np.stack([v2 - v1, v3 - v1], axis=1)  # (N, 2)
    rhs = (points - v1[None, :]).T  # (N, n)
    st, *_ = np.linalg.lstsq(E, rhs, rcond=None)
    s, t = st[0], st[1]
    return np.stack([1.0 - s - t, s, t], axis=1)
