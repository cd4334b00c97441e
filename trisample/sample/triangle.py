"""
Triangle sampling in N dimensions.

Two modes:
  - regular: an nbstep-step grid along the (V1V2) and (V1V3) edge
    directions plus the nbstep^2 triangles tiling it. Every small triangle
    is a homothetic copy of (V1, V2, V3), either upward or downward.
  - random: nb_points area-uniform points, V1, V2, V3 first by default.
"""
from __future__ import annotations

import logging
import numbers
from typing import Any, Optional, Tuple, Union

import numpy as np

from ..errors import InvalidDimension, InvalidParameter
from .barycentric import combine_barycentric, sample_barycentric_uv
from .grid import grid_index_table, grid_triangles, regular_grid_weights

logger = logging.getLogger(__name__)

DEFAULT_NBSTEP = 20
DEFAULT_NB_POINTS = 200


def as_vertices(v1: Any, v2: Any, v3: Any) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Coerce three vertices to float64 vectors of a common length N >= 2.

    Row or column vectors ((N,1) / (1,N)) are flattened. Inputs are copied,
    never modified.
    """
    out = []
    for name, v in (("V1", v1), ("V2", v2), ("V3", v3)):
        try:
            arr = np.array(v, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise InvalidDimension(f"{name} must be a coordinate vector of numbers, got {v!r}") from e
        if arr.ndim == 2 and 1 in arr.shape:
            arr = arr.reshape(-1)
        if arr.ndim != 1:
            raise InvalidDimension(f"{name} must be a coordinate vector, got shape {arr.shape}")
        out.append(arr)

    dims = [a.shape[0] for a in out]
    if len(set(dims)) != 1:
        raise InvalidDimension(f"V1, V2, V3 must share one dimension, got {dims}")
    if dims[0] < 2:
        raise InvalidDimension(f"Vertices need at least 2 coordinates, got {dims[0]}")
    return out[0], out[1], out[2]


def as_count(value: Any, name: str, minimum: int) -> int:
    """Validate an integer count >= minimum (integral floats accepted, bools refused)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameter(f"{name} must be an integer, got {type(value).__name__}")
    if not isinstance(value, numbers.Integral):
        if not float(value).is_integer():
            raise InvalidParameter(f"{name} must be an integer, got {value}")
    value = int(value)
    if value < minimum:
        raise InvalidParameter(f"{name} must be >= {minimum}, got {value}")
    return value


def _sample_regular(v1: np.ndarray, v2: np.ndarray, v3: np.ndarray, nbstep: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Regular grid over a validated triangle.

    returns: points (T(nbstep+1), N), triangles (nbstep^2, 3)
    """
    W = regular_grid_weights(nbstep)
    pts = combine_barycentric(v1, v2, v3, W[:, 0], W[:, 1], W[:, 2])

    table = grid_index_table(nbstep)
    # corners are written verbatim, not re-derived through arithmetic
    pts[table[0, 0]] = v1
    pts[table[nbstep, 0]] = v2
    pts[table[0, nbstep]] = v3

    faces = grid_triangles(nbstep, table)
    return pts, faces


def _sample_random(
    v1: np.ndarray,
    v2: np.ndarray,
    v3: np.ndarray,
    nb_points: int,
    include_vertices: bool = True,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """
    Area-uniform random points over a validated triangle.

    With include_vertices, rows 0..2 are V1, V2, V3 and the remaining
    nb_points - 3 rows are random.

    returns: (nb_points, N)
    """
    n_rand = nb_points - 3 if include_vertices else nb_points
    u, v, w = sample_barycentric_uv(n_rand, rng=rng)
    pts = combine_barycentric(v1, v2, v3, u, v, w)
    if include_vertices:
        pts = np.concatenate([np.stack([v1, v2, v3], axis=0), pts], axis=0)
    return pts


def sample_triangle(
    v1: Any,
    v2: Any,
    v3: Any,
    nbstep: Any = DEFAULT_NBSTEP,
    random: bool = False,
    nb_points: Any = DEFAULT_NB_POINTS,
    *,
    include_vertices: bool = True,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
) -> Union[Tuple[np.ndarray, np.ndarray], np.ndarray]:
    """
    Sample the (V1, V2, V3) triangle, in any dimension N >= 2.

    Call forms:
      points, triangles = sample_triangle(V1, V2, V3)              # nbstep=20
      points, triangles = sample_triangle(V1, V2, V3, nbstep)
      points = sample_triangle(V1, V2, V3, nbstep, True)           # 200 points
      points = sample_triangle(V1, V2, V3, nbstep, True, nb_points)

    Regular mode returns (points, triangles): T(nbstep+1) points enumerated
    row-major over (i, j), i steps towards V2 and j towards V3, and an
    (nbstep^2, 3) int64 triangle index matrix.

    Random mode ignores nbstep and returns only the (nb_points, N) point
    array. Use rng (a numpy Generator) or seed, not both, to make it
    reproducible; the global numpy random state is never used.

    Raises:
      InvalidDimension: vertex lengths differ, N < 2, or a vertex is not a
        vector of numbers.
      InvalidParameter: nbstep <= 1 (regular mode), nb_points < 3 with
        include_vertices or <= 0 without, a non-integer count, or both rng
        and seed given in random mode.
    """
    a, b, c = as_vertices(v1, v2, v3)

    if random:
        n = as_count(nb_points, "nb_points", 3 if include_vertices else 1)
        if rng is not None and seed is not None:
            raise InvalidParameter("Pass either rng or seed, not both")
        if rng is None:
            rng = np.random.default_rng(seed)
        logger.debug("random triangle sampling: N=%d nb_points=%d include_vertices=%s", a.shape[0], n, include_vertices)
        return _sample_random(a, b, c, n, include_vertices=include_vertices, rng=rng)

    n = as_count(nbstep, "nbstep", 2)
    logger.debug("regular triangle sampling: N=%d nbstep=%d", a.shape[0], n)
    return _sample_regular(a, b, c, n)
