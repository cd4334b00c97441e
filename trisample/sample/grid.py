"""Regular triangular grid: point enumeration and triangle indexing.

Grid node (i, j), with i, j >= 0 and i + j <= n, sits i steps from V1
towards V2 and j steps towards V3. Nodes are enumerated row-major:

    for i in 0..n:
        for j in 0..n-i:
            ...

which gives T(n+1) = (n+1)(n+2)/2 nodes, V1 at (0, 0), V2 at (n, 0) and
V3 at (0, n).

For V1=(0,0), V2=(2,0), V3=(0,2), n=2 this emits (0,0) (0,1) (0,2) (1,0)
(1,1) (2,0). The order (0,0) (1,0) (2,0) (0,1) (1,1) (0,2) sometimes quoted
for that case walks towards V2 in the inner loop, which cannot be squared
with i-outer enumeration and V2 at (n, 0); keep the i-outer order.
"""
from __future__ import annotations

from typing import Optional

import numpy as np


def triangular_number(k: int) -> int:
    return k * (k + 1) // 2


def grid_index_table(n: int) -> np.ndarray:
    """
    Lookup table mapping grid node (i, j) to its linear position.

    returns: (n+1, n+1) int64, -1 where i + j > n
    """
    table = np.full((n + 1, n + 1), -1, dtype=np.int64)
    k = 0
    for i in range(n + 1):
        for j in range(n + 1 - i):
            table[i, j] = k
            k += 1
    return table


def regular_grid_weights(n: int) -> np.ndarray:
    """
    Barycentric weights on (V1, V2, V3) for every grid node, in enumeration order.

    returns: (T(n+1), 3) float64
    """
    ij = np.array([(i, j) for i in range(n + 1) for j in range(n + 1 - i)], dtype=np.int64)
    i, j = ij[:, 0], ij[:, 1]
    # (n - i - j) / n rather than 1 - i/n - j/n: exact zero on the V2V3 edge
    w1 = (n - i - j) / n
    w2 = i / n
    w3 = j / n
    return np.stack([w1, w2, w3], axis=1).astype(np.float64)


def grid_triangles(n: int, table: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Tile the n-step grid with n^2 triangles, each a scaled copy of (V1, V2, V3).

    Row i holds n - i "upward" triangles (i,j) (i+1,j) (i,j+1) and, between
    them, n - i - 1 "downward" ones (i+1,j) (i+1,j+1) (i,j+1). Both kinds
    keep the parent's winding.

    returns: (n^2, 3) int64 indices into the enumeration order
    """
    if table is None:
        table = grid_index_table(n)

    faces = []
    for i in range(n):
        last = n - 1 - i
        for j in range(last + 1):
            faces.append((table[i, j], table[i + 1, j], table[i, j + 1]))
            if j < last:
                faces.append((table[i + 1, j], table[i + 1, j + 1], table[i, j + 1]))

    return np.asarray(faces, dtype=np.int64).reshape(-1, 3)
