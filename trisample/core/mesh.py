from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np


@dataclass
class MeshData:
    """
    Lightweight triangle-sample container (numpy-only).

    vertices: (P,N) float64, any N >= 2
    faces:    (M,3) int64, (0,3) when the points carry no triangulation
    """
    vertices: np.ndarray
    faces: Optional[np.ndarray] = None

    def __post_init__(self):
        self.vertices = np.ascontiguousarray(self.vertices, dtype=np.float64)
        if self.faces is None:
            self.faces = np.zeros((0, 3), dtype=np.int64)
        self.faces = np.ascontiguousarray(self.faces, dtype=np.int64).reshape(-1, 3)

    @property
    def n_vertices(self) -> int:
        return int(self.vertices.shape[0])

    @property
    def n_faces(self) -> int:
        return int(self.faces.shape[0])

    @property
    def dim(self) -> int:
        return int(self.vertices.shape[1])

    @property
    def has_faces(self) -> bool:
        return self.n_faces > 0

    def bounds(self) -> Tuple[np.ndarray, np.ndarray]:
        return self.vertices.min(axis=0), self.vertices.max(axis=0)

    def triangles(self) -> np.ndarray:
        """Corner coordinates per face, shape (M,3,N)."""
        return self.vertices[self.faces]

    def face_areas(self) -> np.ndarray:
        """
        Face areas in any dimension, via the Gram determinant of the two edges.
        """
        tri = self.triangles()
        e1 = tri[:, 1] - tri[:, 0]
        e2 = tri[:, 2] - tri[:, 0]
        g11 = np.einsum("ij,ij->i", e1, e1)
        g22 = np.einsum("ij,ij->i", e2, e2)
        g12 = np.einsum("ij,ij->i", e1, e2)
        return 0.5 * np.sqrt(np.maximum(g11 * g22 - g12 * g12, 0.0))

    def copy(self) -> "MeshData":
        return MeshData(vertices=self.vertices.copy(), faces=self.faces.copy())
