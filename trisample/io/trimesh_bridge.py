from __future__ import annotations

from typing import Any

import numpy as np

from ..core.mesh import MeshData
from ..errors import InvalidDimension


def _as_xyz(vertices: np.ndarray) -> np.ndarray:
    d = vertices.shape[1]
    if d > 3:
        raise InvalidDimension(f"trimesh holds 3D geometry only, got N={d}")
    if d == 3:
        return vertices
    # planar samples go to z=0
    out = np.zeros((vertices.shape[0], 3), dtype=np.float64)
    out[:, :d] = vertices
    return out


class TrimeshBridge:
    """
    MeshData <-> trimesh conversion for 2D/3D samples.

    Regular samples become trimesh.Trimesh; random samples have no faces
    and become trimesh.PointCloud.
    """

    def to_trimesh(self, mesh: MeshData) -> Any:
        import trimesh

        if not mesh.has_faces:
            raise ValueError("MeshData has no triangles; use to_point_cloud for random samples.")
        return trimesh.Trimesh(vertices=_as_xyz(mesh.vertices), faces=mesh.faces, process=False)

    def to_point_cloud(self, mesh: MeshData) -> Any:
        import trimesh

        return trimesh.PointCloud(_as_xyz(mesh.vertices))

    def from_trimesh(self, tm: Any) -> MeshData:
        import trimesh

        if isinstance(tm, trimesh.PointCloud):
            return MeshData(vertices=np.asarray(tm.vertices))
        if not isinstance(tm, trimesh.Trimesh):
            raise TypeError(f"Expected trimesh.Trimesh or trimesh.PointCloud, got {type(tm).__name__}")
        return MeshData(
            vertices=tm.vertices.view(np.ndarray),
            faces=tm.faces.view(np.ndarray),
        )
