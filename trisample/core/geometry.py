from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence, Tuple

import numpy as np

from ..sample.triangle import DEFAULT_NB_POINTS, DEFAULT_NBSTEP


@dataclass
class TriangleSpec:
    """
    Declarative triangle sampling specification.

    Examples:
      {"vertices": [[0,0],[2,0],[0,2]], "nbstep": 2}
      {"vertices": [v1, v2, v3], "random": True, "nb_points": 600, "seed": 7}
    """
    vertices: Sequence[Any]
    nbstep: int = DEFAULT_NBSTEP
    random: bool = False
    nb_points: int = DEFAULT_NB_POINTS
    include_vertices: bool = True
    seed: Optional[int] = None

    @property
    def mode(self) -> str:
        return "random" if self.random else "regular"


@dataclass
class TriangleSampleAsset:
    """
    Result of one sampling call plus metadata.

    Attributes:
      - mesh: MeshData (points, and faces in regular mode)
      - bounds: (min, max) per coordinate
      - meta: mode, nbstep / nb_points, seed, source vertices
    """
    mesh: Any  # MeshData
    bounds: Tuple[np.ndarray, np.ndarray]
    meta: Dict[str, Any] = field(default_factory=dict)

    @property
    def points(self) -> np.ndarray:
        return self.mesh.vertices

    @property
    def triangles(self) -> Optional[np.ndarray]:
        # random-mode points carry no triangulation
        return self.mesh.faces if self.meta.get("mode") == "regular" else None

    def bbox_size(self) -> np.ndarray:
        return self.bounds[1] - self.bounds[0]

    def center(self) -> np.ndarray:
        return 0.5 * (self.bounds[0] + self.bounds[1])

    def summary(self) -> Dict[str, Any]:
        return {
            "mode": self.meta.get("mode"),
            "dim": self.mesh.dim,
            "n_points": self.mesh.n_vertices,
            "n_triangles": self.mesh.n_faces,
            "bounds": (self.bounds[0].tolist(), self.bounds[1].tolist()),
            "meta_keys": list(self.meta.keys()),
        }
