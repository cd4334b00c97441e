from __future__ import annotations

import logging
from dataclasses import fields
from typing import Any, Dict

import numpy as np

from ..errors import InvalidParameter
from ..sample.triangle import as_vertices, sample_triangle
from .geometry import TriangleSampleAsset, TriangleSpec
from .mesh import MeshData

logger = logging.getLogger(__name__)

_SPEC_KEYS = {f.name for f in fields(TriangleSpec)}


def _spec_from_dict(d: Dict[str, Any]) -> TriangleSpec:
    d = dict(d)
    if "vertices" not in d:
        vs = [d.pop(k, None) for k in ("v1", "v2", "v3")]
        if any(v is None for v in vs):
            raise ValueError("Spec needs 'vertices' or all of 'v1', 'v2', 'v3'.")
        d["vertices"] = vs
    unknown = set(d) - _SPEC_KEYS
    if unknown:
        raise ValueError(f"Unknown TriangleSpec keys: {sorted(unknown)}")
    return TriangleSpec(**d)


def build_triangle_asset(spec: Dict[str, Any] | TriangleSpec) -> TriangleSampleAsset:
    """
    Build a TriangleSampleAsset from a TriangleSpec or spec dict.

    A dict may give the vertices as "vertices": [v1, v2, v3] or as
    separate "v1" / "v2" / "v3" keys.
    """
    if isinstance(spec, dict):
        spec = _spec_from_dict(spec)

    if len(spec.vertices) != 3:
        raise InvalidParameter(f"A triangle needs exactly 3 vertices, got {len(spec.vertices)}")
    v1, v2, v3 = as_vertices(*spec.vertices)

    # ---------- Sample ----------
    if spec.random:
        pts = sample_triangle(
            v1, v2, v3,
            spec.nbstep,
            True,
            spec.nb_points,
            include_vertices=spec.include_vertices,
            seed=spec.seed,
        )
        mesh = MeshData(vertices=pts)
    else:
        pts, faces = sample_triangle(v1, v2, v3, spec.nbstep)
        mesh = MeshData(vertices=pts, faces=faces)

    # ---------- Build asset ----------
    meta: Dict[str, Any] = {
        "mode": spec.mode,
        "source": (v1.tolist(), v2.tolist(), v3.tolist()),
    }
    if spec.random:
        meta.update(nb_points=int(spec.nb_points), include_vertices=spec.include_vertices, seed=spec.seed)
    else:
        meta.update(nbstep=int(spec.nbstep))

    bmin, bmax = mesh.bounds()
    logger.debug("built %s triangle asset: %d points, %d triangles", spec.mode, mesh.n_vertices, mesh.n_faces)
    return TriangleSampleAsset(mesh=mesh, bounds=(bmin, bmax), meta=meta)


def load_triangle_asset(obj: Any) -> TriangleSampleAsset:
    """
    Convenience wrapper:
      - TriangleSampleAsset -> returned as-is
      - TriangleSpec / dict -> built
      - (v1, v2, v3) sequence or (3, N) array -> regular sampling with defaults
    """
    if isinstance(obj, TriangleSampleAsset):
        return obj

    if isinstance(obj, (TriangleSpec, dict)):
        return build_triangle_asset(obj)

    if isinstance(obj, (list, tuple, np.ndarray)) and len(obj) == 3:
        return build_triangle_asset(TriangleSpec(vertices=list(obj)))

    raise TypeError(f"Unsupported triangle input type: {type(obj)}")
