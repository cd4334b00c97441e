# trisample/__init__.py

"""
trisample

Sampling of a triangle embedded in N-dimensional space (N >= 2).

- Regular grid along the (V1V2) and (V1V3) edge directions, with the
  triangle index matrix tiling it (every element a homothetic copy of the
  parent triangle)
- Area-uniform random points, optionally including the three vertices
- Declarative specs -> sample assets, and a trimesh bridge for 2D/3D output

Design principles:
- numpy in, numpy out; inputs are never modified
- no global random state: pass a Generator or a seed
- expose a small stable API surface from `__init__`
"""

from .errors import TriangleSampleError, InvalidDimension, InvalidParameter
from .sample.triangle import sample_triangle
from .core.geometry import TriangleSpec, TriangleSampleAsset
from .core.mesh import MeshData
from .core.registry import build_triangle_asset, load_triangle_asset

__all__ = [
    "TriangleSampleError",
    "InvalidDimension",
    "InvalidParameter",
    "sample_triangle",
    "TriangleSpec",
    "TriangleSampleAsset",
    "MeshData",
    "build_triangle_asset",
    "load_triangle_asset",
]
