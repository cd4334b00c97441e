from .geometry import TriangleSpec, TriangleSampleAsset
from .mesh import MeshData
from .registry import build_triangle_asset, load_triangle_asset

__all__ = [
    "TriangleSpec",
    "TriangleSampleAsset",
    "MeshData",
    "build_triangle_asset",
    "load_triangle_asset",
]
