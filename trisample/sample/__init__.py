from .barycentric import (
    sample_barycentric_uv,
    combine_barycentric,
    barycentric_weights,
)
from .grid import (
    triangular_number,
    grid_index_table,
    regular_grid_weights,
    grid_triangles,
)
from .triangle import (
    DEFAULT_NBSTEP,
    DEFAULT_NB_POINTS,
    sample_triangle,
)

__all__ = [
    "sample_barycentric_uv",
    "combine_barycentric",
    "barycentric_weights",
    "triangular_number",
    "grid_index_table",
    "regular_grid_weights",
    "grid_triangles",
    "DEFAULT_NBSTEP",
    "DEFAULT_NB_POINTS",
    "sample_triangle",
]
