import numpy as np
import pytest

from trisample import (
    InvalidDimension,
    InvalidParameter,
    TriangleSampleAsset,
    TriangleSpec,
    build_triangle_asset,
    load_triangle_asset,
)


def test_build_regular_from_dict():
    asset = build_triangle_asset({"vertices": [[0, 0], [2, 0], [0, 2]], "nbstep": 2})
    assert asset.mesh.n_vertices == 6
    assert asset.mesh.n_faces == 4
    assert asset.triangles is not None
    assert np.isclose(asset.mesh.face_areas().sum(), 2.0)
    assert np.array_equal(asset.bbox_size(), [2.0, 2.0])
    assert np.array_equal(asset.center(), [1.0, 1.0])
    info = asset.summary()
    assert info["mode"] == "regular"
    assert info["dim"] == 2
    assert info["n_triangles"] == 4
    assert asset.meta["nbstep"] == 2


def test_build_from_separate_vertex_keys():
    asset = build_triangle_asset({"v1": [0, 0, 0], "v2": [1, 0, 0], "v3": [0, 1, 0], "nbstep": 3})
    assert asset.points.shape == (10, 3)


def test_build_random_asset(rng_seed):
    spec = TriangleSpec(vertices=[[0, 0, 0, 0], [1, 0, 0, 0], [0, 1, 0, 1]], random=True, nb_points=25, seed=rng_seed)
    asset = build_triangle_asset(spec)
    assert spec.mode == "random"
    assert asset.points.shape == (25, 4)
    assert asset.triangles is None
    assert asset.mesh.faces.shape == (0, 3)
    assert asset.meta["seed"] == rng_seed
    assert np.array_equal(build_triangle_asset(spec).points, asset.points)


def test_build_rejects_bad_specs():
    with pytest.raises(ValueError):
        build_triangle_asset({"vertices": [[0, 0], [1, 0], [0, 1]], "colour": "red"})
    with pytest.raises(ValueError):
        build_triangle_asset({"v1": [0, 0], "v2": [1, 0]})
    with pytest.raises(InvalidParameter):
        build_triangle_asset({"vertices": [[0, 0], [1, 0]]})
    with pytest.raises(InvalidParameter):
        build_triangle_asset({"vertices": [[0, 0], [1, 0], [0, 1]], "nbstep": 1})
    with pytest.raises(InvalidDimension):
        build_triangle_asset({"vertices": [[0, 0], [1, 0], [0, 1, 2]]})


def test_load_triangle_asset():
    asset = load_triangle_asset(([0, 0], [1, 0], [0, 1]))
    assert asset.meta["nbstep"] == 20
    assert asset.mesh.n_faces == 400
    assert load_triangle_asset(asset) is asset
    assert isinstance(load_triangle_asset({"vertices": [[0, 0], [1, 0], [0, 1]], "nbstep": 2}), TriangleSampleAsset)
    with pytest.raises(TypeError):
        load_triangle_asset(42)


def test_load_triangle_asset_from_array():
    verts = np.array([[0.0, 0.0, 1.0], [1.0, 0.0, 1.0], [0.0, 1.0, 1.0]])
    asset = load_triangle_asset(verts)
    assert asset.points.shape == (231, 3)
    assert np.array_equal(asset.points[0], verts[0])
    with pytest.raises(TypeError):
        load_triangle_asset(np.zeros((4, 3)))
