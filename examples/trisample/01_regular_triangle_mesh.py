import numpy as np

from trisample import sample_triangle
from trisample.core.mesh import MeshData
from trisample.io.trimesh_bridge import TrimeshBridge

# 3D regular sampling + mesh
V1 = np.array([-2, 3, 7])
V2 = np.array([8, -1, 5])
V3 = np.array([3, 1, -3])
nstep = 16

V, T = sample_triangle(V1, V2, V3, nstep)

g = MeshData(vertices=V, faces=T)
tm = TrimeshBridge().to_trimesh(g)

print("points:", V.shape, "triangles:", T.shape)
print("mesh area:", tm.area, "sum of faces:", g.face_areas().sum())
