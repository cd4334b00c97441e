import numpy as np

from trisample import sample_triangle

# 4D random sampling, first three coordinates kept as a 3D projection
V1 = np.array([-2, 3, 7, 1])
V2 = np.array([8, -1, 5, 2])
V3 = np.array([3, 1, -3, -2])
nstep = 16
option_random = True

V = sample_triangle(V1, V2, V3, nstep, option_random, 600, seed=0)
P = V[:, :3]

print("points:", V.shape)
print("first rows are the vertices:", np.array_equal(V[:3], np.stack([V1, V2, V3])))
print("3D projection min/max", P.min(axis=0), P.max(axis=0))
