import numpy as np

from glmath.vector2 import Vector2
from glmath.vector3 import Vector3
from glmath.vector4 import Vector4

seed=0xf00d
rng = np.random.default_rng(seed)


def random_vector2(low:float=-1e3, high:float=1e3) -> Vector2:
    """Vector2 with components drawn uniformly from [low, high)."""
    return Vector2(*rng.uniform(low, high, size=2).tolist())


def random_vector3(low:float=-1e3, high:float=1e3) -> Vector3:
    return Vector3(*rng.uniform(low, high, size=3).tolist())


def random_vector4(low:float=-1e3, high:float=1e3) -> Vector4:
    return Vector4(*rng.uniform(low, high, size=4).tolist())


def random_scale(low:float=-10, high:float=10) -> tuple[float, float]:
    """Independent per-axis scale factors, either of which may be negative."""
    sx, sy = rng.uniform(low, high, size=2).tolist()
    return sx, sy
