from glmath.vector import Vector, component


class Vector3(Vector):
    """3D vector of single-precision components."""

    RANK = 3
    __slots__ = ()

    x = component(0, "The X component.")
    y = component(1, "The Y component.")
    z = component(2, "The Z component.")

    def __init__(self, x:float=0.0, y:float=0.0, z:float=0.0):
        self._store(x, y, z)
