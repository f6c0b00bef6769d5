from glmath.vector import Vector, component


class Vector4(Vector):
    """4D vector of single-precision components."""

    RANK = 4
    __slots__ = ()

    x = component(0, "The X component.")
    y = component(1, "The Y component.")
    z = component(2, "The Z component.")
    w = component(3, "The W component.")

    def __init__(self, x:float=0.0, y:float=0.0, z:float=0.0, w:float=0.0):
        self._store(x, y, z, w)
