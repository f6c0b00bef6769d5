import numpy as np

from glmath import logger
from glmath.vector import V, Vector, component, to_float32, zero_extended


class Vector2(Vector):
    """2D vector of single-precision components.

    Construct from two numbers, or from any vector of rank 2 or higher, in
    which case the trailing components are dropped without being looked at:

    >>> Vector2(3, 4)
    Vector2(3.0, 4.0)
    >>> Vector2(Vector3(1, 2, 99))
    Vector2(1.0, 2.0)

    Mixed-rank ``add``/``sub`` treat this vector as ``(x, y, 0, ...)`` and
    return a vector of the operand's rank. ``dot`` only ever reads the
    operand's ``x`` and ``y``.

    Nothing here raises on odd floats. Division by zero, NaN and infinities
    follow IEEE-754.
    """

    RANK = 2
    __slots__ = ()

    x = component(0, "The X component.")
    y = component(1, "The Y component.")

    def __init__(self, x:float|Vector=0.0, y:float=0.0):
        if isinstance(x, Vector):
            self._v = x.head(2)
        else:
            self._store(x, y)

    ### ARITHMETIC ###

    def add(self, right:V) -> V:
        """Component-wise sum, with the rank of ``right``."""
        return zero_extended(np.add, self, right)

    def sub(self, right:V) -> V:
        """Component-wise difference, with the rank of ``right``.

        Components this vector lacks come out negated: ``(x-rx, y-ry, -rz)``.
        """
        return zero_extended(np.subtract, self, right)

    def dot(self, right:Vector) -> float:
        """``x*rx + y*ry``. Any z or w of ``right`` is ignored."""
        if not isinstance(right, Vector):
            raise TypeError(f"Expected a vector operand, got {type(right).__name__}")
        with np.errstate(all="ignore"):
            p = self._v * right._v[:2]
            return float(p[0] + p[1])

    def scale(self, sx:float, sy:float) -> "Vector2":
        """Per-axis scaling, ``(x*sx, y*sy)``."""
        with np.errstate(all="ignore"):
            return Vector2._from_array(self._v * np.array([to_float32(sx), to_float32(sy)]))

    ### MAGNITUDE ###

    def _length_squared(self) -> np.float32:
        with np.errstate(all="ignore"):
            return self._v[0] * self._v[0] + self._v[1] * self._v[1]

    def _length(self) -> np.float32:
        with np.errstate(all="ignore"):
            return np.sqrt(self._length_squared())

    @property
    def length_squared(self) -> float:
        """Square of the length. Cheaper than ``length`` for comparisons."""
        return float(self._length_squared())

    @property
    def length(self) -> float:
        return float(self._length())

    def normalize(self) -> "Vector2":
        """Unit vector in the same direction.

        A zero vector gives NaN components (0/0) rather than an error.
        """
        length = self._length()
        if length == 0:
            logger.debug("Normalizing zero-length vector %s", self)
        with np.errstate(all="ignore"):
            return Vector2._from_array(self._v / length)

    ### OPERATORS ###

    def __add__(self, right):
        if not isinstance(right, Vector):
            return NotImplemented
        return self.add(right)

    def __sub__(self, right):
        if not isinstance(right, Vector):
            return NotImplemented
        return self.sub(right)
