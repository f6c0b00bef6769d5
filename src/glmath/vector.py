import ctypes
import numbers
from typing import Callable, ClassVar, TypeVar

import numpy as np
from numpy.typing import NDArray

from glmath import logger
from glmath.fmt import tuple_format

# Padding used when a lower-rank vector meets a higher-rank operand.
# -0.0 is the IEEE-754 additive identity: -0.0 + z == z and -0.0 - z == -z,
# bit for bit, signed zeros included.
EXTENSION = np.float32(-0.0)

V = TypeVar("V", bound="Vector")


def to_float32(value) -> np.float32:
    """Round a real number to single precision.

    Out-of-range values become +/-inf, the same as a native float cast.
    """
    if not isinstance(value, numbers.Real):
        raise TypeError(f"Vector components must be real numbers, got {type(value).__name__}")
    with np.errstate(over="ignore"):
        return np.float32(value)


def component(index:int, doc:str) -> property:
    def fget(self) -> float:
        return float(self._v[index])

    def fset(self, value:float):
        self._v[index] = to_float32(value)

    return property(fget, fset, doc=doc)


class Vector:
    """ Base for the fixed-rank float32 vector types.

        Components live in a contiguous float32 array of length RANK with no
        padding, so the storage is bit-compatible with a native ``float[RANK]``.
        Every operation returns a new instance; nothing shares storage with an
        operand.
    """

    RANK:ClassVar[int]
    __slots__ = ("_v",)

    _v:NDArray[np.float32]

    @classmethod
    def _from_array(cls:type[V], a) -> V:
        self = cls.__new__(cls)
        self._v = np.array(a, dtype=np.float32, copy=True)
        if self._v.shape != (cls.RANK,):
            raise ValueError(f"{cls.__name__} needs {cls.RANK} components, got shape {self._v.shape}")
        return self

    @classmethod
    def from_buffer(cls:type[V], buffer, offset:int=0) -> V:
        """Read RANK sequential float32 values from a buffer-protocol object.

        The new vector owns its storage; later writes to ``buffer`` do not
        reach it.
        """
        return cls._from_array(np.frombuffer(buffer, dtype=np.float32, count=cls.RANK, offset=offset))

    def _store(self, *values):
        self._v = np.array([to_float32(v) for v in values], dtype=np.float32)

    def head(self, n:int) -> NDArray[np.float32]:
        """Copy of the first ``n`` components."""
        return self._v[:n].copy()

    def extend(self, rank:int) -> NDArray[np.float32]:
        """Components padded with the additive identity up to ``rank``."""
        a = np.full(rank, EXTENSION, dtype=np.float32)
        a[:self.RANK] = self._v
        return a

    def copy(self:V) -> V:
        return self._from_array(self._v)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def as_buffer(self) -> NDArray[np.float32]:
        """Writable view of shape (RANK,) over this vector's own storage.

        Writes through the view change the vector. The view is tied to this
        instance: a copy of the vector has separate storage.
        """
        return self._v.view()

    def as_pointer(self) -> "ctypes._Pointer[ctypes.c_float]":
        """Raw ``float*`` to the first component, the rest following in order.

        Valid only while this vector is alive. Do not keep it past the
        vector's lifetime, hand it to another thread that may outlive it, or
        expect it to follow a copy. None of this is checked.
        """
        ptr = self._v.ctypes.data_as(ctypes.POINTER(ctypes.c_float))
        logger.debug("Exposing float[%s] of %s at 0x%x", self.RANK, type(self).__name__, self._v.ctypes.data)
        return ptr

    @property
    def nbytes(self) -> int:
        return self._v.nbytes

    def __iter__(self):
        return iter(self._v.tolist())

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return bool((self._v == other._v).all())

    __hash__ = None

    def __str__(self):
        return tuple_format(self._v)

    def __repr__(self):
        return f"{type(self).__name__}{tuple_format(self._v)}"


def zero_extended(op:Callable, left:Vector, right:V) -> V:
    """Apply ``op`` component-wise to ``left`` padded up to the rank of ``right``.

    The result has the type, and so the rank, of ``right``.
    """
    if not isinstance(right, Vector):
        raise TypeError(f"Expected a vector operand, got {type(right).__name__}")
    if right.RANK < left.RANK:
        raise TypeError(f"Cannot combine {type(left).__name__} with lower-rank {type(right).__name__}")
    with np.errstate(all="ignore"):
        return type(right)._from_array(op(left.extend(right.RANK), right._v))
