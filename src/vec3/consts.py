# consts.py
from .Vector3 import Vector3


class _ConstantVector3(Vector3):
    """A shared Vector3 whose components cannot be changed."""

    def _assign(self, x, y, z):
        raise AttributeError(f"{self!r} is a constant, use copy() for a mutable vector")


X_AXIS = _ConstantVector3(1.0, 0.0, 0.0)
Y_AXIS = _ConstantVector3(0.0, 1.0, 0.0)
Z_AXIS = _ConstantVector3(0.0, 0.0, 1.0)
ZERO = _ConstantVector3(0.0, 0.0, 0.0)
ONE = _ConstantVector3(1.0, 1.0, 1.0)
