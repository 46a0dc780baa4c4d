# Vector3.py
import logging
import math
import random
import re
from numbers import Real
from typing import Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

from .errors import InvalidSequenceError, ParseVector3Error

logger = logging.getLogger(__name__)

Scalar = Union[int, float]

# matches both repr "Vector3(x, y, z)" and str "(x, y, z)"
_VECTOR3_PATTERN = re.compile(r"^\s*(?:Vector3)?\((?P<body>[^()]*)\)\s*$")


def _divide(numerator: Scalar, denominator: Scalar) -> Scalar:
    """
    Divide using IEEE 754 rules so that a zero denominator gives inf or nan.

    Plain Python division raises ZeroDivisionError, and OverflowError for ints
    past the float range, so those cases go through numpy with its warnings
    silenced.
    """
    if denominator != 0:
        try:
            return numerator / denominator
        except OverflowError:
            logger.debug("%r / %r overflows a float, result is not finite", numerator, denominator)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.divide(_to_float(numerator), _to_float(denominator)))


def _to_float(value: Scalar) -> float:
    # ints past the float range become +/-inf instead of raising
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _check_vector(other: object, operation: str) -> None:
    if not isinstance(other, Vector3):
        raise TypeError(f"unsupported operand type(s) for {operation}: 'Vector3' and '{type(other).__name__}'")


class Vector3:
    """
    A 3D cartesian vector over a real scalar type.

    Arithmetic operators return new vectors. The in-place operators and
    normalize_in_place rewrite the vector they are called on. Degenerate
    inputs (division by zero, normalizing or measuring the angle of a zero
    vector) never raise, the non-finite result is returned instead.
    """

    # stop numpy scalars from broadcasting over us, so np.float32(2) * v uses __rmul__
    __array_ufunc__ = None

    def __init__(self, x: Scalar, y: Scalar, z: Scalar) -> None:
        """
        Initialize a Vector3 instance.

        Args:
            x (Scalar): The x component.
            y (Scalar): The y component.
            z (Scalar): The z component.
        """
        self._x = x
        self._y = y
        self._z = z

    @classmethod
    def from_sequence(cls, values: Sequence[Scalar]) -> "Vector3":
        """
        Build a vector from a tuple, list or numpy array of three numbers.

        Raises:
            InvalidSequenceError: If values does not hold exactly three items.
        """
        coords = list(values)
        if len(coords) != 3:
            raise InvalidSequenceError(f"expected 3 coordinates, got {len(coords)}")
        return cls(*coords)

    @classmethod
    def parse(cls, text: str) -> "Vector3":
        """
        Parse the output of repr() or str() back into a vector.

        Args:
            text (str): Text such as "Vector3(1.0, 2.0, 3.0)" or "(1, 2, 3)".

        Returns:
            Vector3: A vector with float coordinates.

        Raises:
            ParseVector3Error: If the text is not three comma separated numbers in parentheses.
        """
        match = _VECTOR3_PATTERN.match(text)
        if match is None:
            logger.debug("cannot parse %r as a Vector3", text)
            raise ParseVector3Error(f"invalid format {text!r}, expected 'Vector3(x, y, z)' or '(x, y, z)'")
        parts = match.group("body").split(",")
        if len(parts) != 3:
            logger.debug("cannot parse %r as a Vector3, found %d coordinates", text, len(parts))
            raise ParseVector3Error(f"expected 3 coordinates in {text!r}, got {len(parts)}")
        try:
            return cls(*(float(part) for part in parts))
        except ValueError as e:
            raise ParseVector3Error(f"failed to parse numbers in {text!r}") from e

    @classmethod
    def random(cls, rng: Optional[random.Random] = None) -> "Vector3":
        """Return a vector with each component drawn uniformly from [0, 1)."""
        source = rng if rng is not None else random
        return cls(source.random(), source.random(), source.random())

    def _assign(self, x: Scalar, y: Scalar, z: Scalar) -> None:
        # single write path for every mutation
        self._x = x
        self._y = y
        self._z = z

    @property
    def x(self) -> Scalar:
        return self._x

    @x.setter
    def x(self, value: Scalar) -> None:
        self._assign(value, self._y, self._z)

    @property
    def y(self) -> Scalar:
        return self._y

    @y.setter
    def y(self, value: Scalar) -> None:
        self._assign(self._x, value, self._z)

    @property
    def z(self) -> Scalar:
        return self._z

    @z.setter
    def z(self, value: Scalar) -> None:
        self._assign(self._x, self._y, value)

    def to_tuple(self) -> Tuple[Scalar, Scalar, Scalar]:
        return (self._x, self._y, self._z)

    def to_list(self) -> List[Scalar]:
        return [self._x, self._y, self._z]

    def to_numpy(self) -> np.ndarray:
        """Return the components as a float64 array of shape (3,)."""
        return np.array(self.to_tuple(), dtype=np.float64)

    def copy(self) -> "Vector3":
        return Vector3(self._x, self._y, self._z)

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self.to_tuple())

    def __str__(self) -> str:
        return f"({self._x}, {self._y}, {self._z})"

    def __repr__(self) -> str:
        return f"Vector3({self._x}, {self._y}, {self._z})"

    def __eq__(self, other: object) -> bool:
        """
        Check if two Vector3 instances are exactly equal, component by component.

        Use fuzzy_equal for a tolerance based comparison.
        """
        if not isinstance(other, Vector3):
            return NotImplemented
        return self._x == other._x and self._y == other._y and self._z == other._z

    # mutable, so not hashable
    __hash__ = None

    def __add__(self, other: "Vector3") -> "Vector3":
        """
        Add two Vector3 vectors.

        Args:
            other (Vector3): The vector to add.

        Returns:
            Vector3: The result of vector addition.
        """
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self._x + other._x, self._y + other._y, self._z + other._z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        """
        Subtract one Vector3 vector from another.

        Args:
            other (Vector3): The vector to subtract.

        Returns:
            Vector3: The result of vector subtraction.
        """
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self._x - other._x, self._y - other._y, self._z - other._z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self._x, -self._y, -self._z)

    def __mul__(self, other: Union[Scalar, "Vector3"]) -> "Vector3":
        """
        Multiply by a scalar, or component-wise by another vector.

        Args:
            other (Scalar | Vector3): The scalar or vector to multiply by.

        Returns:
            Vector3: The scaled vector.
        """
        if isinstance(other, Vector3):
            return Vector3(self._x * other._x, self._y * other._y, self._z * other._z)
        if isinstance(other, Real):
            return Vector3(self._x * other, self._y * other, self._z * other)
        return NotImplemented

    def __rmul__(self, other: Scalar) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, other: Union[Scalar, "Vector3"]) -> "Vector3":
        """
        Divide by a scalar, or component-wise by another vector.

        A zero divisor is not guarded: the affected components become inf or
        nan, the same as IEEE float division.

        Args:
            other (Scalar | Vector3): The divisor.

        Returns:
            Vector3: The divided vector.
        """
        if isinstance(other, Vector3):
            divisors = other.to_tuple()
        elif isinstance(other, Real):
            divisors = (other, other, other)
        else:
            return NotImplemented
        if any(divisor == 0 for divisor in divisors):
            logger.debug("dividing %r by %r, result is not finite", self, other)
        return Vector3(
            _divide(self._x, divisors[0]),
            _divide(self._y, divisors[1]),
            _divide(self._z, divisors[2]),
        )

    def __iadd__(self, other: "Vector3") -> "Vector3":
        result = self.__add__(other)
        if result is NotImplemented:
            return NotImplemented
        self._assign(*result)
        return self

    def __isub__(self, other: "Vector3") -> "Vector3":
        result = self.__sub__(other)
        if result is NotImplemented:
            return NotImplemented
        self._assign(*result)
        return self

    def __imul__(self, other: Union[Scalar, "Vector3"]) -> "Vector3":
        result = self.__mul__(other)
        if result is NotImplemented:
            return NotImplemented
        self._assign(*result)
        return self

    def __itruediv__(self, other: Union[Scalar, "Vector3"]) -> "Vector3":
        result = self.__truediv__(other)
        if result is NotImplemented:
            return NotImplemented
        self._assign(*result)
        return self

    def dot(self, other: "Vector3") -> Scalar:
        """
        Compute the dot product of two vectors.

        Args:
            other (Vector3): The other vector.

        Returns:
            Scalar: The dot product.
        """
        _check_vector(other, "dot")
        return self._x * other._x + self._y * other._y + self._z * other._z

    def cross(self, other: "Vector3") -> "Vector3":
        """
        Compute the right handed cross product of two vectors.

        Args:
            other (Vector3): The other vector.

        Returns:
            Vector3: The cross product vector.
        """
        _check_vector(other, "cross")
        return Vector3(
            self._y * other._z - self._z * other._y,
            self._z * other._x - self._x * other._z,
            self._x * other._y - self._y * other._x,
        )

    def magnitude(self) -> float:
        """
        Calculate the magnitude (Euclidean norm) of the vector.

        Int components too large for a float are square rooted exactly, and
        the result is inf only when the magnitude itself is past the float range.

        Returns:
            float: The magnitude of the vector.
        """
        squared = self.dot(self)
        try:
            return math.sqrt(squared)
        except OverflowError:
            if isinstance(squared, int):
                return _to_float(math.isqrt(squared))
            return math.inf

    def normalize(self) -> "Vector3":
        """
        Return a unit length copy of this vector.

        A zero vector has no direction, its normalized form is (nan, nan, nan).
        """
        length = self.magnitude()
        if length == 0:
            logger.debug("normalizing zero length vector %r", self)
        return self / length

    def normalize_in_place(self) -> None:
        """Rescale this vector to unit length."""
        self._assign(*self.normalize())

    def lerp(self, other: "Vector3", t: Scalar) -> "Vector3":
        """
        Linearly interpolate towards other.

        t is not clamped, values outside [0, 1] extrapolate. The two sided
        form is used so that t=0 gives exactly self and t=1 exactly other.

        Args:
            other (Vector3): The target vector.
            t (Scalar): The interpolation factor.

        Returns:
            Vector3: self + (other - self) * t
        """
        _check_vector(other, "lerp")
        return self * (1 - t) + other * t

    def angle(self, other: "Vector3") -> float:
        """
        Compute the angle between two vectors in radians.

        The cosine is clipped to [-1, 1] so rounding on (anti)parallel vectors
        cannot push it outside the arccosine domain. The angle involving a zero
        vector is nan.

        Args:
            other (Vector3): The other vector.

        Returns:
            float: The angle in the range [0, pi], or nan.
        """
        _check_vector(other, "angle")
        magnitudes = self.magnitude() * other.magnitude()
        if magnitudes == 0:
            logger.debug("angle between %r and %r involves a zero length vector", self, other)
        cosine = _divide(self.dot(other), magnitudes)
        return float(np.arccos(np.clip(cosine, -1.0, 1.0)))

    def angle_deg(self, other: "Vector3") -> float:
        return math.degrees(self.angle(other))

    def fuzzy_equal(self, other: "Vector3", epsilon: float) -> bool:
        """
        Check if two vectors are within epsilon of each other.

        The distance is the magnitude of their difference. A negative epsilon
        never matches, and neither does a nan component.
        """
        _check_vector(other, "fuzzy_equal")
        return (self - other).magnitude() <= epsilon

    def min(self, other: "Vector3") -> "Vector3":
        """Component-wise minimum. Ties and nan comparisons take other's component."""
        _check_vector(other, "min")
        return Vector3(
            self._x if self._x < other._x else other._x,
            self._y if self._y < other._y else other._y,
            self._z if self._z < other._z else other._z,
        )

    def max(self, other: "Vector3") -> "Vector3":
        """Component-wise maximum. Ties and nan comparisons take other's component."""
        _check_vector(other, "max")
        return Vector3(
            self._x if self._x > other._x else other._x,
            self._y if self._y > other._y else other._y,
            self._z if self._z > other._z else other._z,
        )
