"""
===============================================================================
HYPERCOMPLEX - Quaternion Arithmetic
===============================================================================

A quaternion value type that behaves like a first-class number: it can be
added, subtracted, multiplied and divided with other quaternions and with
plain real scalars, in binary and compound-assignment form.

Convention
----------
Scalar-first, following Hamilton's original formulation:

    q = [r, x, y, z] = r + x*i + y*j + z*k

with i^2 = j^2 = k^2 = ijk = -1. Multiplication is therefore not
commutative: in general a * b != b * a.

Equality
--------
Equality is exact component-wise equality of IEEE-754 doubles. There is no
tolerance and no q/-q identification. -0.0 compares equal to 0.0 and NaN
never compares equal to anything, as for plain floats.

Scalars
-------
A real scalar s is promoted to [s, 0, 0, 0] before any operation. Adding or
multiplying by a scalar commutes, dividing by one does not:

    q / s   scales every component by 1/s
    s / q   is s * q^{-1} = s * conj(q) / norm(q)

Division by zero
----------------
Dividing by the zero quaternion is not guarded. The components follow numpy
float64 semantics and come out as inf or nan (numpy emits its usual
RuntimeWarning); no exception is raised.

References
----------
    [1] Hamilton, "On Quaternions", Philosophical Magazine, 1844.
    [2] Kuipers, "Quaternions and Rotation Sequences", Princeton, 1999.

===============================================================================
"""

import logging
import numbers
from typing import Optional, Sequence, Union

import numpy as np

from hypercomplex.constants import (
    COMPONENT_COUNT, COMPONENT_DTYPE, DISPLAY_PRECISION, IMAGINARY_UNITS
)

logger = logging.getLogger(__name__)

Operand = Union['Quaternion', float, int]


class Quaternion:
    """
    Quaternion number with four real components.

    Attributes
    ----------
    real : float
        Scalar (real) component.
    imaginary_x : float
        Coefficient of the i unit.
    imaginary_y : float
        Coefficient of the j unit.
    imaginary_z : float
        Coefficient of the k unit.

    Examples
    --------
    >>> a = Quaternion(-5, -5, 4.5, -2)
    >>> b = Quaternion(-1, -1, -1.5, -3.5)
    >>> a * b == Quaternion(-0.25, -8.75, -12.5, 31.5)
    True
    >>> a * 2 == 2 * a
    True
    """

    # Make numpy scalars on the left defer to our reflected operators
    # instead of broadcasting over an object array.
    __array_ufunc__ = None

    # Mutable value type with value equality.
    __hash__ = None

    def __init__(self, real: float = 0.0, imaginary_x: float = 0.0,
                 imaginary_y: float = 0.0, imaginary_z: float = 0.0) -> None:
        """
        Initialize a quaternion from its four components.

        Parameters
        ----------
        real : float, optional
            Real part. Default 0.
        imaginary_x, imaginary_y, imaginary_z : float, optional
            Coefficients of i, j and k. Default 0.

        Notes
        -----
        ``Quaternion()`` is the zero quaternion and ``Quaternion(v)`` is the
        real number v, so a single argument acts as scalar promotion.
        """
        self._q = np.array([real, imaginary_x, imaginary_y, imaginary_z],
                           dtype=COMPONENT_DTYPE)

    # =========================================================================
    # PROPERTIES - Read access to quaternion components
    # =========================================================================

    @property
    def real(self) -> float:
        """Real (scalar) component."""
        return float(self._q[0])

    @property
    def imaginary_x(self) -> float:
        """Coefficient of i."""
        return float(self._q[1])

    @property
    def imaginary_y(self) -> float:
        """Coefficient of j."""
        return float(self._q[2])

    @property
    def imaginary_z(self) -> float:
        """Coefficient of k."""
        return float(self._q[3])

    @property
    def scalar(self) -> float:
        """Alias for :attr:`real`."""
        return self.real

    @property
    def vector(self) -> np.ndarray:
        """Copy of the imaginary part as ``[x, y, z]``."""
        return self._q[1:4].copy()

    @property
    def components(self) -> np.ndarray:
        """Copy of all four components as ``[r, x, y, z]``."""
        return self._q.copy()

    # =========================================================================
    # STATIC FACTORY METHODS
    # =========================================================================

    @staticmethod
    def from_scalar(value: float) -> 'Quaternion':
        """
        Promote a real scalar to the quaternion ``[value, 0, 0, 0]``.

        This is the conversion every mixed quaternion/scalar operator uses.
        """
        return Quaternion(value)

    @staticmethod
    def from_components(components: Sequence[float]) -> 'Quaternion':
        """
        Create a quaternion from a 4-element sequence ``[r, x, y, z]``.

        Parameters
        ----------
        components : sequence of float or np.ndarray
            Exactly four real values.

        Returns
        -------
        Quaternion
            New quaternion holding the given components.

        Raises
        ------
        ValueError
            If the input does not hold exactly four values.
        """
        values = np.asarray(components, dtype=COMPONENT_DTYPE).ravel()

        if values.shape != (COMPONENT_COUNT,):
            raise ValueError(
                f"Quaternion needs {COMPONENT_COUNT} components, "
                f"got {values.size}"
            )

        return Quaternion(values[0], values[1], values[2], values[3])

    @staticmethod
    def i(value: float = 1.0) -> 'Quaternion':
        """Pure imaginary quaternion ``value * i``."""
        return Quaternion(0.0, value, 0.0, 0.0)

    @staticmethod
    def j(value: float = 1.0) -> 'Quaternion':
        """Pure imaginary quaternion ``value * j``."""
        return Quaternion(0.0, 0.0, value, 0.0)

    @staticmethod
    def k(value: float = 1.0) -> 'Quaternion':
        """Pure imaginary quaternion ``value * k``."""
        return Quaternion(0.0, 0.0, 0.0, value)

    # =========================================================================
    # INTERNAL HELPERS
    # =========================================================================

    @staticmethod
    def _coerce(value: object) -> Optional['Quaternion']:
        """
        Return ``value`` as a quaternion, or None if it is not a number.

        Real scalars (int, float, numpy real scalars) are promoted with
        :meth:`from_scalar`. Booleans are not treated as numbers here.
        """
        if isinstance(value, Quaternion):
            return value
        if isinstance(value, bool):
            return None
        if isinstance(value, numbers.Real):
            return Quaternion.from_scalar(value)
        return None

    def _replace(self, other: 'Quaternion') -> 'Quaternion':
        """Take over all components of a freshly computed quaternion."""
        self._q = other._q.copy()
        return self

    # =========================================================================
    # COPY AND ASSIGNMENT
    # =========================================================================

    def copy(self) -> 'Quaternion':
        """Return an independent copy of this quaternion."""
        return Quaternion(self._q[0], self._q[1], self._q[2], self._q[3])

    def __copy__(self) -> 'Quaternion':
        return self.copy()

    def __deepcopy__(self, memo: dict) -> 'Quaternion':
        return self.copy()

    def assign(self, other: Operand) -> 'Quaternion':
        """
        Overwrite this quaternion with the value of ``other``.

        Parameters
        ----------
        other : Quaternion or float
            Source value. A real scalar is promoted first.

        Returns
        -------
        Quaternion
            ``self``, so assignments can be chained. Assigning a quaternion
            to itself leaves it unchanged.

        Raises
        ------
        TypeError
            If ``other`` is neither a quaternion nor a real scalar.
        """
        source = self._coerce(other)
        if source is None:
            raise TypeError(
                f"Cannot assign {type(other).__name__} to a Quaternion"
            )
        return self._replace(source)

    # =========================================================================
    # SIGN, CONJUGATE AND NORM
    # =========================================================================

    def __pos__(self) -> 'Quaternion':
        """Unary plus: a new quaternion equal to this one, never ``self``."""
        return self.copy()

    def __neg__(self) -> 'Quaternion':
        """Negate every component, zeros included (0.0 becomes -0.0)."""
        return Quaternion.from_components(-self._q)

    def conjugate(self) -> 'Quaternion':
        """
        Return the quaternion conjugate.

        For q = [r, x, y, z], the conjugate is q* = [r, -x, -y, -z].

        Returns
        -------
        Quaternion
            The conjugate quaternion.
        """
        r, x, y, z = self._q
        return Quaternion(r, -x, -y, -z)

    def norm(self) -> float:
        """
        Squared magnitude r^2 + x^2 + y^2 + z^2.

        This is the quadrance, not its square root. It is the denominator
        of :meth:`inverse` and of quaternion division.

        Returns
        -------
        float
            Sum of the squares of all four components.
        """
        r, x, y, z = self._q
        return float(r * r + x * x + y * y + z * z)

    def inverse(self) -> 'Quaternion':
        """
        Return the multiplicative inverse q^{-1} = q* / norm(q).

        The zero quaternion is not special-cased; its inverse has
        non-finite components.
        """
        n = self.norm()
        if n == 0.0:
            logger.debug("Inverting the zero quaternion; result is non-finite")
        return Quaternion.from_components(self.conjugate()._q / n)

    # =========================================================================
    # INCREMENT / DECREMENT
    # =========================================================================

    def increment(self) -> 'Quaternion':
        """Add 1 to the real part in place and return ``self`` (prefix ++)."""
        self._q[0] += 1.0
        return self

    def decrement(self) -> 'Quaternion':
        """Subtract 1 from the real part in place and return ``self`` (prefix --)."""
        self._q[0] -= 1.0
        return self

    def post_increment(self) -> 'Quaternion':
        """Add 1 to the real part in place; return the value from before."""
        snapshot = self.copy()
        self.increment()
        return snapshot

    def post_decrement(self) -> 'Quaternion':
        """Subtract 1 from the real part in place; return the value from before."""
        snapshot = self.copy()
        self.decrement()
        return snapshot

    # =========================================================================
    # QUATERNION ARITHMETIC
    # =========================================================================

    def add(self, other: 'Quaternion') -> 'Quaternion':
        """Component-wise sum ``self + other``."""
        return Quaternion.from_components(self._q + other._q)

    def subtract(self, other: 'Quaternion') -> 'Quaternion':
        """Component-wise difference ``self - other``."""
        return Quaternion.from_components(self._q - other._q)

    def multiply(self, other: 'Quaternion') -> 'Quaternion':
        """
        Multiply this quaternion by another (Hamilton product).

        Quaternion multiplication is NOT commutative: q1 * q2 != q2 * q1
        in general.

        The Hamilton product formula is:

            (r1 + x1*i + y1*j + z1*k) * (r2 + x2*i + y2*j + z2*k) =

            (r1*r2 - x1*x2 - y1*y2 - z1*z2) +
            (r1*x2 + x1*r2 + y1*z2 - z1*y2) i +
            (r1*y2 - x1*z2 + y1*r2 + z1*x2) j +
            (r1*z2 + x1*y2 - y1*x2 + z1*r2) k

        Parameters
        ----------
        other : Quaternion
            The right-hand quaternion in the product.

        Returns
        -------
        Quaternion
            The Hamilton product self * other.
        """
        r1, x1, y1, z1 = self._q
        r2, x2, y2, z2 = other._q

        r = r1 * r2 - x1 * x2 - y1 * y2 - z1 * z2
        x = r1 * x2 + x1 * r2 + y1 * z2 - z1 * y2
        y = r1 * y2 - x1 * z2 + y1 * r2 + z1 * x2
        z = r1 * z2 + x1 * y2 - y1 * x2 + z1 * r2

        return Quaternion(r, x, y, z)

    def divide(self, other: 'Quaternion') -> 'Quaternion':
        """
        Divide this quaternion by another: ``self * other^{-1}``.

        Expanding ``self * conj(other) / norm(other)`` gives, with
        n = r2^2 + x2^2 + y2^2 + z2^2:

            r = ( r1*r2 + x1*x2 + y1*y2 + z1*z2) / n
            x = (-r1*x2 + x1*r2 - y1*z2 + z1*y2) / n
            y = (-r1*y2 + x1*z2 + y1*r2 - z1*x2) / n
            z = (-r1*z2 - x1*y2 + y1*x2 + z1*r2) / n

        Each component is a single division of its numerator by n, so a
        nonzero quaternion divided by itself is exactly [1, 0, 0, 0].

        Parameters
        ----------
        other : Quaternion
            Divisor.

        Returns
        -------
        Quaternion
            The quotient. Components are inf/nan when ``other`` is zero.
        """
        r1, x1, y1, z1 = self._q
        r2, x2, y2, z2 = other._q

        n = r2 * r2 + x2 * x2 + y2 * y2 + z2 * z2
        if n == 0.0:
            logger.debug("Dividing %r by the zero quaternion", self)

        r = (r1 * r2 + x1 * x2 + y1 * y2 + z1 * z2) / n
        x = (-r1 * x2 + x1 * r2 - y1 * z2 + z1 * y2) / n
        y = (-r1 * y2 + x1 * z2 + y1 * r2 - z1 * x2) / n
        z = (-r1 * z2 - x1 * y2 + y1 * x2 + z1 * r2) / n

        return Quaternion(r, x, y, z)

    # =========================================================================
    # OPERATOR OVERLOADS
    # =========================================================================

    def __add__(self, other: Operand) -> 'Quaternion':
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Operand) -> 'Quaternion':
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.add(self)

    def __sub__(self, other: Operand) -> 'Quaternion':
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Operand) -> 'Quaternion':
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.subtract(self)

    def __mul__(self, other: Operand) -> 'Quaternion':
        """
        Multiplication operator.

        - Quaternion * Quaternion -> Hamilton product
        - Quaternion * scalar -> Hamilton product with [s, 0, 0, 0], which
          reduces to component-wise scaling
        """
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: Operand) -> 'Quaternion':
        """Left multiplication by a scalar: ``s * q``."""
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.multiply(self)

    def __truediv__(self, other: Operand) -> 'Quaternion':
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: Operand) -> 'Quaternion':
        """
        Scalar divided by quaternion: ``s / q = s * q^{-1}``.

        Unlike ``q / s`` this involves the conjugate and norm of q, so the
        two are different numbers in general.
        """
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.divide(self)

    # Compound assignment computes the whole result before touching self,
    # so ``a op= a`` reads the original value of a on both sides.

    def __iadd__(self, other: Operand) -> 'Quaternion':
        result = self.__add__(other)
        if result is NotImplemented:
            return NotImplemented
        return self._replace(result)

    def __isub__(self, other: Operand) -> 'Quaternion':
        result = self.__sub__(other)
        if result is NotImplemented:
            return NotImplemented
        return self._replace(result)

    def __imul__(self, other: Operand) -> 'Quaternion':
        result = self.__mul__(other)
        if result is NotImplemented:
            return NotImplemented
        return self._replace(result)

    def __itruediv__(self, other: Operand) -> 'Quaternion':
        result = self.__truediv__(other)
        if result is NotImplemented:
            return NotImplemented
        return self._replace(result)

    def __eq__(self, other: object) -> bool:
        """
        Exact component-wise equality.

        A real scalar is promoted to [s, 0, 0, 0] first, so a quaternion
        with a nonzero imaginary part never equals a scalar.
        """
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return bool(np.array_equal(self._q, other._q))

    # =========================================================================
    # TEXT RENDERING
    # =========================================================================

    def to_string(self, precision: int = DISPLAY_PRECISION) -> str:
        """
        Render as ``"r + xi - yj + zk"`` for diagnostics.

        Each imaginary term shows ``+`` when its component is >= 0 (so -0.0
        renders as ``+ 0.000000``) and ``-`` otherwise, followed by the
        magnitude. Not meant to be parsed back.
        """
        text = f"{self._q[0]:.{precision}f}"
        for value, unit in zip(self._q[1:], IMAGINARY_UNITS):
            sign = "+" if value >= 0 else "-"
            text += f" {sign} {abs(value):.{precision}f}{unit}"
        return text

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        """
        Unambiguous string representation for debugging.

        Format: Quaternion(real=..., imaginary_x=..., imaginary_y=..., imaginary_z=...)
        """
        return (f"Quaternion(real={self.real!r}, "
                f"imaginary_x={self.imaginary_x!r}, "
                f"imaginary_y={self.imaginary_y!r}, "
                f"imaginary_z={self.imaginary_z!r})")
