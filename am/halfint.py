"""
Exact arithmetic on integers and half-integers, as needed for angular momentum
quantum numbers.

A :class:`HalfInt` stores twice its value as a Python integer, so sums,
differences, negation and multiplication by integers are always exact.
Plain integers are promoted automatically; floats are rejected, since silently
mixing them in would hide precision loss.
"""

import logging
from typing import NamedTuple, Union

import numbers
import re

import numpy as np

from . import config, exceptions, fmt

logger = logging.getLogger(__name__)

IntOrHalfInt = Union[int, "HalfInt"]

_FRACTION_RE = re.compile(r"^\s*([+-]?\d+)\s*/\s*(\d+)\s*$")
_DECIMAL_RE = re.compile(r"^\s*([+-]?)(\d+)(?:\.(\d*))?\s*$")


def _is_integral(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, (bool, HalfInt))


class HalfInt:
    """
    An integer or half-integer value.

    ``HalfInt(n)`` is the integer ``n``, and ``HalfInt(p, q)`` is ``p / q`` for
    ``q`` equal to 1 or 2.

    A ``HalfInt`` hashes as its twice-value, so although ``HalfInt(1) == 1``,
    the two hash differently: ``HalfInt(1) in {1}`` is ``False``.
    Do not mix ``HalfInt`` and ``int`` keys in one ``dict`` or ``set``.
    """

    __slots__ = ("_twice_value",)

    def __init__(self, numerator=0, denominator=None):
        if denominator is None:
            if isinstance(numerator, HalfInt):
                self._twice_value = numerator._twice_value
            elif _is_integral(numerator):
                self._twice_value = 2 * int(numerator)
            else:
                raise TypeError(
                    f"HalfInt cannot be constructed from {type(numerator).__name__} {numerator!r}; "
                    f"give the value as HalfInt(numerator, 2)"
                )
            return

        if not _is_integral(denominator):
            raise TypeError(
                f"HalfInt denominator must be an integer, not {type(denominator).__name__}"
            )
        if denominator not in (1, 2):
            raise exceptions.InvalidDenominator(
                f"HalfInt constructed with denominator not 1 or 2 (got {denominator})"
            )

        self._twice_value = (2 // int(denominator)) * _integral_numerator(numerator)

    @classmethod
    def from_string(cls, text: str) -> "HalfInt":
        """
        Parse the text form of a half-integer.

        Accepts the output of ``str`` (``"3"``, ``"-7/2"``), fractions over 1 or 2,
        and decimal literals ending in ``.0`` or ``.5`` (as produced by ``format(h, "f")``).
        """
        match = _FRACTION_RE.match(text)
        if match is not None:
            numerator, denominator = match.groups()
            return cls(int(numerator), int(denominator))

        return _parse_decimal(text)

    @property
    def twice_value(self) -> int:
        return self._twice_value

    def is_integer(self) -> bool:
        return self._twice_value % 2 == 0

    # conversions

    def __int__(self) -> int:
        """Truncate toward zero. Check :meth:`is_integer` first if truncation is not intended."""
        if self._twice_value < 0:
            return -(-self._twice_value // 2)
        return self._twice_value // 2

    __trunc__ = __int__

    def __float__(self) -> float:
        return self._twice_value / 2

    def __bool__(self):
        return self._twice_value != 0

    def __str__(self):
        if self.is_integer():
            return str(self._twice_value // 2)
        return f"{self._twice_value}/2"

    def __repr__(self):
        return f"{self.__class__.__name__}({self._twice_value}, 2)"

    def __format__(self, format_spec):
        return fmt.halfint(self, format_spec)

    def __hash__(self):
        return hash(self._twice_value)

    # comparison

    def __eq__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._twice_value == other._twice_value

    def __ne__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._twice_value != other._twice_value

    def __lt__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._twice_value < other._twice_value

    def __le__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._twice_value <= other._twice_value

    def __gt__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._twice_value > other._twice_value

    def __ge__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._twice_value >= other._twice_value

    # arithmetic

    def __pos__(self):
        return _from_twice_value(self._twice_value)

    def __neg__(self):
        return _from_twice_value(-self._twice_value)

    def __abs__(self):
        if self._twice_value < 0:
            return -self
        return +self

    def __add__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return _from_twice_value(self._twice_value + other._twice_value)

    __radd__ = __add__

    def __sub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return _from_twice_value(self._twice_value - other._twice_value)

    def __rsub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return _from_twice_value(other._twice_value - self._twice_value)

    def __mul__(self, other):
        # the product of two half-integers is a quarter-integer, so only integer factors
        if not _is_integral(other):
            return NotImplemented
        return _from_twice_value(self._twice_value * int(other))

    __rmul__ = __mul__

    def __rpow__(self, base):
        if isinstance(base, numbers.Complex) and not isinstance(base, HalfInt):
            return base ** float(self)
        return NotImplemented

    # in-place stepping

    def increment(self) -> "HalfInt":
        """
        Add one in place and return this value (prefix ``++``).

        Do not step a value that is being used as a dictionary key or set member.
        """
        self._twice_value += 2
        return self

    def decrement(self) -> "HalfInt":
        """Subtract one in place and return this value (prefix ``--``)."""
        self._twice_value -= 2
        return self

    def post_increment(self) -> "HalfInt":
        """Add one in place and return the value from before the step (postfix ``++``)."""
        previous = +self
        self._twice_value += 2
        return previous

    def post_decrement(self) -> "HalfInt":
        """Subtract one in place and return the value from before the step (postfix ``--``)."""
        previous = +self
        self._twice_value -= 2
        return previous


class NumericLimits(NamedTuple):
    """
    Static numeric metadata for :class:`HalfInt`, for generic numeric code.

    The bounds are those of a half-integer whose twice-value fits in a signed
    32-bit integer, the argument type of external coupling-coefficient routines.
    Arithmetic itself is unbounded.
    """

    min: HalfInt
    max: HalfInt
    epsilon: HalfInt
    is_signed: bool = True
    is_integer: bool = False
    is_exact: bool = True
    is_bounded: bool = True


def _from_twice_value(twice_value: int) -> HalfInt:
    h = HalfInt.__new__(HalfInt)
    h._twice_value = twice_value
    return h


def _coerce(value):
    if isinstance(value, HalfInt):
        return value
    if _is_integral(value):
        return _from_twice_value(2 * int(value))
    return NotImplemented


def _integral_numerator(numerator) -> int:
    if _is_integral(numerator):
        return int(numerator)
    if isinstance(numerator, numbers.Real) and not isinstance(numerator, (bool, HalfInt)):
        if float(numerator).is_integer():
            return int(numerator)
        raise ValueError(f"HalfInt numerator {numerator!r} is not integral")
    raise TypeError(
        f"HalfInt numerator must be a real number, not {type(numerator).__name__}"
    )


def _parse_decimal(text: str, *, literal: bool = False) -> HalfInt:
    kind = "literal" if literal else "string"
    match = _DECIMAL_RE.match(text)
    if match is None:
        raise ValueError(f"invalid HalfInt {kind}: {text!r}")

    sign, whole, fraction = match.groups()
    if fraction is not None and len(fraction) > 1:
        raise ValueError(
            f"only one digit allowed after decimal point in HalfInt {kind}: {text!r}"
        )
    if fraction not in (None, "", "0", "5"):
        raise ValueError(f"HalfInt {kind} must be half-integer: {text!r}")

    twice_value = 2 * int(whole) + (1 if fraction == "5" else 0)
    if sign == "-":
        twice_value = -twice_value
    return _from_twice_value(twice_value)


_INT32 = np.iinfo(np.int32)

LIMITS = NumericLimits(
    min=HalfInt(int(_INT32.min), 2),
    max=HalfInt(int(_INT32.max), 2),
    epsilon=HalfInt(0),
)
HalfInt.limits = LIMITS

parse = HalfInt.from_string


def hi(literal: Union[int, str]) -> HalfInt:
    """
    Spell a half-integer as a decimal literal, like ``hi("2.5")`` or ``hi(3)``.

    At most one digit may follow the decimal point, and it must be ``0`` or ``5``.
    """
    if _is_integral(literal):
        return HalfInt(literal)
    if not isinstance(literal, str):
        raise TypeError(
            f"HalfInt literal must be an int or str, not {type(literal).__name__}"
        )
    return _parse_decimal(literal, literal=True)


def twice_value(h: IntOrHalfInt) -> int:
    return HalfInt(h).twice_value


def is_integer(h: IntOrHalfInt) -> bool:
    return HalfInt(h).is_integer()


def ceil(h: HalfInt) -> float:
    if h.is_integer():
        return h.twice_value / 2
    return (h.twice_value + 1) / 2


def floor(h: HalfInt) -> float:
    if h.is_integer():
        return h.twice_value / 2
    return (h.twice_value - 1) / 2


def hat(j: IntOrHalfInt) -> float:
    """The angular momentum "hat" factor, ``sqrt(2j + 1)``."""
    return np.sqrt(float(HalfInt(j).twice_value + 1))


def hat2(two_j: int) -> float:
    """:func:`hat` of ``two_j / 2``."""
    return np.sqrt(float(two_j + 1))


def parity_sign(sum: IntOrHalfInt) -> int:
    """
    Return ``(-1) ** sum``.

    ``sum`` must have an integer value; a half-integer ``sum`` would give a complex phase
    (see :func:`phase`) and raises :class:`~am.exceptions.ComplexPhaseError`
    (or gives ``0`` when exceptions are disabled in :mod:`am.config`).
    """
    if isinstance(sum, HalfInt):
        if not sum.is_integer():
            return config.suppress(
                exceptions.ComplexPhaseError(
                    f"complex phase encountered in parity_sign({sum})"
                ),
                0,
            )
        return 1 - (sum.twice_value & 2)

    if _is_integral(sum):
        return 1 - 2 * (int(sum) & 1)

    raise TypeError(f"parity_sign requires an integer or HalfInt, not {type(sum).__name__}")


def parity_sign2(two_sum: int) -> int:
    """:func:`parity_sign` of ``two_sum / 2``."""
    if two_sum % 2 != 0:
        return config.suppress(
            exceptions.ComplexPhaseError(f"two_sum not even in parity_sign2({two_sum})"),
            0,
        )
    return 1 - (int(two_sum) & 2)


def phase(sum: IntOrHalfInt) -> complex:
    """Return the complex phase ``exp(i pi sum) = i ** (2 sum)``, for integer or half-integer ``sum``."""
    tv = HalfInt(sum).twice_value
    imaginary = tv & 1
    sign = 1 - (tv & 2)
    return complex(sign * (1 - imaginary), sign * imaginary)
