import logging
from typing import List, NamedTuple, Tuple, Union

import functools

from . import fmt
from .halfint import HalfInt, IntOrHalfInt

logger = logging.getLogger(__name__)


def _promote(*values) -> list:
    """
    Bring values to a common type: ``HalfInt`` if any of them is one, else ``int``.
    Floats are rejected by the ``HalfInt`` constructor either way.
    """
    promoted = [HalfInt(v) for v in values]
    if any(isinstance(v, HalfInt) for v in values):
        return promoted
    return [int(v) for v in promoted]


class AngularMomentumRange(NamedTuple):
    """
    The angular momenta ``lower, lower + 1, ..., upper``.

    A range produced by an intersection may be empty (``lower > upper``),
    so check :attr:`is_empty` before using it.
    """

    lower: IntOrHalfInt
    upper: IntOrHalfInt

    @property
    def is_empty(self) -> bool:
        return self.lower > self.upper

    @property
    def size(self) -> int:
        """The number of angular momenta in the range."""
        if self.is_empty:
            return 0
        return int(self.upper - self.lower) + 1

    def contains(self, j: IntOrHalfInt) -> bool:
        """Whether ``j`` is in the range, i.e., between the bounds and an integer step from ``lower``."""
        offset = HalfInt(j) - self.lower
        return offset.is_integer() and self.lower <= j <= self.upper

    def values(self) -> list:
        lower, upper = _promote(self.lower, self.upper)
        if isinstance(lower, int):
            return list(range(lower, upper + 1))

        result = []
        j = +lower
        while j <= upper:
            result.append(j.post_increment())
        return result

    def __str__(self):
        return fmt.angular_momentum_range(self)


RangeLike = Union[AngularMomentumRange, Tuple[IntOrHalfInt, IntOrHalfInt]]


def dim(j: IntOrHalfInt) -> int:
    """The multiplicity ``2j + 1`` of angular momentum ``j``."""
    return HalfInt(j).twice_value + 1


def allowed_triangle(j1: IntOrHalfInt, j2: IntOrHalfInt, j3: IntOrHalfInt) -> bool:
    """
    Test whether ``j1``, ``j2`` and ``j3`` can couple:
    ``|j1 - j2| <= j3 <= j1 + j2`` and ``j1 + j2 + j3`` is an integer.
    """
    j1, j2, j3 = (HalfInt(j) for j in (j1, j2, j3))
    triangular = abs(j1 - j2) <= j3 <= j1 + j2
    proper_integrity = (j1 + j2 + j3).is_integer()
    return triangular and proper_integrity


def product_angular_momenta(j1: IntOrHalfInt, j2: IntOrHalfInt) -> List[IntOrHalfInt]:
    """
    All angular momenta in the product of ``j1`` and ``j2``, from ``|j1 - j2|`` to ``j1 + j2``.

    ``j1`` and ``j2`` must be non-negative.
    The entries are plain integers if both arguments are.
    """
    return product_angular_momentum_range(j1, j2).values()


def product_angular_momentum_range(
    j1: IntOrHalfInt, j2: IntOrHalfInt
) -> AngularMomentumRange:
    j1, j2 = _promote(j1, j2)
    return AngularMomentumRange(abs(j1 - j2), j1 + j2)


def _intersect(r1: RangeLike, r2: RangeLike) -> AngularMomentumRange:
    lower1, upper1, lower2, upper2 = _promote(*r1, *r2)
    return AngularMomentumRange(max(lower1, lower2), min(upper1, upper2))


def angular_momentum_range_intersection(
    r1: RangeLike, r2: RangeLike, *ranges: RangeLike
) -> AngularMomentumRange:
    """
    Intersect two or more angular momentum ranges.

    The result is empty (``lower > upper``) if the ranges do not overlap.
    """
    return functools.reduce(_intersect, ranges, _intersect(r1, r2))
