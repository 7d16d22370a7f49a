"""
Wigner coupling and recoupling symbols.

The symbols are evaluated exactly by :mod:`sympy.physics.wigner` and returned as floats.
Functions whose names end in ``2`` take integer "twice value" arguments ``2j``;
the others take :class:`~am.halfint.HalfInt` (or integer) arguments, which are
marshaled to twice values.
"""

import logging

import functools

import sympy
from sympy.physics import wigner as sympy_wigner

from .coupling import (
    allowed_triangle,
    angular_momentum_range_intersection,
    product_angular_momentum_range,
)
from .halfint import (
    HalfInt,
    IntOrHalfInt,
    hat,
    hat2,
    parity_sign,
    parity_sign2,
    twice_value,
)

logger = logging.getLogger(__name__)


def _rational(two_j: int) -> sympy.Rational:
    return sympy.Rational(int(two_j), 2)


def _allowed_triangle2(two_ja: int, two_jb: int, two_jc: int) -> bool:
    return allowed_triangle(
        HalfInt(two_ja, 2), HalfInt(two_jb, 2), HalfInt(two_jc, 2)
    )


def _threej_vanishes(two_ja, two_jb, two_jc, two_ma, two_mb, two_mc) -> bool:
    if two_ma + two_mb + two_mc != 0:
        return True

    for two_j, two_m in ((two_ja, two_ma), (two_jb, two_mb), (two_jc, two_mc)):
        if abs(two_m) > two_j or (two_j - two_m) % 2 != 0:
            return True

    return not _allowed_triangle2(two_ja, two_jb, two_jc)


def _sixj_vanishes(two_ja, two_jb, two_jc, two_jd, two_je, two_jf) -> bool:
    triads = (
        (two_ja, two_jb, two_jc),
        (two_ja, two_je, two_jf),
        (two_jd, two_jb, two_jf),
        (two_jd, two_je, two_jc),
    )
    return not all(_allowed_triangle2(*triad) for triad in triads)


def _ninej_vanishes(two_ja, two_jb, two_jc, two_jd, two_je, two_jf, two_jg, two_jh, two_ji) -> bool:
    triads = (
        (two_ja, two_jb, two_jc),  # rows
        (two_jd, two_je, two_jf),
        (two_jg, two_jh, two_ji),
        (two_ja, two_jd, two_jg),  # columns
        (two_jb, two_je, two_jh),
        (two_jc, two_jf, two_ji),
    )
    return not all(_allowed_triangle2(*triad) for triad in triads)


@functools.lru_cache(maxsize=None)
def _exact_threej(two_ja, two_jb, two_jc, two_ma, two_mb, two_mc):
    if _threej_vanishes(two_ja, two_jb, two_jc, two_ma, two_mb, two_mc):
        return sympy.S.Zero

    logger.debug(
        f"evaluating 3j symbol for twice values {(two_ja, two_jb, two_jc, two_ma, two_mb, two_mc)}"
    )
    return sympy_wigner.wigner_3j(
        *(_rational(x) for x in (two_ja, two_jb, two_jc, two_ma, two_mb, two_mc))
    )


@functools.lru_cache(maxsize=None)
def _exact_sixj(two_ja, two_jb, two_jc, two_jd, two_je, two_jf):
    if _sixj_vanishes(two_ja, two_jb, two_jc, two_jd, two_je, two_jf):
        return sympy.S.Zero

    logger.debug(
        f"evaluating 6j symbol for twice values {(two_ja, two_jb, two_jc, two_jd, two_je, two_jf)}"
    )
    return sympy_wigner.wigner_6j(
        *(_rational(x) for x in (two_ja, two_jb, two_jc, two_jd, two_je, two_jf))
    )


@functools.lru_cache(maxsize=None)
def _exact_ninej(two_ja, two_jb, two_jc, two_jd, two_je, two_jf, two_jg, two_jh, two_ji):
    """
    Sum over products of three 6j symbols,

        {a b c; d e f; g h i} = sum_x (-)^(2x) (2x+1) {a d g; h i x} {b e h; d x f} {c f i; x a b}

    with ``x`` running over the values allowed by all three triangles it enters.
    """
    if _ninej_vanishes(two_ja, two_jb, two_jc, two_jd, two_je, two_jf, two_jg, two_jh, two_ji):
        return sympy.S.Zero

    logger.debug(
        f"evaluating 9j symbol for twice values {(two_ja, two_jb, two_jc, two_jd, two_je, two_jf, two_jg, two_jh, two_ji)}"
    )

    a, b, d, f, h, i = (HalfInt(x, 2) for x in (two_ja, two_jb, two_jd, two_jf, two_jh, two_ji))
    x_range = angular_momentum_range_intersection(
        product_angular_momentum_range(a, i),
        product_angular_momentum_range(d, h),
        product_angular_momentum_range(b, f),
    )

    total = sympy.S.Zero
    for x in x_range.values():
        two_x = x.twice_value
        total += (
            parity_sign(two_x)
            * (two_x + 1)
            * _exact_sixj(two_ja, two_jd, two_jg, two_jh, two_ji, two_x)
            * _exact_sixj(two_jb, two_je, two_jh, two_jd, two_x, two_jf)
            * _exact_sixj(two_jc, two_jf, two_ji, two_x, two_ja, two_jb)
        )

    return total


# twice-value interface


def wigner3j2(two_ja: int, two_jb: int, two_jc: int, two_ma: int, two_mb: int, two_mc: int) -> float:
    return float(_exact_threej(two_ja, two_jb, two_jc, two_ma, two_mb, two_mc))


def clebsch_gordan2(two_ja: int, two_ma: int, two_jb: int, two_mb: int, two_jc: int, two_mc: int) -> float:
    return (
        hat2(two_jc)
        * parity_sign2(two_ja - two_jb + two_mc)
        * wigner3j2(two_ja, two_jb, two_jc, two_ma, two_mb, -two_mc)
    )


def wigner6j2(two_ja: int, two_jb: int, two_jc: int, two_jd: int, two_je: int, two_jf: int) -> float:
    return float(_exact_sixj(two_ja, two_jb, two_jc, two_jd, two_je, two_jf))


def unitary6j2(two_ja: int, two_jb: int, two_jc: int, two_jd: int, two_je: int, two_jf: int) -> float:
    return (
        parity_sign2(two_ja + two_jb + two_jd + two_je)
        * hat2(two_jc)
        * hat2(two_jf)
        * wigner6j2(two_ja, two_jb, two_jc, two_jd, two_je, two_jf)
    )


def unitary6jz2(two_ja: int, two_jb: int, two_jc: int, two_jd: int, two_je: int, two_jf: int) -> float:
    return (
        parity_sign2(two_jb + two_je + two_jc + two_jf)
        * hat2(two_jc)
        * hat2(two_jf)
        * wigner6j2(two_ja, two_jb, two_jc, two_jd, two_je, two_jf)
    )


def wigner9j2(
    two_ja: int, two_jb: int, two_jc: int,
    two_jd: int, two_je: int, two_jf: int,
    two_jg: int, two_jh: int, two_ji: int,
) -> float:
    return float(
        _exact_ninej(two_ja, two_jb, two_jc, two_jd, two_je, two_jf, two_jg, two_jh, two_ji)
    )


def unitary9j2(
    two_ja: int, two_jb: int, two_jc: int,
    two_jd: int, two_je: int, two_jf: int,
    two_jg: int, two_jh: int, two_ji: int,
) -> float:
    return (
        hat2(two_jc)
        * hat2(two_jf)
        * hat2(two_jg)
        * hat2(two_jh)
        * wigner9j2(two_ja, two_jb, two_jc, two_jd, two_je, two_jf, two_jg, two_jh, two_ji)
    )


# HalfInt interface


def wigner3j(
    ja: IntOrHalfInt, jb: IntOrHalfInt, jc: IntOrHalfInt,
    ma: IntOrHalfInt, mb: IntOrHalfInt, mc: IntOrHalfInt,
) -> float:
    """The Wigner 3j symbol ``(ja jb jc; ma mb mc)``."""
    return wigner3j2(*(twice_value(j) for j in (ja, jb, jc, ma, mb, mc)))


def clebsch_gordan(
    ja: IntOrHalfInt, ma: IntOrHalfInt,
    jb: IntOrHalfInt, mb: IntOrHalfInt,
    jc: IntOrHalfInt, mc: IntOrHalfInt,
) -> float:
    """The Clebsch-Gordan coefficient ``<ja ma; jb mb | jc mc>``."""
    return clebsch_gordan2(*(twice_value(j) for j in (ja, ma, jb, mb, jc, mc)))


def wigner6j(
    ja: IntOrHalfInt, jb: IntOrHalfInt, jc: IntOrHalfInt,
    jd: IntOrHalfInt, je: IntOrHalfInt, jf: IntOrHalfInt,
) -> float:
    """The Wigner 6j symbol ``{ja jb jc; jd je jf}``."""
    return wigner6j2(*(twice_value(j) for j in (ja, jb, jc, jd, je, jf)))


def unitary6j(
    ja: IntOrHalfInt, jb: IntOrHalfInt, jc: IntOrHalfInt,
    jd: IntOrHalfInt, je: IntOrHalfInt, jf: IntOrHalfInt,
) -> float:
    """
    The unitary recoupling coefficient for (12)3-1(23) recoupling.

    Arguments follow the row order of the 6j symbol, ``unitary6j(J1, J2, J12, J3, J, J23)``.
    """
    return unitary6j2(*(twice_value(j) for j in (ja, jb, jc, jd, je, jf)))


def unitary6jz(
    ja: IntOrHalfInt, jb: IntOrHalfInt, jc: IntOrHalfInt,
    jd: IntOrHalfInt, je: IntOrHalfInt, jf: IntOrHalfInt,
) -> float:
    """
    The unitary recoupling coefficient for (12)3-(13)2 recoupling (Millener's "Z" coefficient).

    Arguments follow the row order of the 6j symbol, ``unitary6jz(J1, J2, J12, J, J3, J13)``.
    """
    return unitary6jz2(*(twice_value(j) for j in (ja, jb, jc, jd, je, jf)))


def racah_reduction_factor_first_system(
    j1p: IntOrHalfInt, j2p: IntOrHalfInt, Jp: IntOrHalfInt,
    j1: IntOrHalfInt, j2: IntOrHalfInt, J: IntOrHalfInt,
    J0: IntOrHalfInt,
) -> float:
    """Prefactor for an operator acting on the first system in the Racah two-system reduction formula."""
    j1p, j2p, Jp, j1, j2, J, J0 = (HalfInt(j) for j in (j1p, j2p, Jp, j1, j2, J, J0))
    return (
        parity_sign(j1p + j2p + J + J0)
        * hat(Jp)
        * hat(J)
        * wigner6j(j1p, Jp, j2p, J, j1, J0)
    )


def wigner9j(
    ja: IntOrHalfInt, jb: IntOrHalfInt, jc: IntOrHalfInt,
    jd: IntOrHalfInt, je: IntOrHalfInt, jf: IntOrHalfInt,
    jg: IntOrHalfInt, jh: IntOrHalfInt, ji: IntOrHalfInt,
) -> float:
    """The Wigner 9j symbol ``{ja jb jc; jd je jf; jg jh ji}``."""
    return wigner9j2(*(twice_value(j) for j in (ja, jb, jc, jd, je, jf, jg, jh, ji)))


def unitary9j(
    ja: IntOrHalfInt, jb: IntOrHalfInt, jc: IntOrHalfInt,
    jd: IntOrHalfInt, je: IntOrHalfInt, jf: IntOrHalfInt,
    jg: IntOrHalfInt, jh: IntOrHalfInt, ji: IntOrHalfInt,
) -> float:
    """The unitary LS-jj recoupling coefficient, ``hat(jc) hat(jf) hat(jg) hat(jh)`` times the 9j symbol."""
    return unitary9j2(*(twice_value(j) for j in (ja, jb, jc, jd, je, jf, jg, jh, ji)))
