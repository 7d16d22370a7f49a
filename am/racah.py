"""
Coefficients in the Racah reduction formulas, in Rose's normalization convention
for reduced matrix elements.

Each factor checks the coupling it requires and raises
:class:`~am.exceptions.TriangleDisallowedError` if it is violated
(or returns zero when exceptions are disabled in :mod:`am.config`).
"""

import logging

from . import config, exceptions
from .coupling import allowed_triangle
from .halfint import HalfInt, IntOrHalfInt, hat, parity_sign
from .wigner import wigner6j, wigner9j

logger = logging.getLogger(__name__)


def triangle_disallowed(message: str) -> float:
    return config.suppress(exceptions.TriangleDisallowedError(message), 0.0)


def _halfints(*js):
    return tuple(HalfInt(j) for j in js)


def racah_reduction_factor_rose(
    Jp: IntOrHalfInt, J: IntOrHalfInt, Jpp: IntOrHalfInt,
    J0a: IntOrHalfInt, J0b: IntOrHalfInt, J0: IntOrHalfInt,
) -> float:
    """
    Single-system reduction factor for the coupled product ``[A^(J0a) x B^(J0b)]^(J0)``,
    with ``Jpp`` the intermediate angular momentum:

        <Jp||[A x B]||J> = sum_Jpp factor * <Jp||A||Jpp> <Jpp||B||J>
    """
    Jp, J, Jpp, J0a, J0b, J0 = _halfints(Jp, J, Jpp, J0a, J0b, J0)
    if not allowed_triangle(J0a, J0b, J0):
        return triangle_disallowed(f"operator triangle ({J0a}, {J0b}, {J0}) disallowed")
    if not allowed_triangle(Jp, J0, J):
        return triangle_disallowed(f"matrix element triangle ({Jp}, {J0}, {J}) disallowed")

    return (
        parity_sign(J0 - Jp - J)
        * hat(Jpp)
        * hat(J0)
        * wigner6j(Jp, J, J0, J0b, J0a, Jpp)
    )


def racah_reduction_factor_1_rose(
    J1p: IntOrHalfInt, J2p: IntOrHalfInt, Jp: IntOrHalfInt,
    J1: IntOrHalfInt, J2: IntOrHalfInt, J: IntOrHalfInt,
    J0: IntOrHalfInt,
) -> float:
    """Two-system reduction factor for an operator acting on the first system only."""
    J1p, J2p, Jp, J1, J2, J, J0 = _halfints(J1p, J2p, Jp, J1, J2, J, J0)
    if J2p != J2:
        return triangle_disallowed(f"spectator mismatch J2p = {J2p}, J2 = {J2}")

    return (
        parity_sign(J1p + J2 + J + J0)
        * hat(J1p)
        * hat(J)
        * wigner6j(J1p, Jp, J2, J, J1, J0)
    )


def racah_reduction_factor_2_rose(
    J1p: IntOrHalfInt, J2p: IntOrHalfInt, Jp: IntOrHalfInt,
    J1: IntOrHalfInt, J2: IntOrHalfInt, J: IntOrHalfInt,
    J0: IntOrHalfInt,
) -> float:
    """Two-system reduction factor for an operator acting on the second system only."""
    J1p, J2p, Jp, J1, J2, J, J0 = _halfints(J1p, J2p, Jp, J1, J2, J, J0)
    if J1p != J1:
        return triangle_disallowed(f"spectator mismatch J1p = {J1p}, J1 = {J1}")

    return (
        parity_sign(J1 + J2 + Jp + J0)
        * hat(J2p)
        * hat(J)
        * wigner6j(Jp, J2p, J1, J2, J, J0)
    )


def racah_reduction_factor_12_dot_rose(
    J1p: IntOrHalfInt, J2p: IntOrHalfInt, Jp: IntOrHalfInt,
    J1: IntOrHalfInt, J2: IntOrHalfInt, J: IntOrHalfInt,
    J0: IntOrHalfInt,
) -> float:
    """Two-system reduction factor for a scalar (dot) product of rank-``J0`` operators on the two systems."""
    J1p, J2p, Jp, J1, J2, J, J0 = _halfints(J1p, J2p, Jp, J1, J2, J, J0)
    if Jp != J:
        return triangle_disallowed(f"scalar operator requires Jp == J, got {Jp} and {J}")

    return (
        parity_sign(J2p + Jp + J1)
        * hat(J1p)
        * hat(J2p)
        * wigner6j(J1p, J2p, Jp, J2, J1, J0)
    )


def racah_reduction_factor_12_rose(
    J1p: IntOrHalfInt, J2p: IntOrHalfInt, Jp: IntOrHalfInt,
    J1: IntOrHalfInt, J2: IntOrHalfInt, J: IntOrHalfInt,
    J0a: IntOrHalfInt, J0b: IntOrHalfInt, J0: IntOrHalfInt,
) -> float:
    """Two-system reduction factor for ``[A^(J0a) x B^(J0b)]^(J0)`` with ``A`` on system 1 and ``B`` on system 2."""
    J1p, J2p, Jp, J1, J2, J, J0a, J0b, J0 = _halfints(J1p, J2p, Jp, J1, J2, J, J0a, J0b, J0)
    if not allowed_triangle(Jp, J, J0):
        return triangle_disallowed(f"matrix element triangle ({Jp}, {J}, {J0}) disallowed")

    return (
        hat(J0)
        * hat(J)
        * hat(J1p)
        * hat(J2p)
        * wigner9j(Jp, J, J0, J1p, J1, J0a, J2p, J2, J0b)
    )


def racah_reduction_factor_21_rose(
    J1p: IntOrHalfInt, J2p: IntOrHalfInt, Jp: IntOrHalfInt,
    J1: IntOrHalfInt, J2: IntOrHalfInt, J: IntOrHalfInt,
    J0a: IntOrHalfInt, J0b: IntOrHalfInt, J0: IntOrHalfInt,
) -> float:
    """Two-system reduction factor for ``[A^(J0a) x B^(J0b)]^(J0)`` with ``A`` on system 2 and ``B`` on system 1."""
    J1p, J2p, Jp, J1, J2, J, J0a, J0b, J0 = _halfints(J1p, J2p, Jp, J1, J2, J, J0a, J0b, J0)
    if not allowed_triangle(Jp, J, J0):
        return triangle_disallowed(f"matrix element triangle ({Jp}, {J}, {J0}) disallowed")

    return (
        parity_sign(J0a + J0b - J0)
        * hat(J0)
        * hat(J)
        * hat(J1p)
        * hat(J2p)
        * wigner9j(Jp, J, J0, J1p, J1, J0b, J2p, J2, J0a)
    )
