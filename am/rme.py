"""
Standard reduced matrix elements, in Rose's normalization convention.
"""

import logging

import enum

import numpy as np

from .coupling import allowed_triangle
from .halfint import HalfInt, IntOrHalfInt, hat, parity_sign
from .racah import triangle_disallowed
from .wigner import wigner3j, wigner6j

logger = logging.getLogger(__name__)

INV_SQRT_4PI = 1 / np.sqrt(4 * np.pi)

HALF = HalfInt(1, 2)


class AngularMomentumOperatorType(enum.Enum):
    ORBITAL = "l"
    SPIN = "s"
    TOTAL = "j"


def spherical_harmonic_c_rme(lp: int, l: int, k: int) -> float:
    """``<lp||C_k||l>`` for the unnormalized spherical harmonic ``C_k``."""
    if not allowed_triangle(lp, k, l):
        return triangle_disallowed(f"triangle ({lp}, {k}, {l}) disallowed")

    return hat(l) * parity_sign(lp) * wigner3j(lp, k, l, 0, 0, 0)


def lj_coupled_spherical_harmonic_c_rme(
    lp: int, jp: IntOrHalfInt, l: int, j: IntOrHalfInt, k: int
) -> float:
    """``<lp jp||C_k||l j>`` between single-particle states with spin 1/2 coupled to the orbital motion."""
    if not allowed_triangle(lp, HALF, jp):
        return triangle_disallowed(f"triangle ({lp}, 1/2, {jp}) disallowed")
    if not allowed_triangle(l, HALF, j):
        return triangle_disallowed(f"triangle ({l}, 1/2, {j}) disallowed")

    # parity selection rule
    if parity_sign(HalfInt(lp) + l + k) != 1:
        return 0.0

    j = HalfInt(j)
    return hat(j) * parity_sign(j + k - HALF) * wigner3j(jp, j, k, HALF, -HALF, 0)


def spherical_harmonic_y_rme(lp: int, l: int, k: int) -> float:
    """``<lp||Y_k||l>``."""
    return hat(k) * INV_SQRT_4PI * spherical_harmonic_c_rme(lp, l, k)


def lj_coupled_spherical_harmonic_y_rme(
    lp: int, jp: IntOrHalfInt, l: int, j: IntOrHalfInt, k: int
) -> float:
    return hat(k) * INV_SQRT_4PI * lj_coupled_spherical_harmonic_c_rme(lp, jp, l, j, k)


def angular_momentum_j_rme(Jp: IntOrHalfInt, J: IntOrHalfInt) -> float:
    """``<Jp||J||J>``; zero off the diagonal."""
    if J != Jp:
        return 0.0

    J = HalfInt(J)
    return np.sqrt(float(J) * float(J + 1))


def _check_jjj_couplings(J1p, J2p, Jp, J1, J2, J):
    if not allowed_triangle(J1p, J2p, Jp):
        return f"bra triangle ({J1p}, {J2p}, {Jp}) disallowed"
    if not allowed_triangle(J1, J2, J):
        return f"ket triangle ({J1}, {J2}, {J}) disallowed"
    if not allowed_triangle(Jp, 1, J):
        return f"vector operator triangle ({Jp}, 1, {J}) disallowed"
    return None


def jjj_coupled_angular_momentum_j1_rme(
    J1p: IntOrHalfInt, J2p: IntOrHalfInt, Jp: IntOrHalfInt,
    J1: IntOrHalfInt, J2: IntOrHalfInt, J: IntOrHalfInt,
) -> float:
    """``<(J1p, J2p) Jp||J1||(J1, J2) J>``, for the angular momentum operator of the first subsystem."""
    J1p, J2p, Jp, J1, J2, J = (HalfInt(j) for j in (J1p, J2p, Jp, J1, J2, J))
    problem = _check_jjj_couplings(J1p, J2p, Jp, J1, J2, J)
    if problem is not None:
        return triangle_disallowed(problem)
    if J1p != J1 or J2p != J2:
        return 0.0

    return (
        parity_sign(1 + J2p + J + J1p)
        * np.sqrt(float(J1p) * float(J1p + 1) * float(2 * J1p + 1) * float(2 * J + 1))
        * wigner6j(Jp, J, 1, J1, J1p, J2p)
    )


def jjj_coupled_angular_momentum_j2_rme(
    J1p: IntOrHalfInt, J2p: IntOrHalfInt, Jp: IntOrHalfInt,
    J1: IntOrHalfInt, J2: IntOrHalfInt, J: IntOrHalfInt,
) -> float:
    """``<(J1p, J2p) Jp||J2||(J1, J2) J>``, for the angular momentum operator of the second subsystem."""
    J1p, J2p, Jp, J1, J2, J = (HalfInt(j) for j in (J1p, J2p, Jp, J1, J2, J))
    problem = _check_jjj_couplings(J1p, J2p, Jp, J1, J2, J)
    if problem is not None:
        return triangle_disallowed(problem)
    if J1p != J1 or J2p != J2:
        return 0.0

    return (
        parity_sign(1 + J1p + Jp + J2)
        * np.sqrt(float(J2p) * float(J2p + 1) * float(2 * J2p + 1) * float(2 * J + 1))
        * wigner6j(Jp, J, 1, J2, J2p, J1p)
    )


def jjj_coupled_angular_momentum_j_rme(
    J1p: IntOrHalfInt, J2p: IntOrHalfInt, Jp: IntOrHalfInt,
    J1: IntOrHalfInt, J2: IntOrHalfInt, J: IntOrHalfInt,
) -> float:
    """``<(J1p, J2p) Jp||J||(J1, J2) J>``, for the total angular momentum operator."""
    problem = _check_jjj_couplings(J1p, J2p, Jp, J1, J2, J)
    if problem is not None:
        return triangle_disallowed(problem)
    if J1p != J1 or J2p != J2:
        return 0.0

    return angular_momentum_j_rme(Jp, J)
