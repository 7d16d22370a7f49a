import pytest

import hypothesis as hyp
import hypothesis.strategies as st

import numpy as np

from am import (
    HalfInt,
    hi,
    AngularMomentumRange,
    product_angular_momenta,
    wigner3j,
    clebsch_gordan,
    wigner6j,
    unitary6j,
    unitary6jz,
    racah_reduction_factor_first_system,
    wigner9j,
    unitary9j,
    wigner3j2,
    clebsch_gordan2,
    wigner6j2,
    unitary6j2,
    unitary6jz2,
    wigner9j2,
    unitary9j2,
    exceptions,
)

# twice-value arguments
EXPLICIT_THREEJ = [
    ((0, 0, 0, 0, 0, 0), 1),
    ((2, 2, 4, 0, 0, 0), np.sqrt(2 / 15)),
    ((2, 2, 2, 0, 0, 0), 0),
    ((2, 2, 2, 2, -2, 0), np.sqrt(1 / 6)),
    ((4, 4, 4, 0, 0, 0), -np.sqrt(2 / 35)),
    ((4, 3, 5, 4, -1, -3), 0.276026),
]

EXPLICIT_SIXJ = [
    ((0, 0, 0, 0, 0, 0), 1),
    ((2, 4, 2, 2, 4, 2), 1 / 30),
    ((2, 4, 2, 4, 2, 2), -np.sqrt(1 / 20)),
    ((1, 2, 3, 2, 1, 2), -1 / 6),
    ((8, 8, 4, 8, 8, 8), -23 / 1386),
    ((4, 5, 9, 10, 5, 7), 0.0757095),
]

EXPLICIT_NINEJ = [
    ((0, 0, 0, 0, 0, 0, 0, 0, 0), 1),
    ((8, 8, 10, 8, 8, 10, 8, 8, 8), 1186 / 184041 * np.sqrt(1 / 7)),
    ((2, 4, 6, 2, 6, 4, 4, 6, 8), 2 / 105 * np.sqrt(2 / 7)),
    ((12, 6, 14, 8, 10, 6, 18, 16, 20), -0.00197657),
    ((1, 1, 0, 1, 1, 0, 0, 0, 0), 1 / 2),
]


@pytest.mark.parametrize("args, target", EXPLICIT_THREEJ)
def test_explicit_threej(args, target):
    assert np.isclose(wigner3j2(*args), target, rtol=1e-5, atol=1e-12)


@pytest.mark.parametrize("args, target", EXPLICIT_SIXJ)
def test_explicit_sixj(args, target):
    assert np.isclose(wigner6j2(*args), target, rtol=1e-5, atol=1e-12)


@pytest.mark.parametrize("args, target", EXPLICIT_NINEJ)
def test_explicit_ninej(args, target):
    assert np.isclose(wigner9j2(*args), target, rtol=1e-5, atol=1e-12)


def test_halfint_arguments_marshal_to_twice_values():
    assert wigner3j(2, hi("1.5"), hi("2.5"), 2, -hi("0.5"), -hi("1.5")) == wigner3j2(4, 3, 5, 4, -1, -3)
    assert wigner6j(2, hi("2.5"), hi("4.5"), 5, hi("2.5"), hi("3.5")) == wigner6j2(4, 5, 9, 10, 5, 7)
    assert wigner9j(6, 3, 7, 4, 5, 3, 9, 8, 10) == wigner9j2(12, 6, 14, 8, 10, 6, 18, 16, 20)


def test_demonstration_values():
    assert np.isclose(
        wigner3j(2, HalfInt(3, 2), HalfInt(5, 2), +2, -HalfInt(1, 2), -HalfInt(3, 2)),
        0.276026,
        rtol=1e-5,
    )
    assert np.isclose(
        clebsch_gordan(2, +2, HalfInt(3, 2), -HalfInt(1, 2), HalfInt(5, 2), +HalfInt(3, 2)),
        0.676123,
        rtol=1e-5,
    )
    assert np.isclose(
        wigner6j(2, HalfInt(5, 2), HalfInt(9, 2), 5, HalfInt(5, 2), HalfInt(7, 2)),
        0.0757095,
        rtol=1e-5,
    )
    assert np.isclose(
        unitary6j(2, HalfInt(5, 2), HalfInt(9, 2), 5, HalfInt(5, 2), HalfInt(7, 2)),
        0.677166,
        rtol=1e-5,
    )
    assert np.isclose(wigner9j(6, 3, 7, 4, 5, 3, 9, 8, 10), -0.00197657, rtol=1e-5)
    assert np.isclose(unitary9j(6, 3, 7, 4, 5, 3, 9, 8, 10), -0.364006, rtol=1e-5)


def test_half_integer_ninej():
    h = HalfInt(1, 2)

    assert np.isclose(wigner9j(h, h, 0, h, h, 0, 0, 0, 0), 1 / 2)
    assert np.isclose(wigner9j(h, h, 0, h, h, 0, 1, 1, 0), 1 / (2 * np.sqrt(3)))
    assert np.isclose(unitary9j(h, h, 0, h, h, 0, 1, 1, 0), np.sqrt(3) / 2)
    assert wigner9j(h, h, 0, h, h, 1, 1, 1, 0) == 0


@pytest.mark.parametrize(
    "args",
    [
        (2, 2, 2, 2, 2, 0),  # m sum nonzero
        (2, 2, 2, 4, -4, 0),  # |m| > j
        (2, 2, 2, 1, -1, 0),  # j - m not integer
        (2, 2, 6, 0, 0, 0),  # triangle
        (1, 1, 1, 1, -1, 0),  # half-integer sum
    ],
)
def test_threej_selection_rules_vanish(args):
    assert wigner3j2(*args) == 0


def test_sixj_with_disallowed_triad_vanishes():
    assert wigner6j(1, 1, 3, 1, 1, 1) == 0
    assert wigner6j(HalfInt(1, 2), 1, 1, 1, 1, 1) == 0


@pytest.mark.parametrize("j1, j2", [(HalfInt(1, 2), HalfInt(1, 2)), (1, HalfInt(3, 2)), (2, 1)])
def test_clebsch_gordan_orthonormality(j1, j2):
    for m1 in AngularMomentumRange(-j1, j1).values():
        for m2 in AngularMomentumRange(-j2, j2).values():
            total = sum(
                clebsch_gordan(j1, m1, j2, m2, J, m1 + m2) ** 2
                for J in product_angular_momenta(j1, j2)
                if abs(m1 + m2) <= J
            )
            assert np.isclose(total, 1)


def test_clebsch_gordan_twice_values():
    assert clebsch_gordan2(4, 4, 3, -1, 5, 3) == clebsch_gordan(
        2, 2, HalfInt(3, 2), HalfInt(-1, 2), HalfInt(5, 2), HalfInt(3, 2)
    )
    assert np.isclose(clebsch_gordan2(1, 1, 1, -1, 0, 0), np.sqrt(1 / 2))


def test_clebsch_gordan_with_complex_phase_raises():
    with pytest.raises(exceptions.ComplexPhaseError):
        clebsch_gordan(HalfInt(1, 2), HalfInt(1, 2), HalfInt(1, 2), HalfInt(-1, 2), 1, HalfInt(1, 2))


@hyp.settings(deadline=None, max_examples=30)
@hyp.given(
    two_j=st.tuples(*(st.integers(min_value=0, max_value=6) for _ in range(6)))
)
def test_sixj_is_invariant_under_column_permutation(two_j):
    a, b, c, d, e, f = two_j

    assert np.isclose(wigner6j2(a, b, c, d, e, f), wigner6j2(b, a, c, e, d, f))
    assert np.isclose(wigner6j2(a, b, c, d, e, f), wigner6j2(c, b, a, f, e, d))


def test_unitary6j_is_orthogonal():
    j1, j2, j3, J = 1, HalfInt(1, 2), 1, HalfInt(3, 2)
    j12_values = product_angular_momenta(j1, j2)
    j23_values = product_angular_momenta(j2, j3)

    matrix = np.array(
        [[unitary6j(j1, j2, j12, j3, J, j23) for j23 in j23_values] for j12 in j12_values]
    )

    assert np.allclose(matrix @ matrix.T, np.eye(len(j12_values)))


def test_unitary6jz_is_orthogonal():
    j1, j2, j3, J = 1, HalfInt(1, 2), 1, HalfInt(3, 2)
    j12_values = product_angular_momenta(j1, j2)
    j13_values = product_angular_momenta(j1, j3)

    matrix = np.array(
        [[unitary6jz(j1, j2, j12, J, j3, j13) for j13 in j13_values] for j12 in j12_values]
    )

    assert np.allclose(matrix @ matrix.T, np.eye(len(j12_values)))


def test_unitary_twice_value_variants():
    assert unitary6j2(4, 5, 9, 10, 5, 7) == unitary6j(
        2, HalfInt(5, 2), HalfInt(9, 2), 5, HalfInt(5, 2), HalfInt(7, 2)
    )
    assert unitary6jz2(4, 5, 9, 10, 5, 7) == unitary6jz(
        2, HalfInt(5, 2), HalfInt(9, 2), 5, HalfInt(5, 2), HalfInt(7, 2)
    )
    assert np.isclose(unitary6jz2(4, 5, 9, 10, 5, 7), -0.677166, rtol=1e-5)
    assert unitary9j2(12, 6, 14, 8, 10, 6, 18, 16, 20) == unitary9j(6, 3, 7, 4, 5, 3, 9, 8, 10)


def test_racah_reduction_factor_first_system():
    j1p, j2p, Jp, j1, j2, J, J0 = 1, HalfInt(1, 2), HalfInt(3, 2), 1, HalfInt(1, 2), HalfInt(1, 2), 1
    expected = (
        (-1) ** 3
        * np.sqrt(4)
        * np.sqrt(2)
        * wigner6j(j1p, Jp, j2p, J, j1, J0)
    )

    assert np.isclose(racah_reduction_factor_first_system(j1p, j2p, Jp, j1, j2, J, J0), expected)
