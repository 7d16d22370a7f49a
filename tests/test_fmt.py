import pytest

from am import HalfInt, AngularMomentumRange, fmt, product_angular_momentum_range


@pytest.mark.parametrize(
    "h, spec, expected",
    [
        (HalfInt(3, 2), "", "3/2"),
        (HalfInt(3, 2), "g", "3/2"),
        (HalfInt(3, 2), "f", "1.5"),
        (HalfInt(-1, 2), "f", "-0.5"),
        (HalfInt(2), "g", "2"),
        (HalfInt(2), "f", "2.0"),
        (HalfInt(2), "d", "2"),
        (HalfInt(-3), "d", "-3"),
    ],
)
def test_format(h, spec, expected):
    assert format(h, spec) == expected
    assert f"{h:{spec}}" == expected


def test_format_d_rejects_half_integers():
    with pytest.raises(ValueError):
        format(HalfInt(1, 2), "d")


@pytest.mark.parametrize("spec", ["x", "5", ".2f", "gg"])
def test_format_invalid_spec(spec):
    with pytest.raises(ValueError, match="invalid format"):
        format(HalfInt(1, 2), spec)


def test_angular_momentum_range():
    assert fmt.angular_momentum_range(AngularMomentumRange(1, 5)) == "(1,5)"
    assert fmt.angular_momentum_range(product_angular_momentum_range(HalfInt(1, 2), 1)) == "(1/2,3/2)"
