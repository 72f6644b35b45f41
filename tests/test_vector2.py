import pytest

from biots.math_utils import Vector2, floored_mod


def test_vector2_inplace_add():
    v1 = Vector2(1, 2)
    v2 = Vector2(3, 4)
    v1 += v2
    assert v1.x == 4
    assert v1.y == 6

    # Verify it returns self
    v3 = Vector2(1, 1)
    alias = v3
    v3 += Vector2(1, 1)
    assert v3 is alias
    assert v3.x == 2


def test_vector2_inplace_mul():
    v1 = Vector2(2, 3)
    v1 *= 0.9
    assert v1.x == pytest.approx(1.8)
    assert v1.y == pytest.approx(2.7)


def test_vector2_sub_and_div():
    v = (Vector2(5, 6) - Vector2(2, 2)) / 2
    assert v == Vector2(1.5, 2)


def test_vector2_div_by_zero():
    with pytest.raises(ZeroDivisionError):
        Vector2(4, 6) / 0


def test_vector2_rmul():
    v = Vector2(1.5, -2.0)
    result = 3 * v
    assert result.x == pytest.approx(4.5)
    assert result.y == pytest.approx(-6.0)


def test_vector2_equality_tolerance():
    base = Vector2(1.0, 1.0)
    close = Vector2(1.0 + 5e-10, 1.0 - 5e-10)
    far = Vector2(1.0, 1.0001)

    assert base == close
    assert base != far
    assert base != (1.0, 1.0)


def test_vector2_length():
    v = Vector2(3, 4)
    assert v.length() == pytest.approx(5.0)
    assert v.length_squared() == pytest.approx(25.0)


def test_normalize():
    n = Vector2(3, 4).normalize()
    assert n.length() == pytest.approx(1.0)
    assert n == Vector2(0.6, 0.8)


def test_normalize_zero_vector_stays_zero():
    assert Vector2(0, 0).normalize() == Vector2(0, 0)


def test_copy_is_independent():
    v = Vector2(1, 2)
    c = v.copy()
    c.x = 10
    assert v.x == 1


@pytest.mark.parametrize(
    "a,b,expected",
    [
        (805.0, 800.0, 5.0),
        (-3.0, 800.0, 797.0),
        (-800.0, 800.0, 0.0),
        (0.0, 600.0, 0.0),
        (599.5, 600.0, 599.5),
    ],
)
def test_floored_mod(a, b, expected):
    assert floored_mod(a, b) == pytest.approx(expected)


def test_floored_mod_tiny_negative_stays_below_extent():
    result = floored_mod(-1e-20, 800.0)
    assert 0.0 <= result < 800.0
