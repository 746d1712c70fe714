import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from vecmat.vectors import (
    Vector2,
    Vector3,
    clamp,
    component_max,
    component_min,
    cross_product,
    distance_between,
    distance_between_squared,
    lerp,
)

ints = st.integers(min_value=-1000, max_value=1000)
pairs = st.tuples(ints, ints)
triples = st.tuples(ints, ints, ints)
vec2s = st.builds(Vector2, ints, ints)
vec3s = st.builds(Vector3, ints, ints, ints)


@given(triples, triples)
def test_add_then_subtract_round_trip(a, b):
    va = Vector3(*a)
    vb = Vector3(*b)
    assert (va + vb) - vb == Vector3(*a)


@given(pairs, pairs)
def test_add_is_commutative_2d(a, b):
    assert Vector2(*a) + Vector2(*b) == Vector2(*b) + Vector2(*a)


@given(triples, ints)
def test_scalar_multiplication_commutes(t, s):
    v = Vector3(*t)
    assert v * s == s * v
    assert list(v * s) == [c * s for c in t]


@given(triples)
def test_dot_with_self_is_length_squared(t):
    v = Vector3(*t)
    assert v * v == v.length_squared()
    assert v.length_squared() == sum(c * c for c in t)


@given(pairs)
def test_length_matches_length_squared(p):
    v = Vector2(*p)
    assert v.length() == pytest.approx(math.sqrt(v.length_squared()))


def test_length_of_pythagorean_vector():
    assert Vector2(3, 4).length() == 5.0


@given(triples)
def test_negation_cancels(t):
    v = Vector3(*t)
    assert (-v + v).is_zero()
    assert -(-v) == Vector3(*t)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector3(1, 2, 3) / 0


@given(triples, st.integers(min_value=1, max_value=50))
def test_division_undoes_multiplication(t, s):
    result = (Vector3(*t) * s) / s
    assert list(result) == pytest.approx(list(t))


def test_mixing_dimensions_raises():
    with pytest.raises(TypeError):
        Vector2(1, 2) + Vector3(1, 2, 3)
    with pytest.raises(TypeError):
        Vector3(1, 2, 3) * Vector2(1, 2)


def test_vectors_of_different_kinds_are_not_equal():
    assert (Vector2(1, 2) == Vector3(1, 2, 0)) is False


def test_indexing_and_iteration():
    v = Vector3(7, 8, 9)
    assert [v[0], v[1], v[2]] == list(v)
    v[1] = 42
    v[2] = 43
    assert v == Vector3(7, 42, 43)


@pytest.mark.parametrize("index", [-1, 2, 5])
def test_vector2_index_out_of_range(index):
    v = Vector2(1, 2)
    with pytest.raises(IndexError):
        v[index]
    with pytest.raises(IndexError):
        v[index] = 0
    assert v == Vector2(1, 2)
    assert (v[0], v[1]) == (1, 2)


def test_vector3_index_out_of_range():
    with pytest.raises(IndexError):
        Vector3(1, 2, 3)[3]


def test_is_zero():
    assert Vector3(0, 0, 0).is_zero()
    assert not Vector3(0, 0, 1).is_zero()
    assert Vector2().is_zero()


def test_normalize_axis_vector():
    v = Vector2(2, 0)
    v.normalize()
    assert v == Vector2(1.0, 0.0)
    assert v.is_normalized()


@given(triples.filter(lambda t: any(t)))
def test_normalize_gives_unit_length(t):
    v = Vector3(*t)
    v.normalize()
    assert v.length() == pytest.approx(1.0)


def test_normalize_zero_raises():
    with pytest.raises(ValueError):
        Vector3(0, 0, 0).normalize()


def test_is_normalized_false_for_long_vector():
    assert not Vector3(1, 1, 1).is_normalized()


@given(ints)
def test_splat(s):
    assert list(Vector2.splat(s)) == [s, s]
    assert list(Vector3.splat(s)) == [s, s, s]


@given(vec2s, ints)
def test_from_vector2(v, z):
    w = Vector3.from_vector2(v, z)
    assert (w.x, w.y, w.z) == (v.x, v.y, z)


@given(vec3s, vec3s)
def test_cross_product_is_orthogonal(v, u):
    c = cross_product(v, u)
    assert c * v == 0
    assert c * u == 0


@given(vec3s, vec3s)
def test_cross_product_anticommutes(v, u):
    assert cross_product(v, u) == -cross_product(u, v)


@given(vec3s)
def test_cross_product_with_self_is_zero(v):
    assert cross_product(v, v).is_zero()


def test_cross_product_of_axes():
    x_axis = Vector3(1, 0, 0)
    y_axis = Vector3(0, 1, 0)
    z_axis = Vector3(0, 0, 1)
    assert cross_product(x_axis, y_axis) == z_axis


def test_cross_product_rejects_2d():
    with pytest.raises(TypeError):
        cross_product(Vector2(1, 2), Vector2(3, 4))


@given(vec3s, vec3s)
def test_lerp_endpoints(v, u):
    assert lerp(v, u, 0.0) == v
    assert lerp(v, u, 1.0) == u


@given(vec2s, vec2s)
def test_lerp_midpoint(v, u):
    mid = lerp(v, u, 0.5)
    assert list(mid) == pytest.approx([(a + b) / 2 for a, b in zip(v, u)])


def test_lerp_rejects_mixed_kinds():
    with pytest.raises(TypeError):
        lerp(Vector2(1, 2), Vector3(1, 2, 3), 0.5)


@given(vec3s, ints, ints)
def test_clamp_within_bounds(v, a, b):
    low, high = min(a, b), max(a, b)
    result = clamp(v, low, high)
    assert all(low <= c <= high for c in result)
    for original, clamped in zip(v, result):
        if low <= original <= high:
            assert clamped == original


@given(vec3s, vec3s)
def test_min_and_max(v, u):
    lo = component_min(v, u)
    hi = component_max(v, u)
    assert all(a <= b for a, b in zip(lo, hi))
    assert lo + hi == v + u


@given(vec2s, vec2s)
def test_min_and_max_2d(v, u):
    lo = component_min(v, u)
    hi = component_max(v, u)
    assert lo + hi == v + u
    assert all(a <= b for a, b in zip(lo, hi))


@given(vec3s, vec3s)
def test_distances(v, u):
    squared = distance_between_squared(v, u)
    assert squared == (v - u).length_squared()
    assert distance_between(v, u) == pytest.approx(math.sqrt(squared))
    assert distance_between(v, u) == pytest.approx(distance_between(u, v))


@given(vec3s)
def test_distance_to_self_is_zero(v):
    assert distance_between(v, v) == 0