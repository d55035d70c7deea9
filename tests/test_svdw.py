from hypothesis import given, settings
from hypothesis import strategies as st

from specrypt.bls_field import (
    P,
    fp2_add,
    fp2_inv,
    fp2_is_square,
    fp2_mul,
    fp2_neg,
    fp2_sgn0,
    fp_inv,
    fp_is_square,
    fp_sgn0,
)
from specrypt.svdw import (
    g1_curve_func,
    g1_map_to_curve_svdw,
    g2_curve_func,
    g2_map_to_curve_svdw,
)

U128 = st.integers(min_value=0, max_value=(1 << 128) - 1)


def _on_g2(x, y):
    return fp2_mul(y, y) == fp2_add(fp2_mul(fp2_mul(x, x), x), (4, 4))


def test_g1_curve_func_values():
    assert g1_curve_func(0) == 4
    assert g1_curve_func(1) == 5
    assert g1_curve_func(P - 1) == 3


def test_g2_curve_func_values():
    assert g2_curve_func((0, 0)) == (4, 4)
    assert g2_curve_func((1, 0)) == (5, 4)


def test_g1_correct_z():
    z = (-3) % P
    gz = g1_curve_func(z)
    assert gz != 0
    t = (-(3 * z * z)) * fp_inv(4 * gz) % P
    assert t != 0
    assert fp_is_square(t)
    assert fp_is_square(gz) or fp_is_square(g1_curve_func((-z) * fp_inv(2) % P))


def test_g2_correct_z():
    z = fp2_neg((1, 0))
    gz = g2_curve_func(z)
    assert gz != (0, 0)
    t = fp2_mul(
        fp2_neg(fp2_mul((3, 0), fp2_mul(z, z))),
        fp2_inv(fp2_mul((4, 0), gz)),
    )
    assert t != (0, 0)
    assert fp2_is_square(t)
    assert fp2_is_square(gz)


def test_g1_map_to_curve_svdw():
    x, y, inf = g1_map_to_curve_svdw(3082)
    assert y * y % P == (x * x * x + 4) % P
    assert inf is False


def test_g1_map_sign_matches_input():
    x, y, _ = g1_map_to_curve_svdw(3082)
    assert fp_sgn0(y) == fp_sgn0(3082)


def test_g1_map_is_deterministic():
    x, y, inf = g1_map_to_curve_svdw(12345)
    assert (x, y, inf) == g1_map_to_curve_svdw(12345 + P)
    assert y * y % P == (x * x * x + 4) % P
    assert inf is False


def test_g2_map_to_curve_svdw():
    x, y, inf = g2_map_to_curve_svdw((3082, 4021))
    assert _on_g2(x, y)
    assert inf is False


def test_g2_map_sign_matches_input():
    u = (3082, 4021)
    _, y, _ = g2_map_to_curve_svdw(u)
    assert fp2_sgn0(y) == fp2_sgn0(u)


@settings(max_examples=25, deadline=None)
@given(U128)
def test_prop_g1_map_to_curve_svdw(a):
    x, y, _ = g1_map_to_curve_svdw(a)
    assert y * y % P == (x * x * x + 4) % P


@settings(max_examples=10, deadline=None)
@given(U128, U128)
def test_prop_g2_map_to_curve_svdw(a, b):
    x, y, _ = g2_map_to_curve_svdw((a, b))
    assert _on_g2(x, y)