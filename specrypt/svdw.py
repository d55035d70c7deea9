"""Shallue-van de Woestijne maps from field elements to BLS12-381 curves.

A G1 point is ``(x, y, infinity)`` with Fp coordinates. A G2 point is
``(x, y, infinity)`` with Fp2 coordinates.
"""

from __future__ import annotations

from .bls_field import (
    FP2_ONE,
    Fp2,
    P,
    fp2_add,
    fp2_inv,
    fp2_is_square,
    fp2_mul,
    fp2_neg,
    fp2_sgn0,
    fp2_sqrt,
    fp2_sub,
    fp_inv,
    fp_is_square,
    fp_sgn0,
    fp_sqrt,
)

G1Point = tuple[int, int, bool]
G2Point = tuple[Fp2, Fp2, bool]

_G2_B: Fp2 = (4, 4)


def g1_curve_func(x: int) -> int:
    """The right-hand side ``x**3 + 4`` of the G1 curve equation."""
    return (x * x * x + 4) % P


def g1_map_to_curve_svdw(u: int) -> G1Point:
    """Map an Fp element to a point of the G1 curve."""
    u %= P
    z = (-3) % P
    gz = g1_curve_func(z)
    tv1 = u * u * gz % P
    tv2 = (1 + tv1) % P
    tv1 = (1 - tv1) % P
    tv3 = fp_inv(tv1 * tv2)
    three_z2 = 3 * z * z % P
    tv4 = fp_sqrt((-gz) * three_z2)
    if fp_sgn0(tv4):
        tv4 = (-tv4) % P
    tv5 = u * tv1 * tv3 * tv4 % P
    tv6 = (-4) * gz * fp_inv(three_z2) % P
    half_neg_z = (-z) * fp_inv(2) % P
    x1 = (half_neg_z - tv5) % P
    x2 = (half_neg_z + tv5) % P
    t = tv2 * tv2 * tv3 % P
    x3 = (z + tv6 * t * t) % P
    if fp_is_square(g1_curve_func(x1)):
        x = x1
    elif fp_is_square(g1_curve_func(x2)):
        x = x2
    else:
        x = x3
    y = fp_sqrt(g1_curve_func(x))
    if fp_sgn0(u) != fp_sgn0(y):
        y = (-y) % P
    return x, y, False


def g2_curve_func(x: Fp2) -> Fp2:
    """The right-hand side ``x**3 + 4(1 + i)`` of the G2 curve equation."""
    return fp2_add(fp2_mul(x, fp2_mul(x, x)), _G2_B)


def g2_map_to_curve_svdw(u: Fp2) -> G2Point:
    """Map an Fp2 element to a point of the G2 curve."""
    u = (u[0] % P, u[1] % P)
    z = fp2_neg(FP2_ONE)
    gz = g2_curve_func(z)
    tv1 = fp2_mul(fp2_mul(u, u), gz)
    tv2 = fp2_add(FP2_ONE, tv1)
    tv1 = fp2_sub(FP2_ONE, tv1)
    tv3 = fp2_inv(fp2_mul(tv1, tv2))
    three_z2 = fp2_mul((3, 0), fp2_mul(z, z))
    tv4 = fp2_sqrt(fp2_mul(fp2_neg(gz), three_z2))
    if fp2_sgn0(tv4):
        tv4 = fp2_neg(tv4)
    tv5 = fp2_mul(fp2_mul(fp2_mul(u, tv1), tv3), tv4)
    tv6 = fp2_mul(fp2_mul(fp2_neg((4, 0)), gz), fp2_inv(three_z2))
    half_neg_z = fp2_mul(fp2_neg(z), fp2_inv((2, 0)))
    x1 = fp2_sub(half_neg_z, tv5)
    x2 = fp2_add(half_neg_z, tv5)
    tv7 = fp2_mul(fp2_mul(tv2, tv2), tv3)
    x3 = fp2_add(z, fp2_mul(tv6, fp2_mul(tv7, tv7)))
    if fp2_is_square(g2_curve_func(x1)):
        x = x1
    elif fp2_is_square(g2_curve_func(x2)):
        x = x2
    else:
        x = x3
    y = fp2_sqrt(g2_curve_func(x))
    if fp2_sgn0(u) != fp2_sgn0(y):
        y = fp2_neg(y)
    return x, y, False