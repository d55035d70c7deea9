"""Field arithmetic for BLS12-381 hashing to curves.

Elements of Fp are ``int`` values in ``[0, P)``. Elements of Fp2 = Fp[i] with
``i**2 = -1`` are ``(re, im)`` tuples of such integers.
"""

from __future__ import annotations

import hashlib

P = int(
    "1a0111ea397fe69a4b1ba7b6434bacd764774b84f38512bf"
    "6730d2a0f6b0f6241eabfffeb153ffffb9feffffffffaaab",
    16,
)

Fp2 = tuple[int, int]

FP2_ZERO: Fp2 = (0, 0)
FP2_ONE: Fp2 = (1, 0)

_B_IN_BYTES = 32
_S_IN_BYTES = 64
_L = 64

_P_1_2 = (P - 1) // 2
_P_1_4 = (P + 1) // 4
_P_3_4 = (P - 3) // 4


def fp_inv(x: int) -> int:
    """Multiplicative inverse in Fp; zero maps to zero."""
    return pow(x % P, P - 2, P)


def fp2_add(a: Fp2, b: Fp2) -> Fp2:
    """Sum of two Fp2 elements."""
    return (a[0] + b[0]) % P, (a[1] + b[1]) % P


def fp2_sub(a: Fp2, b: Fp2) -> Fp2:
    """Difference of two Fp2 elements."""
    return (a[0] - b[0]) % P, (a[1] - b[1]) % P


def fp2_mul(a: Fp2, b: Fp2) -> Fp2:
    """Product of two Fp2 elements."""
    a0, a1 = a
    b0, b1 = b
    return (a0 * b0 - a1 * b1) % P, (a0 * b1 + a1 * b0) % P


def fp2_neg(a: Fp2) -> Fp2:
    """Additive inverse in Fp2."""
    return (-a[0]) % P, (-a[1]) % P


def fp2_inv(a: Fp2) -> Fp2:
    """Multiplicative inverse in Fp2; zero maps to zero."""
    a0, a1 = a
    t = fp_inv(a0 * a0 + a1 * a1)
    return (a0 * t) % P, (-a1 * t) % P


def _fp2_from_fp(x: int) -> Fp2:
    return x % P, 0


def _fp2_conjugate(a: Fp2) -> Fp2:
    return a[0] % P, (-a[1]) % P


def _fp2_pow(n: Fp2, k: int) -> Fp2:
    result = FP2_ONE
    for bit in bin(k % P)[2:]:
        result = fp2_mul(result, result)
        if bit == "1":
            result = fp2_mul(result, n)
    return result


def _hash(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def expand_message_xmd(msg: bytes, dst: bytes, len_in_bytes: int) -> bytes:
    """Expand ``msg`` to ``len_in_bytes`` uniform bytes with SHA-256."""
    msg = bytes(msg)
    dst = bytes(dst)
    ell = (len_in_bytes + _B_IN_BYTES - 1) // _B_IN_BYTES
    dst_prime = dst + bytes([len(dst) & 0xFF])
    z_pad = bytes(_S_IN_BYTES)
    l_i_b_str = bytes([(len_in_bytes // 256) & 0xFF, len_in_bytes & 0xFF])
    msg_prime = z_pad + msg + l_i_b_str + b"\x00" + dst_prime
    b_0 = _hash(msg_prime)
    b_i = _hash(b_0 + b"\x01" + dst_prime)
    uniform = bytearray(b_i)
    for i in range(2, ell + 1):
        mixed = bytes(x ^ y for x, y in zip(b_0, b_i))
        b_i = _hash(mixed + bytes([i & 0xFF]) + dst_prime)
        uniform += b_i
    return bytes(uniform[:len_in_bytes])


def _element_at(uniform: bytes, index: int) -> int:
    offset = _L * index
    return int.from_bytes(uniform[offset : offset + _L], "big") % P


def fp_hash_to_field(msg: bytes, dst: bytes, count: int) -> list[int]:
    """Hash ``msg`` to ``count`` elements of Fp."""
    uniform = expand_message_xmd(msg, dst, count * _L)
    return [_element_at(uniform, i) for i in range(count)]


def fp2_hash_to_field(msg: bytes, dst: bytes, count: int) -> list[Fp2]:
    """Hash ``msg`` to ``count`` elements of Fp2."""
    uniform = expand_message_xmd(msg, dst, count * 2 * _L)
    return [
        (_element_at(uniform, 2 * i), _element_at(uniform, 2 * i + 1))
        for i in range(count)
    ]


def fp_sgn0(x: int) -> bool:
    """Whether ``x`` is odd."""
    return (x % P) % 2 == 1


def fp_is_square(x: int) -> bool:
    """Whether ``x`` is a square in Fp (zero counts as a square)."""
    return pow(x % P, _P_1_2, P) in (0, 1)


def fp_sqrt(x: int) -> int:
    """A square root of ``x``; meaningful only if ``x`` is a square."""
    return pow(x % P, _P_1_4, P)


def fp2_sgn0(x: Fp2) -> bool:
    """The sign of an Fp2 element as defined for hashing to curves."""
    x0, x1 = x[0] % P, x[1] % P
    return fp_sgn0(x0) or (x0 == 0 and fp_sgn0(x1))


def fp2_is_square(x: Fp2) -> bool:
    """Whether ``x`` is a square in Fp2."""
    x1, x2 = x
    norm = (x1 * x1 + x2 * x2) % P
    return pow(norm, _P_1_2, P) != P - 1


def fp2_sqrt(a: Fp2) -> Fp2:
    """A square root of ``a``; meaningful only if ``a`` is a square."""
    a = (a[0] % P, a[1] % P)
    a1 = _fp2_pow(a, _P_3_4)
    alpha = fp2_mul(a1, fp2_mul(a1, a))
    x0 = fp2_mul(a1, a)
    if alpha == (P - 1, 0):
        return fp2_mul((0, 1), x0)
    b = _fp2_pow(fp2_add(FP2_ONE, alpha), _P_1_2)
    return fp2_mul(b, x0)