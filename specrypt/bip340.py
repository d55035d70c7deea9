"""BIP-340 Schnorr signatures over secp256k1.

Not constant time: unsuitable where timing side channels matter.
Points are ``(x, y)`` tuples of field integers; ``None`` is the point at
infinity.
"""

from __future__ import annotations

import hashlib
from typing import Optional, Tuple

P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

GX = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
GY = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8

_P1_4 = 0x3FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFBFFFFF0C

AffinePoint = Tuple[int, int]
Point = Optional[AffinePoint]

_TAG_AUX = b"BIP0340/aux"
_TAG_NONCE = b"BIP0340/nonce"
_TAG_CHALLENGE = b"BIP0340/challenge"


class Bip340Error(ValueError):
    """Base class for BIP-340 failures."""


class InvalidSecretKeyError(Bip340Error):
    """The secret key is zero or not below the group order."""


class InvalidNonceError(Bip340Error):
    """The derived nonce was zero."""


class InvalidPublicKeyError(Bip340Error):
    """The public key is not a field element."""


class InvalidXCoordinateError(Bip340Error):
    """No curve point has the given x coordinate."""


class InvalidSignatureError(Bip340Error):
    """The signature is malformed or does not verify."""


def _bytes32(name: str, data: bytes) -> bytes:
    data = bytes(data)
    if len(data) != 32:
        raise ValueError(f"{name} must be 32 bytes, got {len(data)}")
    return data


def _inv(a: int) -> int:
    return pow(a, P - 2, P)


def has_even_y(p: AffinePoint) -> bool:
    """Whether the y coordinate of ``p`` is even."""
    return p[1] % 2 == 0


def _sqrt(y: int) -> Optional[int]:
    x = pow(y, _P1_4, P)
    return x if pow(x, 2, P) == y % P else None


def lift_x(x: int) -> AffinePoint:
    """Return the curve point with x coordinate ``x`` and even y."""
    x %= P
    y = _sqrt((pow(x, 3, P) + 7) % P)
    if y is None:
        raise InvalidXCoordinateError(f"no point with x = {x:#x}")
    if y % 2 == 1:
        y = (P - y) % P
    return x, y


def _compute_lam(p1: AffinePoint, p2: AffinePoint) -> int:
    (x1, y1), (x2, y2) = p1, p2
    if p1 != p2:
        return (y2 - y1) * _inv((x2 - x1) % P) % P
    return 3 * x1 * x1 * _inv(2 * y1 % P) % P


def point_add(p1: Point, p2: Point) -> Point:
    """Add two points of the curve."""
    if p1 is None:
        return p2
    if p2 is None:
        return p1
    (x1, y1), (x2, _) = p1, p2
    if x1 == x2 and p1[1] != p2[1]:
        return None
    lam = _compute_lam(p1, p2)
    x3 = (lam * lam - x1 - x2) % P
    return x3, (lam * (x1 - x3) - y1) % P


def point_mul(s: int, p: Point) -> Point:
    """Multiply ``p`` by the scalar ``s`` (taken modulo the group order)."""
    s %= N
    q: Point = None
    for i in range(256):
        if (s >> i) & 1:
            q = point_add(q, p)
        p = point_add(p, p)
    return q


def point_mul_base(s: int) -> Point:
    """Multiply the generator by the scalar ``s``."""
    return point_mul(s, (GX, GY))


def tagged_hash(tag: bytes, msg: bytes) -> bytes:
    """SHA-256 of ``msg`` prefixed by the doubled hash of ``tag``."""
    tag_hash = hashlib.sha256(bytes(tag)).digest()
    return hashlib.sha256(tag_hash + tag_hash + bytes(msg)).digest()


def hash_aux(aux_rand: bytes) -> bytes:
    """Tagged hash of the auxiliary randomness."""
    return tagged_hash(_TAG_AUX, _bytes32("aux_rand", aux_rand))


def hash_nonce(rand: bytes, pubkey: bytes, msg: bytes) -> bytes:
    """Tagged hash used to derive the signing nonce."""
    data = _bytes32("rand", rand) + _bytes32("pubkey", pubkey) + _bytes32("msg", msg)
    return tagged_hash(_TAG_NONCE, data)


def hash_challenge(rx: bytes, pubkey: bytes, msg: bytes) -> bytes:
    """Tagged hash used to derive the challenge."""
    data = _bytes32("rx", rx) + _bytes32("pubkey", pubkey) + _bytes32("msg", msg)
    return tagged_hash(_TAG_CHALLENGE, data)


def bytes_from_point(p: AffinePoint) -> bytes:
    """The 32-byte big-endian x coordinate of ``p``."""
    return p[0].to_bytes(32, "big")


def _bytes_from_scalar(x: int) -> bytes:
    return x.to_bytes(32, "big")


def scalar_from_bytes(b: bytes) -> int:
    """Read 32 big-endian bytes as a scalar reduced modulo the group order."""
    return int.from_bytes(_bytes32("scalar", b), "big") % N


def scalar_from_bytes_strict(b: bytes) -> Optional[int]:
    """Read a scalar, or ``None`` if it is not below the group order."""
    s = int.from_bytes(_bytes32("scalar", b), "big")
    return None if s > N - 1 else s


def seckey_scalar_from_bytes(b: bytes) -> Optional[int]:
    """Read a secret key scalar, or ``None`` if it is zero or out of range."""
    s = scalar_from_bytes_strict(b)
    return None if s is None or s == 0 else s


def fieldelem_from_bytes(b: bytes) -> Optional[int]:
    """Read a field element, or ``None`` if it is not below the field prime."""
    s = int.from_bytes(_bytes32("field element", b), "big")
    return None if s > P - 1 else s


def _xor_bytes(b0: bytes, b1: bytes) -> bytes:
    return bytes(a ^ b for a, b in zip(b0, b1))


def _public_point(seckey: bytes) -> Tuple[int, AffinePoint]:
    d0 = seckey_scalar_from_bytes(seckey)
    if d0 is None:
        raise InvalidSecretKeyError("secret key is out of range")
    p = point_mul_base(d0)
    assert p is not None
    return d0, p


def pubkey_gen(seckey: bytes) -> bytes:
    """Derive the 32-byte x-only public key."""
    _, p = _public_point(seckey)
    return bytes_from_point(p)


def sign(msg: bytes, seckey: bytes, aux_rand: bytes) -> bytes:
    """Produce a 64-byte signature of the 32-byte ``msg``."""
    msg = _bytes32("msg", msg)
    d0, p = _public_point(seckey)
    d = d0 if has_even_y(p) else (N - d0) % N
    t = _xor_bytes(_bytes_from_scalar(d), hash_aux(aux_rand))
    k0 = scalar_from_bytes(hash_nonce(t, bytes_from_point(p), msg))
    if k0 == 0:
        raise InvalidNonceError("derived nonce is zero")
    r = point_mul_base(k0)
    assert r is not None
    k = k0 if has_even_y(r) else (N - k0) % N
    e = scalar_from_bytes(hash_challenge(bytes_from_point(r), bytes_from_point(p), msg))
    sig = bytes_from_point(r) + _bytes_from_scalar((k + e * d) % N)
    verify(msg, bytes_from_point(p), sig)
    return sig


def verify(msg: bytes, pubkey: bytes, sig: bytes) -> None:
    """Check a signature; raise a :class:`Bip340Error` if it is not valid."""
    msg = _bytes32("msg", msg)
    sig = bytes(sig)
    if len(sig) != 64:
        raise ValueError(f"sig must be 64 bytes, got {len(sig)}")
    p_x = fieldelem_from_bytes(pubkey)
    if p_x is None:
        raise InvalidPublicKeyError("public key is not a field element")
    p = lift_x(p_x)
    r = fieldelem_from_bytes(sig[:32])
    if r is None:
        raise InvalidSignatureError("r is not a field element")
    s = scalar_from_bytes_strict(sig[32:])
    if s is None:
        raise InvalidSignatureError("s is not below the group order")
    e = scalar_from_bytes(hash_challenge(sig[:32], bytes_from_point(p), msg))
    r_p = point_add(point_mul_base(s), point_mul((N - e) % N, p))
    if r_p is None:
        raise InvalidSignatureError("signature point is at infinity")
    if not has_even_y(r_p) or r_p[0] != r:
        raise InvalidSignatureError("signature does not verify")