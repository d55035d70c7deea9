import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from specrypt.bip340 import (
    InvalidPublicKeyError,
    InvalidSecretKeyError,
    InvalidSignatureError,
    InvalidXCoordinateError,
    bytes_from_point,
    fieldelem_from_bytes,
    has_even_y,
    hash_aux,
    hash_challenge,
    hash_nonce,
    lift_x,
    point_add,
    point_mul,
    point_mul_base,
    pubkey_gen,
    scalar_from_bytes,
    scalar_from_bytes_strict,
    seckey_scalar_from_bytes,
    sign,
    tagged_hash,
    verify,
)

P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
GX = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
GY = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8
G = (GX, GY)


def on_curve(p):
    x, y = p
    return (y * y - x * x * x - 7) % P == 0


def b32(n):
    return n.to_bytes(32, "big")


SECKEY = b32(3)
MSG = bytes(range(32))
AUX = bytes(32)


def test_base_point_times_one_is_generator():
    assert point_mul_base(1) == G
    assert on_curve(G)


def test_point_add_identity_and_inverse():
    assert point_add(None, G) == G
    assert point_add(G, None) == G
    assert point_add(G, (GX, P - GY)) is None


def test_point_mul_matches_repeated_addition():
    two_g = point_add(G, G)
    assert point_mul(2, G) == two_g
    assert point_mul(3, G) == point_add(two_g, G)
    assert on_curve(two_g)


def test_group_order():
    assert point_mul_base(N - 1) == (GX, P - GY)
    assert point_mul_base(N) is None


def test_lift_x_of_generator():
    assert lift_x(GX) == G
    assert has_even_y(lift_x(GX))


def test_lift_x_some_valid_some_invalid():
    valid = invalid = 0
    for x in range(1, 21):
        try:
            p = lift_x(x)
        except InvalidXCoordinateError:
            invalid += 1
        else:
            assert on_curve(p) and has_even_y(p) and p[0] == x
            valid += 1
    assert valid > 0 and invalid > 0


def test_pubkey_of_one_is_generator_x():
    assert pubkey_gen(b32(1)) == b32(GX)
    assert bytes_from_point(G) == b32(GX)


def test_pubkey_gen_rejects_bad_keys():
    with pytest.raises(InvalidSecretKeyError):
        pubkey_gen(bytes(32))
    with pytest.raises(InvalidSecretKeyError):
        pubkey_gen(b32(N))


def test_scalar_parsing():
    assert scalar_from_bytes(b32(N)) == 0
    assert scalar_from_bytes_strict(b32(N)) is None
    assert scalar_from_bytes_strict(b32(N - 1)) == N - 1
    assert seckey_scalar_from_bytes(bytes(32)) is None
    assert seckey_scalar_from_bytes(b32(7)) == 7


def test_fieldelem_parsing():
    assert fieldelem_from_bytes(b32(P)) is None
    assert fieldelem_from_bytes(b32(P - 1)) == P - 1


def test_tagged_hash_domain_separation():
    data = bytes(32)
    assert hash_aux(data) == tagged_hash(b"BIP0340/aux", data)
    assert len(hash_aux(data)) == 32
    assert hash_nonce(data, data, data) == tagged_hash(b"BIP0340/nonce", data * 3)
    assert hash_challenge(data, data, data) == tagged_hash(b"BIP0340/challenge", data * 3)
    assert hash_nonce(data, data, data) != hash_challenge(data, data, data)


def test_sign_verify_roundtrip():
    sig = sign(MSG, SECKEY, AUX)
    assert len(sig) == 64
    assert verify(MSG, pubkey_gen(SECKEY), sig) is None
    assert sign(MSG, SECKEY, AUX) == sig


def test_verify_rejects_tampered_message():
    sig = sign(MSG, SECKEY, AUX)
    other = bytes([MSG[0] ^ 1]) + MSG[1:]
    with pytest.raises(InvalidSignatureError):
        verify(other, pubkey_gen(SECKEY), sig)


def test_verify_rejects_out_of_range_s():
    sig = sign(MSG, SECKEY, AUX)
    with pytest.raises(InvalidSignatureError):
        verify(MSG, pubkey_gen(SECKEY), sig[:32] + b32(N))


def test_verify_rejects_bad_public_key():
    sig = sign(MSG, SECKEY, AUX)
    with pytest.raises(InvalidPublicKeyError):
        verify(MSG, b32(P), sig)


def test_wrong_lengths_rejected():
    with pytest.raises(ValueError):
        sign(b"short", SECKEY, AUX)
    with pytest.raises(ValueError):
        verify(MSG, pubkey_gen(SECKEY), bytes(63))


@settings(max_examples=5, deadline=None)
@given(
    st.integers(min_value=1, max_value=N - 1),
    st.binary(min_size=32, max_size=32),
    st.binary(min_size=32, max_size=32),
)
def test_sign_verify_property(d, msg, aux):
    sig = sign(msg, b32(d), aux)
    pub = pubkey_gen(b32(d))
    assert verify(msg, pub, sig) is None
    assert on_curve(lift_x(int.from_bytes(sig[:32], "big")))