"""AES-128 on 128-bit integers, modelled on the AES-NI instruction set.

A block or round key is an ``int`` in ``[0, 2**128)``. Byte ``i`` of the
block sits in bits ``8*i .. 8*i+7``, so the little-endian reading of the
usual AES byte string gives the integer used here.
"""

from __future__ import annotations

from .aes import _RCON, _SBOX

_MASK32 = 0xFFFFFFFF
_LIMIT128 = 1 << 128


def _check_u128(name: str, value: int) -> int:
    if not 0 <= value < _LIMIT128:
        raise ValueError(f"{name} must be a 128-bit unsigned integer")
    return value


def _index_u32(s: int, i: int) -> int:
    return (s >> (32 * i)) & _MASK32


def _index_u8(s: int, i: int) -> int:
    return (s >> (8 * i)) & 0xFF


def _rebuild_u32(b0: int, b1: int, b2: int, b3: int) -> int:
    return b0 | (b1 << 8) | (b2 << 16) | (b3 << 24)


def _rebuild_u128(w0: int, w1: int, w2: int, w3: int) -> int:
    return w0 | (w1 << 32) | (w2 << 64) | (w3 << 96)


def _subword(v: int) -> int:
    return _rebuild_u32(*(_SBOX[_index_u8(v, i)] for i in range(4)))


def _rotword(v: int) -> int:
    return ((v >> 8) | (v << 24)) & _MASK32


def _vpshufd1(s: int, o: int, i: int) -> int:
    return _index_u32(s >> (32 * ((o >> (2 * i)) % 4)), 0)


def _vpshufd(s: int, o: int) -> int:
    return _rebuild_u128(*(_vpshufd1(s, o, i) for i in range(4)))


def _vshufps(s1: int, s2: int, o: int) -> int:
    return _rebuild_u128(
        _vpshufd1(s1, o, 0),
        _vpshufd1(s1, o, 1),
        _vpshufd1(s2, o, 2),
        _vpshufd1(s2, o, 3),
    )


def _matrix_index(s: int, i: int, j: int) -> int:
    return _index_u8(_index_u32(s, j), i)


def _xtime(x: int) -> int:
    return ((x << 1) & 0xFF) ^ (0x1B if x & 0x80 else 0)


def _mixcolumn(c: int, state: int) -> int:
    s0, s1, s2, s3 = (_matrix_index(state, r, c) for r in range(4))
    tmp = s0 ^ s1 ^ s2 ^ s3
    return _rebuild_u32(
        s0 ^ tmp ^ _xtime(s0 ^ s1),
        s1 ^ tmp ^ _xtime(s1 ^ s2),
        s2 ^ tmp ^ _xtime(s2 ^ s3),
        s3 ^ tmp ^ _xtime(s3 ^ s0),
    )


def subbytes(state: int) -> int:
    """Apply the AES S-box to every byte of ``state``."""
    _check_u128("state", state)
    return _rebuild_u128(*(_subword(_index_u32(state, i)) for i in range(4)))


def shiftrows(state: int) -> int:
    """Rotate row ``r`` of the AES state left by ``r`` columns."""
    _check_u128("state", state)
    return _rebuild_u128(
        *(
            _rebuild_u32(*(_matrix_index(state, r, (col + r) % 4) for r in range(4)))
            for col in range(4)
        )
    )


def mixcolumns(state: int) -> int:
    """Apply the AES MixColumns transformation."""
    _check_u128("state", state)
    return _rebuild_u128(*(_mixcolumn(c, state) for c in range(4)))


def aeskeygenassist(v1: int, rcon: int) -> int:
    """Compute the AESKEYGENASSIST result for ``v1`` and round constant ``rcon``."""
    _check_u128("v1", v1)
    if not 0 <= rcon <= 0xFF:
        raise ValueError("rcon must be a byte")
    y0 = _subword(_index_u32(v1, 1))
    y1 = _rotword(y0) ^ rcon
    y2 = _subword(_index_u32(v1, 3))
    y3 = _rotword(y2) ^ rcon
    return _rebuild_u128(y0, y1, y2, y3)


def key_combine(rkey: int, temp1: int, temp2: int) -> tuple[int, int]:
    """Combine the previous round key with a keygen-assist result.

    Returns the next round key and the updated scratch value.
    """
    _check_u128("rkey", rkey)
    _check_u128("temp1", temp1)
    _check_u128("temp2", temp2)
    temp1 = _vpshufd(temp1, 0xFF)
    temp2 = _vshufps(temp2, rkey, 16)
    rkey ^= temp2
    temp2 = _vshufps(temp2, rkey, 140)
    rkey ^= temp2
    rkey ^= temp1
    return rkey, temp2


def keys_expand(key: int) -> list[int]:
    """Return the eleven AES-128 round keys derived from ``key``."""
    _check_u128("key", key)
    round_keys = [key]
    temp2 = 0
    for rnd in range(1, 11):
        temp1 = aeskeygenassist(key, _RCON[rnd])
        key, temp2 = key_combine(key, temp1, temp2)
        round_keys.append(key)
    return round_keys


def aesenc(state: int, rkey: int) -> int:
    """One full AES round (AESENC)."""
    _check_u128("rkey", rkey)
    return mixcolumns(subbytes(shiftrows(state))) ^ rkey


def aesenclast(state: int, rkey: int) -> int:
    """The final AES round without MixColumns (AESENCLAST)."""
    _check_u128("rkey", rkey)
    return subbytes(shiftrows(state)) ^ rkey


def aes(key: int, block: int) -> int:
    """Encrypt one block with AES-128."""
    _check_u128("block", block)
    round_keys = keys_expand(key)
    state = block ^ round_keys[0]
    for round_key in round_keys[1:10]:
        state = aesenc(state, round_key)
    return aesenclast(state, round_keys[10])