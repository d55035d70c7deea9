"""AES-128 block encryption and counter-mode (CTR) encryption."""

from __future__ import annotations

from collections.abc import Iterator

BLOCK_SIZE = 16
NONCE_SIZE = 12

KEY_LENGTH = 4
ROUNDS = 10
KEY_SCHEDULE_LENGTH = 176
ITERATIONS = 40

_SBOX = bytes.fromhex(
    "637c777bf26b6fc53001672bfed7ab76"
    "ca82c97dfa5947f0add4a2af9ca472c0"
    "b7fd9326363ff7cc34a5e5f171d83115"
    "04c723c31896059a071280e2eb27b275"
    "09832c1a1b6e5aa0523bd6b329e32f84"
    "53d100ed20fcb15b6acbbe394a4c58cf"
    "d0efaafb434d338545f9027f503c9fa8"
    "51a3408f929d38f5bcb6da2110fff3d2"
    "cd0c13ec5f974417c4a77e3d645d1973"
    "60814fdc222a908846eeb814de5e0bdb"
    "e0323a0a4906245cc2d3ac629195e479"
    "e7c8376d8dd54ea96c56f4ea657aae08"
    "ba78252e1ca6b4c6e8dd741f4bbd8b8a"
    "703eb5664803f60e613557b986c11d9e"
    "e1f8981169d98e949b1e87e9ce5528df"
    "8ca1890dbfe6426841992d0fb054bb16"
)

_RCON = bytes.fromhex("8d01020408102040801b366cd8ab4d")


class KeyExpansionError(ValueError):
    """Raised when the key schedule is asked for a word beyond its end."""


def _require_length(name: str, data: bytes, length: int) -> bytes:
    data = bytes(data)
    if len(data) != length:
        raise ValueError(f"{name} must be {length} bytes, got {len(data)}")
    return data


def _sub_bytes(state: bytes) -> bytes:
    return bytes(_SBOX[b] for b in state)


def _shift_rows(state: bytes) -> bytes:
    out = bytearray(state)
    for row in range(1, 4):
        for col in range(4):
            out[row + 4 * col] = state[row + 4 * ((row + col) % 4)]
    return bytes(out)


def _xtime(x: int) -> int:
    return ((x << 1) & 0xFF) ^ (0x1B if x & 0x80 else 0)


def _mix_columns(state: bytes) -> bytes:
    out = bytearray()
    for c in range(4):
        s0, s1, s2, s3 = state[4 * c : 4 * c + 4]
        tmp = s0 ^ s1 ^ s2 ^ s3
        out += bytes(
            (
                s0 ^ tmp ^ _xtime(s0 ^ s1),
                s1 ^ tmp ^ _xtime(s1 ^ s2),
                s2 ^ tmp ^ _xtime(s2 ^ s3),
                s3 ^ tmp ^ _xtime(s3 ^ s0),
            )
        )
    return bytes(out)


def _add_round_key(state: bytes, round_key: bytes) -> bytes:
    return bytes(a ^ b for a, b in zip(state, round_key))


def _round(state: bytes, round_key: bytes) -> bytes:
    return _add_round_key(_mix_columns(_shift_rows(_sub_bytes(state))), round_key)


def _last_round(state: bytes, round_key: bytes) -> bytes:
    return _add_round_key(_shift_rows(_sub_bytes(state)), round_key)


def _slice_word(word: bytes) -> bytes:
    return bytes(_SBOX[b] for b in word)


def _keygen_assist(word: bytes, rcon: int) -> bytes:
    k = bytearray(_slice_word(word[1:] + word[:1]))
    k[0] ^= rcon
    return bytes(k)


def _expansion_word(w0: bytes, w1: bytes, i: int, nk: int, nr: int) -> bytes:
    if i >= 4 * (nr + 1):
        raise KeyExpansionError(f"key expansion index {i} out of range")
    k = w1
    if i % nk == 0:
        k = _keygen_assist(k, _RCON[i // nk])
    elif nk > 6 and i % nk == 4:
        k = _slice_word(k)
    return bytes(a ^ b for a, b in zip(k, w0))


def expand_key(key: bytes, nk: int, nr: int, iterations: int) -> bytes:
    """Expand ``key`` into the round-key schedule of ``16 * (nr + 1)`` bytes."""
    key = bytes(key)
    schedule_length = BLOCK_SIZE * (nr + 1)
    if len(key) > schedule_length:
        raise ValueError("key is longer than the key schedule")
    schedule = bytearray(schedule_length)
    schedule[: len(key)] = key
    for j in range(iterations):
        i = j + nk
        word = _expansion_word(
            bytes(schedule[4 * (i - nk) : 4 * (i - nk) + 4]),
            bytes(schedule[4 * i - 4 : 4 * i]),
            i,
            nk,
            nr,
        )
        schedule[4 * i : 4 * i + 4] = word
    return bytes(schedule)


def _round_keys(schedule: bytes, nr: int) -> Iterator[bytes]:
    for offset in range(BLOCK_SIZE, nr * BLOCK_SIZE, BLOCK_SIZE):
        yield schedule[offset : offset + BLOCK_SIZE]


def encrypt_block(key: bytes, block: bytes, nk: int, nr: int, iterations: int) -> bytes:
    """Encrypt one 16-byte block with a key schedule built from ``key``."""
    block = _require_length("block", block, BLOCK_SIZE)
    schedule = expand_key(key, nk, nr, iterations)
    state = _add_round_key(block, schedule[:BLOCK_SIZE])
    for round_key in _round_keys(schedule, nr):
        state = _round(state, round_key)
    return _last_round(state, schedule[nr * BLOCK_SIZE : (nr + 1) * BLOCK_SIZE])


def aes128_encrypt_block(key: bytes, block: bytes) -> bytes:
    """Encrypt one 16-byte block with a 16-byte AES-128 key."""
    key = _require_length("key", key, BLOCK_SIZE)
    return encrypt_block(key, block, KEY_LENGTH, ROUNDS, ITERATIONS)


def ctr_key_block(key: bytes, nonce: bytes, counter: int) -> bytes:
    """Return the AES-128 keystream block for ``nonce`` and a 32-bit ``counter``."""
    key = _require_length("key", key, BLOCK_SIZE)
    nonce = _require_length("nonce", nonce, NONCE_SIZE)
    counter_bytes = (counter & 0xFFFFFFFF).to_bytes(4, "big")
    return encrypt_block(key, nonce + counter_bytes, KEY_LENGTH, ROUNDS, ITERATIONS)


def xor_block(block: bytes, key_block: bytes) -> bytes:
    """XOR two 16-byte blocks."""
    block = _require_length("block", block, BLOCK_SIZE)
    key_block = _require_length("key block", key_block, BLOCK_SIZE)
    return bytes(a ^ b for a, b in zip(block, key_block))


def _counter_mode(key: bytes, nonce: bytes, counter: int, msg: bytes) -> bytes:
    msg = bytes(msg)
    out = bytearray()
    ctr = counter & 0xFFFFFFFF
    for offset in range(0, len(msg), BLOCK_SIZE):
        chunk = msg[offset : offset + BLOCK_SIZE]
        keystream = ctr_key_block(key, nonce, ctr)
        out += bytes(a ^ b for a, b in zip(chunk, keystream))
        ctr = (ctr + 1) & 0xFFFFFFFF
    return bytes(out)


def aes128_encrypt(key: bytes, nonce: bytes, counter: int, msg: bytes) -> bytes:
    """Encrypt ``msg`` with AES-128 in counter mode."""
    return _counter_mode(key, nonce, counter, msg)


def aes128_decrypt(key: bytes, nonce: bytes, counter: int, ciphertext: bytes) -> bytes:
    """Decrypt ``ciphertext`` produced by :func:`aes128_encrypt`."""
    return _counter_mode(key, nonce, counter, ciphertext)