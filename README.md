# specrypt

Specification-style code for a few cryptographic primitives, written for
clarity rather than speed. It is meant for reading, cross-checking and
producing test vectors. Nothing here is constant time; do not use it to
protect real secrets.

The package is pure Python and has no runtime dependencies.

## Modules

### `specrypt.aes`

AES-128 on byte strings.

- `aes128_encrypt_block(key, block)`: encrypt one 16-byte block with a
  16-byte key.
- `aes128_encrypt(key, nonce, counter, msg)` and
  `aes128_decrypt(key, nonce, counter, ciphertext)`: counter mode with a
  12-byte nonce and a 32-bit big-endian block counter that wraps at 2**32.
  The message may have any length; a short last block is handled.
- `expand_key(key, nk, nr, iterations)`, `encrypt_block(key, block, nk, nr, iterations)`,
  `ctr_key_block(key, nonce, counter)` and `xor_block(block, key_block)`:
  the building blocks. Asking the key schedule for a word past its end
  raises `KeyExpansionError`.

Inputs of the wrong length raise `ValueError`.

### `specrypt.aes_words`

AES-128 over 128-bit integers, in the shape of the AES-NI instructions.
Byte `i` of a block is bits `8*i .. 8*i+7` of the integer, so
`int.from_bytes(block, "little")` converts an ordinary block.

Functions: `subbytes`, `shiftrows`, `mixcolumns`, `aeskeygenassist`,
`key_combine`, `keys_expand` (returns the eleven round keys), `aesenc`,
`aesenclast` and `aes(key, block)`. Values outside `[0, 2**128)` raise
`ValueError`.

### `specrypt.bip340`

BIP-340 Schnorr signatures over secp256k1. Points are `(x, y)` tuples of
integers; `None` is the point at infinity.

- `pubkey_gen(seckey)`: the 32-byte x-only public key.
- `sign(msg, seckey, aux_rand)`: a 64-byte signature of a 32-byte message.
  The signature is verified before it is returned.
- `verify(msg, pubkey, sig)`: returns `None` when the signature is valid and
  raises otherwise.
- Tagged hashes: `tagged_hash`, `hash_aux`, `hash_nonce`, `hash_challenge`.
- Curve and encoding helpers: `point_add`, `point_mul`, `point_mul_base`,
  `lift_x`, `has_even_y`, `bytes_from_point`, `scalar_from_bytes`,
  `scalar_from_bytes_strict`, `seckey_scalar_from_bytes`,
  `fieldelem_from_bytes`.

Failures raise subclasses of `Bip340Error` (itself a `ValueError`):
`InvalidSecretKeyError`, `InvalidNonceError`, `InvalidPublicKeyError`,
`InvalidXCoordinateError` and `InvalidSignatureError`. Byte strings of the
wrong length raise a plain `ValueError`.

### `specrypt.bls_field`

Field arithmetic and hashing to fields for BLS12-381. Elements of Fp are
integers modulo `P`; elements of Fp2 are `(re, im)` tuples with `i**2 = -1`.

- `expand_message_xmd(msg, dst, len_in_bytes)` with SHA-256.
- `fp_hash_to_field(msg, dst, count)` and `fp2_hash_to_field(msg, dst, count)`.
- `fp_inv`, `fp_sgn0`, `fp_is_square`, `fp_sqrt`.
- `fp2_add`, `fp2_sub`, `fp2_mul`, `fp2_neg`, `fp2_inv`, `fp2_sgn0`,
  `fp2_is_square`, `fp2_sqrt`, and the constants `FP2_ZERO` and `FP2_ONE`.

Inverses map zero to zero. The square roots are meaningful only for squares.

### `specrypt.svdw` and `specrypt.sswu`

Maps from field elements to points of the BLS12-381 curves. A point is
returned as `(x, y, infinity)`.

- `svdw`: `g1_curve_func`, `g1_map_to_curve_svdw`, `g2_curve_func`,
  `g2_map_to_curve_svdw` (Shallue–van de Woestijne).
- `sswu`: `g1_simple_swu_iso`, `g1_isogeny_map`, `g1_map_to_curve_sswu`,
  `g2_simple_swu_iso`, `g2_isogeny_map`, `g2_map_to_curve_sswu`
  (simplified SWU to an isogenous curve, then the 11-isogeny for G1 or the
  3-isogeny for G2).

## What is not included

The package stops at the map-to-curve step. It has no elliptic-curve group
arithmetic on BLS12-381, so it does not add the two mapped points, clear
the cofactor, or offer complete `hash_to_curve` / `encode_to_curve`
functions. There is no authenticated AES mode and no command-line tool.

## Installing

```
pip install .
```

## Examples

AES-128 in counter mode:

```python
from specrypt.aes import aes128_decrypt, aes128_encrypt

key = bytes(range(16))
nonce = bytes(12)
ciphertext = aes128_encrypt(key, nonce, 1, b"attack at dawn")
assert aes128_decrypt(key, nonce, 1, ciphertext) == b"attack at dawn"
```

A BIP-340 signature:

```python
from specrypt.bip340 import pubkey_gen, sign, verify

seckey = (3).to_bytes(32, "big")
msg = bytes(32)
aux_rand = bytes(32)

pubkey = pubkey_gen(seckey)
sig = sign(msg, seckey, aux_rand)
verify(msg, pubkey, sig)  # raises InvalidSignatureError if the signature is bad
```

Hashing to Fp and mapping to G1:

```python
from specrypt.bls_field import fp_hash_to_field
from specrypt.sswu import g1_map_to_curve_sswu

dst = b"QUUX-V01-CS02-with-BLS12381G1_XMD:SHA-256_SSWU_RO_"
u0, u1 = fp_hash_to_field(b"abc", dst, 2)
x, y, infinity = g1_map_to_curve_sswu(u0)
```

## Running the tests

```
pip install .[test]
pytest
```