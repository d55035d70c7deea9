"""AES-128, BIP-340 Schnorr signatures and BLS12-381 hash-to-field and map-to-curve code."""

__version__ = "0.1.0"
__all__ = ["aes", "aes_words", "bip340", "bls_field", "svdw", "sswu"]