"""
Toy RSA: Textbook Modular Exponentiation
=========================================
Educational only. Every number here is public and tiny.

The key pair is rebuilt from fixed primes on every call:

    p = 61, q = 53
    n   = p * q           = 3233
    phi = (p-1) * (q-1)   = 3120
    e   = 17
    d   = e^-1 mod phi    = 2753   (found by linear search)

Each character code c is encrypted on its own as c^e mod n and written
as a zero-padded 4-digit token; tokens are joined with "-". Codes above
n cannot be represented under this modulus, so they are written out
verbatim instead. Decryption tells the two apart by the same test,
since every real ciphertext value is below n. A code of exactly n
encrypts to 0 and comes back as NUL; that one lossy case is accepted.

WARNING: no padding, deterministic, per-character. Trivially broken by
frequency analysis or by factoring 3233 by hand.
"""

from collections import namedtuple

from ..config import get_settings

ToyKeyPair = namedtuple("ToyKeyPair", ["n", "e", "d"])

SEPARATOR = "-"


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Square-and-multiply modular exponentiation."""
    if modulus == 1:
        return 0
    result = 1
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        exponent >>= 1
        base = (base * base) % modulus
    return result


def generate_toy_keys(settings=None) -> ToyKeyPair:
    """Derive (n, e, d) from the configured primes. Recomputed on every call."""
    settings = settings or get_settings()
    p, q, e = settings.toy_p, settings.toy_q, settings.toy_e
    n   = p * q
    phi = (p - 1) * (q - 1)
    d = 1
    while (d * e) % phi != 1:
        d += 1
    return ToyKeyPair(n=n, e=e, d=d)


class ToyRSACipher:
    """Per-character textbook RSA with a fixed 12-bit modulus."""

    def encrypt(self, plaintext: str) -> str:
        n, e, _ = generate_toy_keys()
        tokens = []
        for ch in plaintext:
            code = ord(ch)
            value = code if code > n else mod_pow(code, e, n)
            tokens.append(str(value).zfill(4))
        return SEPARATOR.join(tokens)

    def decrypt(self, ciphertext: str) -> str:
        n, _, d = generate_toy_keys()
        if not ciphertext:
            return ""
        chars = []
        for token in ciphertext.split(SEPARATOR):
            num = int(token)
            chars.append(chr(num if num > n else mod_pow(num, d, n)))
        return "".join(chars)
