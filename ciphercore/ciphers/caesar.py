"""
Caesar Cipher
=============
Fixed-shift substitution over the 26-letter Latin alphabet.

Each ASCII letter is rotated within its own case; digits, punctuation,
whitespace and non-ASCII characters pass through untouched. Decryption
is encryption with the complementary shift, so any integer shift
round-trips.

Historical note: Suetonius records Julius Caesar using a shift of 3.
That is the default here too.
"""

from ..errors import InvalidKeyError

UPPER_A = ord("A")
LOWER_A = ord("a")


def rotate_letter(ch: str, shift: int) -> str:
    """Rotate a single ASCII letter by `shift`; any other character is returned as-is."""
    if "A" <= ch <= "Z":
        base = UPPER_A
    elif "a" <= ch <= "z":
        base = LOWER_A
    else:
        return ch
    return chr((ord(ch) - base + shift) % 26 + base)


class CaesarCipher:
    """Caesar shift cipher."""

    def __init__(self, shift=3):
        self.shift = self._coerce_shift(shift)

    @staticmethod
    def _coerce_shift(shift) -> int:
        # Form fields hand the shift over as text.
        if isinstance(shift, bool):
            raise InvalidKeyError("Invalid shift")
        if isinstance(shift, int):
            return shift
        try:
            return int(str(shift).strip())
        except ValueError:
            raise InvalidKeyError("Invalid shift") from None

    def encrypt(self, plaintext: str) -> str:
        shift = self.shift % 26
        return "".join(rotate_letter(ch, shift) for ch in plaintext)

    def decrypt(self, ciphertext: str) -> str:
        return CaesarCipher(26 - self.shift).encrypt(ciphertext)
