"""
Vigenère Polyalphabetic Cipher
==============================
Each letter of the text is shifted by the alphabet position of the next
key letter ('a' -> 0 ... 'z' -> 25). The key repeats for texts longer
than itself.

Only letters consume key positions: spaces and punctuation pass through
without advancing the key, so "HELLO WORLD" and "HELLOWORLD" use the
same keystream for their letters. Case is preserved.

Historical note: Giovan Battista Bellaso, 1553, later misattributed to
Blaise de Vigenère. "Le chiffre indéchiffrable" until Kasiski (1863).
"""

import re

from ..errors import InvalidKeyError, KeyRequiredError
from .caesar import LOWER_A, rotate_letter

_NON_LETTERS = re.compile(r"[^a-z]")


def is_ascii_letter(ch: str) -> bool:
    return "A" <= ch <= "Z" or "a" <= ch <= "z"


class VigenereCipher:
    """Classic repeating-key Vigenère cipher."""

    def __init__(self, key: str):
        if not key:
            raise KeyRequiredError()
        clean = _NON_LETTERS.sub("", key.lower())
        if not clean:
            raise InvalidKeyError()
        self._shifts = [ord(c) - LOWER_A for c in clean]

    def _apply(self, text: str, sign: int) -> str:
        result = []
        k_idx = 0
        for ch in text:
            if is_ascii_letter(ch):
                shift = self._shifts[k_idx % len(self._shifts)]
                result.append(rotate_letter(ch, sign * shift))
                k_idx += 1
            else:
                result.append(ch)
        return "".join(result)

    def encrypt(self, plaintext: str) -> str:
        """Encrypt plaintext. Non-letters pass through."""
        return self._apply(plaintext, 1)

    def decrypt(self, ciphertext: str) -> str:
        return self._apply(ciphertext, -1)
