"""
Reverse Cipher
==============
Writes the text backwards. Encryption and decryption are the same
operation.

Reversal is by code point, not by grapheme: a base letter followed by a
combining accent, or a multi-code-point emoji, comes out with its parts
swapped. That is a known limitation of this cipher and is left as is.
"""


class ReverseCipher:

    @staticmethod
    def encrypt(plaintext: str) -> str:
        return plaintext[::-1]

    decrypt = encrypt
