"""
XOR Cipher
==========
Repeating-key XOR, Base64-wrapped.

Text and key are XORed byte by byte (UTF-8), the key cycling modulo its
length. The raw XOR output is full of control bytes that do not survive
copy and paste, so it is Base64-encoded before being returned.
XOR is its own inverse: decryption strips the Base64 and XORs again.

Bundle format: base64( text_bytes[i] ^ key_bytes[i % len(key)] )
"""

from ..errors import DecryptionError, KeyRequiredError
from .b64 import b64decode_strict, b64encode_bytes


def xor_bytes(data: bytes, key: bytes) -> bytes:
    return bytes(b ^ key[i % len(key)] for i, b in enumerate(data))


class XORCipher:
    """Repeating-key XOR with Base64 transport encoding."""

    DECRYPT_ERROR = "XOR decryption failed"

    def __init__(self, key: str):
        if not key:
            raise KeyRequiredError()
        self._key = key.encode("utf-8")

    def encrypt(self, plaintext: str) -> str:
        return b64encode_bytes(xor_bytes(plaintext.encode("utf-8"), self._key))

    def decrypt(self, ciphertext: str) -> str:
        raw = b64decode_strict(ciphertext, self.DECRYPT_ERROR)
        try:
            return xor_bytes(raw, self._key).decode("utf-8")
        except UnicodeDecodeError:
            raise DecryptionError(self.DECRYPT_ERROR) from None
