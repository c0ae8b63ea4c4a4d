"""
Base64 Codec
============
Standard RFC 4648 Base64 with padding. Not encryption at all, but the
same call contract as the ciphers so callers can treat it uniformly.

Text is encoded as UTF-8 before Base64. Decoding is strict: characters
outside the alphabet or wrong padding are rejected instead of being
silently skipped. Decoded bytes that are not UTF-8 are read as latin-1,
so any well-formed payload decodes to some text.
"""

import base64
import binascii

from ..errors import MalformedInputError


def b64encode_bytes(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def b64decode_strict(text: str, message: str) -> bytes:
    """Decode Base64 text, raising MalformedInputError(message) on any defect."""
    compact = "".join(text.split())
    try:
        return base64.b64decode(compact.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError, ValueError):
        raise MalformedInputError(message) from None


def bytes_to_text(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return data.decode("latin-1")


class Base64Codec:

    DECODE_ERROR = "Base64 decoding failed"

    @staticmethod
    def encrypt(plaintext: str) -> str:
        return b64encode_bytes(plaintext.encode("utf-8"))

    @classmethod
    def decrypt(cls, encoded: str) -> str:
        return bytes_to_text(b64decode_strict(encoded, cls.DECODE_ERROR))
