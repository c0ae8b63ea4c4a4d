"""
Passphrase Cipher: PBKDF2 + AES-256-GCM
========================================
Symmetric encryption keyed by a human passphrase.

A fresh random salt feeds PBKDF2-HMAC-SHA256, which stretches the
passphrase into a 256-bit AES key. The message is sealed with AES-GCM,
so a wrong passphrase or any tampering fails the 128-bit tag check
instead of producing garbage.

The output is self-describing. Everything needed to decrypt except the
passphrase travels inside it:

    base64( b"Salted__"(8) || rounds(4) || salt(16) || nonce(12) || ciphertext || tag(16) )

`rounds` is the PBKDF2 iteration count, big-endian. It is read back on
decryption, so a bundle stays readable after the configured count changes.

The "Salted__" prefix follows the OpenSSL convention for passphrase
bundles and lets malformed input be told apart from a wrong key.

Dependencies: cryptography >= 41.0
"""

import os
import struct

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from ..config import get_settings
from ..errors import DecryptionError, KeyRequiredError, MalformedInputError
from .b64 import b64decode_strict, b64encode_bytes

MAGIC          = b"Salted__"
KEY_SIZE       = 32   # 256-bit key
SALT_SIZE      = 16
NONCE_SIZE     = 12   # 96-bit GCM nonce
TAG_SIZE       = 16
ROUNDS         = struct.Struct(">I")
MAX_ITERATIONS = 10_000_000
HEADER_SIZE    = len(MAGIC) + ROUNDS.size + SALT_SIZE + NONCE_SIZE


class PassphraseCipher:
    """AES-256-GCM under a PBKDF2-derived key."""

    MALFORMED_ERROR = "AES decryption failed"
    WRONG_KEY_ERROR = "Invalid key or corrupted data"

    def __init__(self, passphrase: str, settings=None):
        if not passphrase:
            raise KeyRequiredError()
        self._passphrase = passphrase.encode("utf-8")
        self._settings   = settings or get_settings()

    def _derive_key(self, salt: bytes, iterations: int) -> bytes:
        kdf = PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=KEY_SIZE,
            salt=salt,
            iterations=iterations,
        )
        return kdf.derive(self._passphrase)

    def encrypt(self, plaintext: str) -> str:
        """
        Encrypt and authenticate.
        Returns: base64(MAGIC || rounds || salt || nonce || ciphertext+tag)
        """
        rounds = self._settings.kdf_iterations
        salt   = os.urandom(SALT_SIZE)
        nonce  = os.urandom(NONCE_SIZE)
        ct     = AESGCM(self._derive_key(salt, rounds)).encrypt(nonce, plaintext.encode("utf-8"), None)
        return b64encode_bytes(MAGIC + ROUNDS.pack(rounds) + salt + nonce + ct)

    def decrypt(self, bundle: str) -> str:
        """
        Decrypt and verify the authentication tag.
        The KDF parameters come from the bundle, not from the local settings.
        Raises MalformedInputError for non-bundles, DecryptionError on a bad tag.
        """
        raw = b64decode_strict(bundle, self.MALFORMED_ERROR)
        if not raw.startswith(MAGIC) or len(raw) < HEADER_SIZE + TAG_SIZE:
            raise MalformedInputError(self.MALFORMED_ERROR)

        offset = len(MAGIC)
        (rounds,) = ROUNDS.unpack_from(raw, offset)
        if not 1 <= rounds <= MAX_ITERATIONS:
            raise MalformedInputError(self.MALFORMED_ERROR)
        offset += ROUNDS.size
        salt  = raw[offset:offset + SALT_SIZE]
        nonce = raw[offset + SALT_SIZE:HEADER_SIZE]
        ct    = raw[HEADER_SIZE:]
        try:
            plaintext = AESGCM(self._derive_key(salt, rounds)).decrypt(nonce, ct, None)
            return plaintext.decode("utf-8")
        except (InvalidTag, UnicodeDecodeError):
            raise DecryptionError(self.WRONG_KEY_ERROR) from None
