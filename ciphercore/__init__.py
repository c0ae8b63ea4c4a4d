"""
ciphercore
==========
Seven text transforms behind one call contract.
From Caesar's shift to passphrase-keyed AES-256-GCM.

Algorithms:
    caesar          Fixed-shift substitution
    vigenere        Repeating-key polyalphabetic substitution
    reverse         Text written backwards
    xor             Repeating-key XOR, Base64-wrapped
    base64          RFC 4648 Base64
    symmetric       PBKDF2 + AES-256-GCM under a passphrase
    toy-asymmetric  Textbook RSA with p=61, q=53 (educational only)

Every operation returns an EncryptionResult and never raises.
Logging goes through loguru and is disabled for this package until a
caller runs ``logger.enable("ciphercore")``.
"""

__version__ = "1.0.0"

from loguru import logger

from .result             import Algorithm, EncryptionResult, Mode
from .config             import Settings, get_settings
from .ciphers.toy_rsa    import ToyKeyPair, generate_toy_keys, mod_pow
from .engine             import (
    base64_decrypt,
    base64_encrypt,
    caesar_decrypt,
    caesar_encrypt,
    requires_key,
    reverse_decrypt,
    reverse_encrypt,
    symmetric_decrypt,
    symmetric_encrypt,
    toy_asymmetric_decrypt,
    toy_asymmetric_encrypt,
    transform,
    vigenere_decrypt,
    vigenere_encrypt,
    xor_decrypt,
    xor_encrypt,
)
from .history            import HistoryEntry, HistoryStore

logger.disable("ciphercore")

__all__ = [
    "Algorithm",
    "EncryptionResult",
    "Mode",
    "Settings",
    "get_settings",
    "ToyKeyPair",
    "generate_toy_keys",
    "mod_pow",
    "caesar_encrypt",
    "caesar_decrypt",
    "vigenere_encrypt",
    "vigenere_decrypt",
    "reverse_encrypt",
    "reverse_decrypt",
    "xor_encrypt",
    "xor_decrypt",
    "base64_encrypt",
    "base64_decrypt",
    "symmetric_encrypt",
    "symmetric_decrypt",
    "toy_asymmetric_encrypt",
    "toy_asymmetric_decrypt",
    "transform",
    "requires_key",
    "HistoryEntry",
    "HistoryStore",
]
