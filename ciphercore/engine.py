"""
Cipher Engine
=============
The public face of ciphercore: one function per algorithm and direction,
each `(text, key?) -> EncryptionResult`.

Cipher classes raise; these functions never do. The `guarded` boundary
turns a CipherError into a failed result carrying its message, and any
other exception into the algorithm's generic failure message. Key
material is never logged.
"""

from functools import wraps
from typing import Optional, Union

from loguru import logger

from .ciphers.b64 import Base64Codec
from .ciphers.caesar import CaesarCipher
from .ciphers.reverse import ReverseCipher
from .ciphers.symmetric import PassphraseCipher
from .ciphers.toy_rsa import ToyRSACipher
from .ciphers.vigenere import VigenereCipher
from .ciphers.xor import XORCipher
from .config import get_settings
from .errors import CipherError
from .result import Algorithm, EncryptionResult, Mode

Key = Optional[Union[str, int]]


def guarded(failure_message: str):
    """Wrap a str-returning transform so it always returns an EncryptionResult."""
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs) -> EncryptionResult:
            try:
                return EncryptionResult.ok(fn(*args, **kwargs))
            except CipherError as exc:
                logger.debug("{} rejected input: {}", fn.__name__, exc)
                return EncryptionResult.fail(str(exc))
            except Exception:
                logger.opt(exception=True).debug("{} failed unexpectedly", fn.__name__)
                return EncryptionResult.fail(failure_message)
        return wrapper
    return decorator


def _shift_or_default(shift: Key):
    if shift is None or shift == "":
        return get_settings().default_caesar_shift
    return shift


# ── Caesar ───────────────────────────────────────────────────────────────────

@guarded("Caesar encryption failed")
def caesar_encrypt(text: str, shift: Key = None) -> str:
    return CaesarCipher(_shift_or_default(shift)).encrypt(text)


@guarded("Caesar decryption failed")
def caesar_decrypt(text: str, shift: Key = None) -> str:
    return CaesarCipher(_shift_or_default(shift)).decrypt(text)


# ── Vigenère ─────────────────────────────────────────────────────────────────

@guarded("Vigenère encryption failed")
def vigenere_encrypt(text: str, key: Optional[str] = None) -> str:
    return VigenereCipher(key).encrypt(text)


@guarded("Vigenère decryption failed")
def vigenere_decrypt(text: str, key: Optional[str] = None) -> str:
    return VigenereCipher(key).decrypt(text)


# ── Reverse ──────────────────────────────────────────────────────────────────

@guarded("Reverse encryption failed")
def reverse_encrypt(text: str) -> str:
    return ReverseCipher.encrypt(text)


@guarded("Reverse decryption failed")
def reverse_decrypt(text: str) -> str:
    return ReverseCipher.decrypt(text)


# ── XOR ──────────────────────────────────────────────────────────────────────

@guarded("XOR encryption failed")
def xor_encrypt(text: str, key: Optional[str] = None) -> str:
    return XORCipher(key).encrypt(text)


@guarded("XOR decryption failed")
def xor_decrypt(text: str, key: Optional[str] = None) -> str:
    return XORCipher(key).decrypt(text)


# ── Base64 ───────────────────────────────────────────────────────────────────

@guarded("Base64 encoding failed")
def base64_encrypt(text: str) -> str:
    return Base64Codec.encrypt(text)


@guarded("Base64 decoding failed")
def base64_decrypt(text: str) -> str:
    return Base64Codec.decrypt(text)


# ── Symmetric (AES) ──────────────────────────────────────────────────────────

@guarded("AES encryption failed")
def symmetric_encrypt(text: str, passphrase: Optional[str] = None) -> str:
    return PassphraseCipher(passphrase).encrypt(text)


@guarded("AES decryption failed")
def symmetric_decrypt(text: str, passphrase: Optional[str] = None) -> str:
    return PassphraseCipher(passphrase).decrypt(text)


# ── Toy asymmetric (RSA) ─────────────────────────────────────────────────────

@guarded("RSA encryption failed")
def toy_asymmetric_encrypt(text: str) -> str:
    return ToyRSACipher().encrypt(text)


@guarded("RSA decryption failed")
def toy_asymmetric_decrypt(text: str) -> str:
    return ToyRSACipher().decrypt(text)


# ── dispatch ─────────────────────────────────────────────────────────────────

KEYED = frozenset({Algorithm.VIGENERE, Algorithm.XOR, Algorithm.SYMMETRIC})


def requires_key(algorithm) -> bool:
    """True when the algorithm cannot run without caller-supplied key material."""
    return Algorithm.parse(algorithm) in KEYED


def transform(algorithm, mode, text: str, key: Key = None) -> EncryptionResult:
    """
    Run one algorithm in one direction.

    `algorithm` and `mode` may be enum members or their string values.
    Unkeyed algorithms ignore `key`; Caesar reads it as the shift.
    """
    try:
        algorithm = Algorithm.parse(algorithm)
    except ValueError as exc:
        return EncryptionResult.fail(str(exc))
    try:
        mode = mode if isinstance(mode, Mode) else Mode(str(mode).strip().lower())
    except ValueError:
        return EncryptionResult.fail(f"Unknown mode: {mode}")

    encrypting = mode is Mode.ENCRYPT
    match algorithm:
        case Algorithm.CAESAR:
            return caesar_encrypt(text, key) if encrypting else caesar_decrypt(text, key)
        case Algorithm.VIGENERE:
            return vigenere_encrypt(text, key) if encrypting else vigenere_decrypt(text, key)
        case Algorithm.REVERSE:
            return reverse_encrypt(text) if encrypting else reverse_decrypt(text)
        case Algorithm.XOR:
            return xor_encrypt(text, key) if encrypting else xor_decrypt(text, key)
        case Algorithm.BASE64:
            return base64_encrypt(text) if encrypting else base64_decrypt(text)
        case Algorithm.SYMMETRIC:
            return symmetric_encrypt(text, key) if encrypting else symmetric_decrypt(text, key)
        case Algorithm.TOY_ASYMMETRIC:
            return toy_asymmetric_encrypt(text) if encrypting else toy_asymmetric_decrypt(text)
    raise AssertionError(f"Unhandled algorithm: {algorithm!r}")
