"""
Result Contract
===============
The only types that cross the ciphercore boundary.

Every public operation returns an EncryptionResult instead of raising:

    success=True   output is the transform result, error is None
    success=False  output is "", error is a human-readable reason
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Optional


class Algorithm(str, Enum):
    """The closed set of supported schemes."""

    CAESAR         = "caesar"
    VIGENERE       = "vigenere"
    REVERSE        = "reverse"
    XOR            = "xor"
    BASE64         = "base64"
    SYMMETRIC      = "symmetric"
    TOY_ASYMMETRIC = "toy-asymmetric"

    @classmethod
    def parse(cls, name) -> "Algorithm":
        """Accept a member, its value in any case, or the legacy aes/rsa names."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown algorithm: {name}") from None


_ALIASES = {
    "aes": "symmetric",
    "rsa": "toy-asymmetric",
    "vigenère": "vigenere",
}


class Mode(str, Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


@dataclass(frozen=True)
class EncryptionResult:
    output: str
    success: bool
    error: Optional[str] = None

    def __post_init__(self):
        if self.success and self.error is not None:
            raise ValueError("A successful result cannot carry an error.")
        if not self.success and (self.output or not self.error):
            raise ValueError("A failed result needs an error and no output.")

    @classmethod
    def ok(cls, output: str) -> "EncryptionResult":
        return cls(output=output, success=True)

    @classmethod
    def fail(cls, error: str) -> "EncryptionResult":
        return cls(output="", success=False, error=error)

    def to_dict(self) -> dict:
        data = asdict(self)
        if data["error"] is None:
            del data["error"]
        return data
