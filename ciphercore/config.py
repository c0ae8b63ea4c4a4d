"""
Settings
========
Tunable constants for the cipher core and the activity log.

Values are plain defaults; two of them can be overridden from the
environment for deployments that want a faster KDF (tests) or a larger log:

    CIPHERCORE_KDF_ITERATIONS   PBKDF2 rounds for the symmetric cipher
    CIPHERCORE_HISTORY_MAX      entries kept by HistoryStore
"""

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class Settings:
    kdf_iterations: int      = 200_000
    toy_p: int               = 61
    toy_q: int               = 53
    toy_e: int               = 17
    history_max_entries: int = 100
    default_caesar_shift: int = 3

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        environ = os.environ if environ is None else environ
        overrides = {}
        if environ.get("CIPHERCORE_KDF_ITERATIONS"):
            overrides["kdf_iterations"] = int(environ["CIPHERCORE_KDF_ITERATIONS"])
        if environ.get("CIPHERCORE_HISTORY_MAX"):
            overrides["history_max_entries"] = int(environ["CIPHERCORE_HISTORY_MAX"])
        return cls(**overrides)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, read from the environment once."""
    return Settings.from_env()
