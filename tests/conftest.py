import os

# PBKDF2 at production strength makes every symmetric test take ~0.1s.
os.environ.setdefault("CIPHERCORE_KDF_ITERATIONS", "1000")
