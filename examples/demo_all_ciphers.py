"""
ciphercore: Live Demo: All Seven Ciphers + Activity Log
========================================================
Run:  python examples/demo_all_ciphers.py

Encrypts and decrypts one message with every algorithm, records each
success in a HistoryStore, then shows the failure contract and an export.
"""

import sys, os, time
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from loguru import logger

from ciphercore import Algorithm, HistoryStore, Mode, generate_toy_keys, transform

LINE = "═" * 70
MSG  = "Meet me at the old mill, 6pm."
KEYS = {
    Algorithm.CAESAR:    3,
    Algorithm.VIGENERE:  "LEMON",
    Algorithm.XOR:       "k3y",
    Algorithm.SYMMETRIC: "correct horse battery staple",
}

def header(title):
    print(f"\n{LINE}")
    print(f"  {title}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

def fail(label, value):
    print(f"  ✗  {label}: {value}")

logger.enable("ciphercore")
logger.remove()
logger.add(sys.stderr, level="INFO")

history = HistoryStore(max_entries=20)
history.subscribe(lambda entries: logger.info("history now holds {} entries", len(entries)))

print(f"\n{LINE}")
print("  ciphercore: Seven Ciphers, One Contract")
print(LINE)
print(f"  Message: {MSG}")

# ── every algorithm, both directions ─────────────────────────────────────────
for algorithm in Algorithm:
    header(algorithm.value.upper())
    key = KEYS.get(algorithm)
    t0  = time.perf_counter()
    ct  = transform(algorithm, Mode.ENCRYPT, MSG, key)
    pt  = transform(algorithm, Mode.DECRYPT, ct.output, key)
    elapsed = time.perf_counter() - t0
    history.record(algorithm, Mode.ENCRYPT, MSG, ct)
    history.record(algorithm, Mode.DECRYPT, ct.output, pt)
    if key is not None:
        ok("Key", str(key))
    ok("Encrypted",  ct.output[:50] + ("..." if len(ct.output) > 50 else ""))
    ok("Decrypted",  pt.output)
    ok("Round-trip", f"{elapsed*1000:.2f} ms")

n, e, d = generate_toy_keys()
ok("Toy key pair", f"n={n} e={e} d={d}")

# ── failure contract ─────────────────────────────────────────────────────────
header("FAILURES (returned, never raised)")
secret = transform(Algorithm.SYMMETRIC, Mode.ENCRYPT, MSG, "right").output
for label, res in [
    ("Vigenère, no key",     transform("vigenere", "encrypt", MSG, "")),
    ("Vigenère, digits key", transform("vigenere", "encrypt", MSG, "1234")),
    ("Base64, garbage",      transform("base64", "decrypt", "not*base64")),
    ("XOR, garbage",         transform("xor", "decrypt", "???", "k3y")),
    ("AES, wrong key",       transform("symmetric", "decrypt", secret, "wrong")),
    ("AES, not ciphertext",  transform("symmetric", "decrypt", "SGVsbG8=", "right")),
]:
    fail(label, res.error)

# ── activity log ─────────────────────────────────────────────────────────────
header("ACTIVITY LOG")
ok("Entries",        str(len(history)))
ok("Search 'mill'",  str(len(history.search("mill"))))
ok("Caesar only",    str(len(history.filter_by_algorithm("caesar"))))
print()
print(history.export("txt").split("\n\n")[0])

print(LINE + "\n")
