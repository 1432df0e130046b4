"""
mod_alpha_cipher — Live Demo
============================
Run:  python examples/demo_cipher.py

Encrypts and decrypts a few messages, then shows each validation error.
"""

import sys, os, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from mod_alpha_cipher import ALPHABET, CipherError, ModAlphaCipher

logging.basicConfig(level=logging.INFO, format=' %(message)s')
log = logging.getLogger("demo")

LINE = "═" * 70

def header(name):
    log.info(f"\n{LINE}")
    log.info(f"  {name}")
    log.info(LINE)

def ok(label, value=""):
    log.info(f"  ✓  {label}{f': {value}' if value else ''}")

# ─────────────────────────────────────────────────────────────────────────────
header("mod_alpha_cipher — Demo")
ok("Alphabet", ALPHABET)

# ── Known vector ─────────────────────────────────────────────────────────────
header("КЛЮЧ / ТЕКСТ")
c  = ModAlphaCipher("КЛЮЧ")
ct = c.encrypt("ТЕКСТ")
ok("Key positions", c.key)
ok("Encrypted",     ct)
ok("Decrypted",     c.decrypt(ct))

# ── Longer message, short key ────────────────────────────────────────────────
header("Short key, long message")
c  = ModAlphaCipher("шифр")
pt = "съешьжеещёэтихмягкихфранцузскихбулок"
ct = c.encrypt(pt)
ok("Open text", pt)
ok("Encrypted", ct)
ok("Decrypted", c.decrypt(ct))

# ── Validation ───────────────────────────────────────────────────────────────
header("Validation errors")
for label, call in [
    ("Empty key",          lambda: ModAlphaCipher("")),
    ("Digit in key",       lambda: ModAlphaCipher("КЛЮЧ1")),
    ("Space in open text", lambda: c.encrypt("ПРИВЕТ МИР")),
    ("Latin cipher text",  lambda: c.decrypt("HELLO")),
]:
    try:
        call()
        log.info(f"  ✗  {label}: accepted")
    except CipherError as e:
        ok(label, f"{e.kind.name} — {e}")
log.info(LINE + "\n")
