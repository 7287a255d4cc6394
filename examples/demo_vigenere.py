"""
polyalpha — Live Demo
=====================
Run:  python examples/demo_vigenere.py

Encrypts and decrypts a few messages, prints the step-by-step key
alignment, and shows how bad keys are rejected.
"""

import sys, os, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from polyalpha import VigenereCipher, VigenereKeyError, render_trace

LINE = "═" * 70


def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)


def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")


def main():
    logging.basicConfig(level=logging.INFO, format=" %(message)s")
    cipher = VigenereCipher()

    # ── Basic round trip ─────────────────────────────────────────────────────
    header("VIGENÈRE ENCRYPTION")
    message, key = "HELLO WORLD", "KEY"
    encrypted = cipher.encrypt(message, key)
    ok("Original",  message)
    ok("Key",       key)
    ok("Encrypted", encrypted)
    ok("Decrypted", cipher.decrypt(encrypted, key))

    # ── Step by step ─────────────────────────────────────────────────────────
    header("STEP-BY-STEP ENCRYPTION")
    for plaintext, key in [("HELLO WORLD", "KEY"),
                           ("Attack at dawn!", "LEMON")]:
        for line in render_trace(cipher.trace(plaintext, key)):
            print(f"  {line}")
        print()

    # ── Key handling ─────────────────────────────────────────────────────────
    header("KEY VALIDATION")
    ok("'k-e-y 42' normalizes to", VigenereCipher("k-e-y 42").key)
    for bad in ["", "123", None]:
        try:
            cipher.encrypt("test", bad)
        except VigenereKeyError as e:
            ok(f"key={bad!r} rejected", f"{type(e).__name__}: {e}")

    print(f"\n{LINE}\n")


if __name__ == "__main__":
    main()
