"""
polyalpha
=========
The Vigenère polyalphabetic cipher: encrypt, decrypt, and a
step-by-step trace of the key alignment behind every letter.

    >>> from polyalpha import VigenereCipher
    >>> VigenereCipher().encrypt("HELLO WORLD", "KEY")
    'RIJVS UYVJN'

Educational only. Vigenère falls to Kasiski and frequency analysis.
"""

__version__ = "1.0.0"

from .errors   import VigenereKeyError, EmptyKeyError, KeyHasNoLettersError
from .alphabet import (Direction, normalize_key, shift_letter,
                       letter_position, position_letter)
from .trace    import TraceStep, EncryptionTrace, render_trace
from .vigenere import VigenereCipher

__all__ = [
    "VigenereCipher",
    "VigenereKeyError",
    "EmptyKeyError",
    "KeyHasNoLettersError",
    "Direction",
    "normalize_key",
    "shift_letter",
    "letter_position",
    "position_letter",
    "TraceStep",
    "EncryptionTrace",
    "render_trace",
]
