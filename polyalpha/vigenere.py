"""
Vigenère Polyalphabetic Cipher
==============================
Each letter of the text is shifted by the position of the matching
letter of a repeating keyword (A=0 ... Z=25).

    Text:   H E L L O   W O R L D
    Key:    A B C A B   C A B C A     (repeats, letters only)
    Shift:  0 1 2 0 1   2 0 1 2 0
    Result: H F N L P   Y O S N D

Rules:
  * The key is upper-cased and stripped to A-Z before use.
  * Only letters advance the key. Spaces, digits and punctuation pass
    through unchanged and leave the key position where it was.
  * Output is upper-case; the case of the input is not kept.

Repeating the key gives the ciphertext a period; once the period is
known each column is a plain Caesar shift. Use it to learn, not to hide
anything.
"""

import logging
from typing import Iterator, Optional

from .alphabet import (
    ALPHA,
    Direction,
    fold_upper,
    letter_position,
    normalize_key,
    shift_letter,
)
from .errors import EmptyKeyError
from .trace import CELL_WIDTH, EncryptionTrace, TraceStep, build_trace

logger = logging.getLogger(__name__)

_UNSET = object()   # "no key argument", distinct from an explicit None


def iter_steps(text: str, keystream: str,
               direction: Direction) -> Iterator[TraceStep]:
    """
    Walk ``text`` once, yielding one TraceStep per character.

    ``keystream`` must already be normalized. The key position only
    moves on A-Z characters.
    """
    period = len(keystream)
    shift_index = 0
    for ch in fold_upper(text):
        if ch in ALPHA:
            key_char = keystream[shift_index % period]
            shift = letter_position(key_char)
            yield TraceStep(ch, key_char, shift,
                            shift_letter(ch, shift, direction))
            shift_index += 1
        else:
            yield TraceStep(ch, None, None, ch)


class VigenereCipher:
    """
    Classic Vigenère cipher.

    Stateless apart from an optional default key, which is validated
    and normalized once at construction. Every method also takes a
    ``key`` argument that overrides it; an explicit None is an empty key
    and raises EmptyKeyError:

        VigenereCipher().encrypt("HELLO WORLD", "KEY")   # 'RIJVS UYVJN'
        VigenereCipher("KEY").decrypt("RIJVS UYVJN")     # 'HELLO WORLD'
    """

    TRACE_CELL_WIDTH = CELL_WIDTH

    def __init__(self, key: Optional[str] = None):
        self._key = normalize_key(key) if key is not None else None
        if self._key is not None:
            logger.info(f"VigenereCipher bound to key of period {len(self._key)}")

    @property
    def key(self) -> Optional[str]:
        """The normalized default key, or None."""
        return self._key

    def _keystream(self, key) -> str:
        if key is not _UNSET:
            return normalize_key(key)
        if self._key is None:
            raise EmptyKeyError()
        return self._key

    def _transform(self, text: str, key,
                   direction: Direction) -> str:
        keystream = self._keystream(key)
        out = "".join(s.output for s in iter_steps(text, keystream, direction))
        logger.debug(f"{direction.name.lower()}: {len(text)} chars, "
                     f"key period {len(keystream)}")
        return out

    def encrypt(self, plaintext: str, key: Optional[str] = _UNSET) -> str:
        """Encrypt plaintext. Non-letters pass through."""
        return self._transform(plaintext, key, Direction.FORWARD)

    def decrypt(self, ciphertext: str, key: Optional[str] = _UNSET) -> str:
        """Decrypt ciphertext. Returns the upper-cased plaintext."""
        return self._transform(ciphertext, key, Direction.BACKWARD)

    def trace(self, plaintext: str, key: Optional[str] = _UNSET) -> EncryptionTrace:
        """
        Step-by-step view of encrypt(): the key letter and shift under
        every letter, blanks under everything else. ``result`` is the
        same string encrypt() returns.
        """
        keystream = self._keystream(key)
        steps = iter_steps(plaintext, keystream, Direction.FORWARD)
        return build_trace(steps, self.TRACE_CELL_WIDTH)

    def __repr__(self):
        if self._key is None:
            return "VigenereCipher()"
        return f"VigenereCipher(period={len(self._key)})"
