"""
Alphabet primitives
===================
Letter <-> position mapping, ASCII case folding, key normalization and
the modular shift shared by encryption and decryption.

    A  B  C  ...  Y  Z
    0  1  2  ...  24 25

Only the 26 Latin letters take part in the arithmetic. Anything else,
including accented and non-Latin letters, is left for the caller to pass
through untouched.
"""

import enum
import string

from .errors import EmptyKeyError, KeyHasNoLettersError

ALPHA         = string.ascii_uppercase
ALPHABET_SIZE = len(ALPHA)   # 26

_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


class Direction(enum.Enum):
    FORWARD  = 1    # encrypt
    BACKWARD = -1   # decrypt


def fold_upper(text: str) -> str:
    """
    Upper-case a-z only.

    str.upper() is not length-preserving ("ß" -> "SS") and maps some
    non-Latin letters onto A-Z ("ı" -> "I"); this never does either.
    """
    return text.translate(_UPPER)


def is_letter(ch: str) -> bool:
    return len(ch) == 1 and ch in ALPHA


def letter_position(ch: str) -> int:
    """A=0 ... Z=25. Lower-case input is accepted."""
    up = fold_upper(ch)
    if not is_letter(up):
        raise ValueError(f"Not an A-Z letter: {ch!r}")
    return ord(up) - ord("A")


def position_letter(position: int) -> str:
    if not 0 <= position < ALPHABET_SIZE:
        raise ValueError(f"Position out of range 0-25: {position}")
    return ALPHA[position]


def normalize_key(key: str) -> str:
    """
    Turn a raw key into its KeyStream: upper-case, keep A-Z only.

    Raises:
        EmptyKeyError        : key is None or ""
        KeyHasNoLettersError : nothing left after stripping (e.g. "123")
        TypeError            : key is not a str
    """
    if key is None:
        raise EmptyKeyError()
    if not isinstance(key, str):
        raise TypeError(f"Key must be str, not {type(key).__name__}.")
    if key == "":
        raise EmptyKeyError()
    # full upper(): the key may grow ("ß" -> "SS"), only the text must not
    stream = "".join(c for c in key.upper() if c in ALPHA)
    if not stream:
        raise KeyHasNoLettersError(key)
    return stream


def shift_letter(letter: str, shift: int, direction: Direction) -> str:
    """
    Shift one letter by ``shift`` places.

    Forward:  (P + S) % 26
    Backward: (P - S + 26) % 26    e.g. B(1) - 3 -> 24 -> Y

    Output is always upper-case.
    """
    if not 0 <= shift < ALPHABET_SIZE:
        raise ValueError(f"Shift out of range 0-25: {shift}")
    p = letter_position(letter)
    if direction is Direction.FORWARD:
        new = (p + shift) % ALPHABET_SIZE
    else:
        new = (p - shift + ALPHABET_SIZE) % ALPHABET_SIZE
    return ALPHA[new]
