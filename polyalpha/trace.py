"""
Diagnostic trace of an encryption: which key letter and shift governed
each character. Pure data; printing is left to the caller.

    Text:    H  E  L  L  O     W  O  R  L  D
    Key:     K  E  Y  K  E     Y  K  E  Y  K
    Shift:   10 4  24 10 4     24 10 4  24 10
    Result:  RIJVS UYVJN
"""

from typing import List, NamedTuple, Optional, Sequence, Tuple

CELL_WIDTH = 3   # fits a two-digit shift plus a gap


class TraceStep(NamedTuple):
    """One input character. key_char and shift are None for pass-through."""
    char: str
    key_char: Optional[str]
    shift: Optional[int]
    output: str


class EncryptionTrace(NamedTuple):
    text: str
    text_line: str
    key_line: str
    shift_line: str
    result: str
    steps: Tuple[TraceStep, ...]


def _grid(cells: Sequence[str], width: int) -> str:
    return "".join(c.ljust(width) for c in cells).rstrip()


def build_trace(steps: Sequence[TraceStep],
                cell_width: int = CELL_WIDTH) -> EncryptionTrace:
    """Lay the steps out as three column-aligned lines plus the result."""
    if cell_width < 3:
        raise ValueError("cell_width must be at least 3 to hold a two-digit shift.")
    steps = tuple(steps)
    text_cells: List[str] = []
    key_cells: List[str] = []
    shift_cells: List[str] = []
    for s in steps:
        text_cells.append(s.char)
        key_cells.append(s.key_char or "")
        shift_cells.append("" if s.shift is None else str(s.shift))
    return EncryptionTrace(
        text       = "".join(s.char for s in steps),
        text_line  = _grid(text_cells, cell_width),
        key_line   = _grid(key_cells, cell_width),
        shift_line = _grid(shift_cells, cell_width),
        result     = "".join(s.output for s in steps),
        steps      = steps,
    )


def render_trace(trace: EncryptionTrace) -> List[str]:
    """Labelled lines, ready to print one per line."""
    return [
        f"Text:    {trace.text_line}",
        f"Key:     {trace.key_line}",
        f"Shift:   {trace.shift_line}",
        f"Result:  {trace.result}",
    ]
