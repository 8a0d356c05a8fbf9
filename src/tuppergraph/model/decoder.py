"""
Bitmap Decoder
==============
Turns a value of 'k' into the 106 x 17 pixel block that Tupper's formula

    1/2 < floor(mod(floor(y/17) * 2^(-17*floor(x) - mod(floor(y), 17)), 2))

plots between y = k and y = k + 17.

The grid is indexed grid[column][row]. Cell [c][r] holds bit (17*c + r) of
floor(k/17), so row 0 of column 0 is the least-significant bit. Only the low
1802 bits of floor(k/17) are read; anything above them is ignored.

Functions:
    parse_k: Validate and parse a base-10 literal.
    to_bit_string: The zero-padded 1802-character binary form of floor(k/17).
    decode: k -> grid.
    decode_text: text -> grid.
    encode: grid -> smallest k that decodes to it.
    formula_pixel: Direct evaluation of the inequality at (x, y).
"""
from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

import numpy as np

from tuppergraph.config import BIT_LENGTH, GRID_COLUMNS, GRID_ROWS

if TYPE_CHECKING:
    import numpy.typing as npt

    Grid = npt.NDArray[np.uint8]

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"[0-9]+")
_WHITESPACE = re.compile(r"\s+")

# int(str) refuses very long literals (sys.int_max_str_digits), so digits are
# folded in chunks that stay well below the limit.
_CHUNK_DIGITS = 1000

_BIT_MASK = (1 << BIT_LENGTH) - 1


class InvalidInput(ValueError):
    """The supplied value is not a non-negative base-10 integer."""


def parse_k(text: str) -> int:
    """
    Parse a non-negative base-10 integer of any length.

    Whitespace anywhere in the text is ignored, so wrapped or grouped digits
    (as the constants are usually printed) are accepted.

    Raises:
        InvalidInput: Empty text, a sign, or any non-digit character.
    """
    if not isinstance(text, str):
        raise InvalidInput(f"Expected text, got {type(text).__name__}.")

    digits = _WHITESPACE.sub("", text)
    if not digits:
        raise InvalidInput("Please enter a value for k.")
    if digits.startswith("-") and _DIGITS.fullmatch(digits[1:]):
        raise InvalidInput("k must not be negative.")
    if not _DIGITS.fullmatch(digits):
        raise InvalidInput("k must be a non-negative integer (digits 0-9 only).")

    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start:start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)

    logger.debug(f"Parsed k with {len(digits)} digits ({value.bit_length()} bits).")
    return value


def _check_k(k: int) -> None:
    # bool is an int subclass but never a meaningful k
    if isinstance(k, bool) or not isinstance(k, (int, np.integer)):
        raise InvalidInput(f"k must be an integer, got {type(k).__name__}.")
    if k < 0:
        raise InvalidInput("k must not be negative.")


def to_bit_string(k: int) -> str:
    """Binary form of floor(k/17), left-padded with '0' to exactly 1802 characters."""
    _check_k(k)
    m = int(k) // GRID_ROWS
    if m.bit_length() > BIT_LENGTH:
        logger.debug(
            f"floor(k/17) has {m.bit_length()} bits; only the lowest {BIT_LENGTH} are plotted."
        )
        m &= _BIT_MASK
    return format(m, f"0{BIT_LENGTH}b")


def decode(k: int) -> Grid:
    """
    Decode 'k' into a fresh (106, 17) uint8 grid of 0/1 values.

    Bit string position 17*i + j goes to grid[105 - i][16 - j], which reverses
    both axes of the string read column by column.
    """
    bits = to_bit_string(k)
    # '0' -> 0, '1' -> 1
    flat = np.frombuffer(bits.encode("ascii"), dtype=np.uint8) - ord("0")
    grid = flat.reshape(GRID_COLUMNS, GRID_ROWS)[::-1, ::-1].copy()
    logger.debug(f"Decoded grid with {int(grid.sum())} filled cells.")
    return grid


def decode_text(text: str) -> Grid:
    """Parse the text as 'k' and decode it."""
    return decode(parse_k(text))


def encode(grid: npt.ArrayLike) -> int:
    """
    Inverse of decode: the smallest k (a multiple of 17) whose plot is 'grid'.

    Raises:
        InvalidInput: Wrong shape or cells other than 0/1.
    """
    arr = np.asarray(grid)
    if arr.shape != (GRID_COLUMNS, GRID_ROWS):
        raise InvalidInput(
            f"Grid must have shape ({GRID_COLUMNS}, {GRID_ROWS}), got {arr.shape}."
        )
    if not np.isin(arr, (0, 1)).all():
        raise InvalidInput("Grid cells must be 0 or 1.")

    bits = "".join("1" if cell else "0" for cell in arr[::-1, ::-1].ravel())
    return int(bits, 2) * GRID_ROWS


def formula_pixel(x: int, y: int) -> bool:
    """
    Evaluate Tupper's inequality at the integer point (x, y).

    With integers the inequality reduces to: bit (17*x + y mod 17) of
    floor(y/17) is set.
    """
    if x < 0 or y < 0:
        return False
    return (y // GRID_ROWS >> (GRID_ROWS * x + y % GRID_ROWS)) & 1 == 1
