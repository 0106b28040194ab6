"""Bit-parallel matcher (Shift-Or, bitap).

Bit j of the state register tracks the hypothesis "the last j + 1 text
symbols equal pattern[0..j]", with 0 meaning alive. For every text symbol
the register is shifted left (advancing all hypotheses at once, and
starting a new one in bit 0) and OR-ed with the symbol's mask, which has
a 1 at every pattern position where that symbol does not occur (killing
the hypotheses that expected something else).

A match ends at the current symbol when bit m - 1 is 0. Bits m..W-1 of
every mask are 1, so this is the same as ``state < limit`` where limit
has bits m-1..W-1 set.

The register is W = word_size bits wide, so the pattern length is bounded
by W. This bound is checked at construction: longer patterns raise
ConfigurationError instead of being truncated.
"""

import numba
import numpy as np

from ..constants import MAX_WORD_SIZE, WORD_SIZE
from ..encoding import SymbolSequence, freeze
from ..exceptions import ConfigurationError
from .base import Matcher, MatcherKind


@numba.jit(nopython=True, cache=True)
def build_masks(pattern: np.ndarray, alphabet_size: int, ones: int) -> np.ndarray:
    """Build the per-symbol Shift-Or masks.

    Parameters
    ----------
    pattern : np.ndarray (int32)
        Encoded pattern, len(pattern) <= word size
    alphabet_size : int
        Number of masks
    ones : int
        All-ones word, 2**word_size - 1

    Returns
    -------
    masks : np.ndarray (int64)
        masks[c] has bit j cleared iff pattern[j] == c
    """
    masks = np.empty(alphabet_size, dtype=np.int64)
    masks[:] = ones
    bit = 1
    for j in range(len(pattern)):
        c = pattern[j]
        masks[c] = masks[c] & ~bit
        bit <<= 1
    return masks


def acceptance_limit(m: int, ones: int) -> int:
    """Return the mask with bits m-1..W-1 set; state < limit means a match."""
    return ones & ~(((1 << m) - 1) >> 1)


@numba.jit(nopython=True, cache=True)
def shift_or_search(text: np.ndarray, masks: np.ndarray, m: int, limit: int, ones: int) -> int:
    """Run the Shift-Or automaton over text (Numba-compiled).

    Returns
    -------
    offset : int
        Leftmost match offset, or len(text) if none
    """
    n = len(text)
    alphabet_size = len(masks)
    state = ones
    for i in range(n):
        c = text[i]
        if c < alphabet_size:
            mask = masks[c]
        else:
            mask = ones
        state = ((state << 1) | mask) & ones
        if state < limit:
            return i - m + 1
    return n


class BitParallelMatcher(Matcher):
    """Shift-Or matcher for patterns up to word_size symbols.

    Parameters
    ----------
    pattern : str, bytes-like, sequence of int or np.ndarray
        Pattern to search for, at most word_size symbols
    alphabet_size : int, optional
        Number of masks; pattern symbols must be below it (default: 256)
    word_size : int
        State register width in bits, 1..MAX_WORD_SIZE (default: 16)

    Raises
    ------
    ConfigurationError
        If the pattern is longer than word_size, or word_size is out of range

    Examples
    --------
    >>> BitParallelMatcher("a" * 16).search("a" * 20)
    0
    >>> BitParallelMatcher("a" * 17)
    Traceback (most recent call last):
    ...
    seqmatchfast.exceptions.ConfigurationError: Pattern length 17 exceeds word size 16
    """

    kind = MatcherKind.BIT_PARALLEL

    def __init__(self, pattern: SymbolSequence, alphabet_size=None, word_size: int = WORD_SIZE):
        if not 1 <= word_size <= MAX_WORD_SIZE:
            raise ConfigurationError(
                f"word_size must be in [1, {MAX_WORD_SIZE}], got {word_size}"
            )
        super().__init__(pattern, alphabet_size)

        m = len(self._pattern)
        if m > word_size:
            raise ConfigurationError(f"Pattern length {m} exceeds word size {word_size}")

        self.word_size = int(word_size)
        self.ones = (1 << self.word_size) - 1
        self.masks = freeze(build_masks(self._pattern, self.alphabet_size, self.ones))
        self.limit = acceptance_limit(m, self.ones)

    def _search_symbols(self, text: np.ndarray) -> int:
        return shift_or_search(text, self.masks, len(self._pattern), self.limit, self.ones)
