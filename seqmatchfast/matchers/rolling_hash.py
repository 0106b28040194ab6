"""Rolling-hash matcher (Karp-Rabin).

Each window of m symbols is read as an m-digit base-2 number: the hash is
built by successive shift-and-add over symbol codes. Sliding the window
one position subtracts the leading digit (weight 2**(m-1)), shifts and adds
the trailing digit, in O(1).

All arithmetic wraps modulo 2**hash_bits. The leading-digit weight is kept
modulo the same power of two, so the cancellation is exact for any pattern
length; once m - 1 >= hash_bits the weight is 0 because the leading digit
has already been shifted out of the register.

Equal hashes are necessary but not sufficient: every candidate window is
verified symbol by symbol before it is reported.
"""

import numba
import numpy as np

from ..constants import HASH_BITS, MAX_HASH_BITS
from ..encoding import SymbolSequence
from ..exceptions import ConfigurationError
from .base import Matcher, MatcherKind


@numba.jit(nopython=True, cache=True)
def window_hash(symbols: np.ndarray, start: int, length: int, mask: int) -> int:
    """Hash symbols[start:start + length] modulo mask + 1."""
    h = 0
    for i in range(start, start + length):
        h = ((h << 1) + symbols[i]) & mask
    return h


@numba.jit(nopython=True, cache=True)
def leading_digit_weight(length: int, mask: int) -> int:
    """Return 2**(length - 1) modulo mask + 1 (1 for length <= 1)."""
    d = 1
    for _ in range(1, length):
        d = (d << 1) & mask
    return d


@numba.jit(nopython=True, cache=True)
def windows_equal(pattern: np.ndarray, text: np.ndarray, start: int) -> bool:
    """Does pattern[0..m-1] match text[start..start + m - 1]?"""
    for i in range(len(pattern)):
        if pattern[i] != text[start + i]:
            return False
    return True


@numba.jit(nopython=True, cache=True)
def rolling_hash_search(
    pattern: np.ndarray,
    text: np.ndarray,
    pattern_hash: int,
    leading_weight: int,
    mask: int,
) -> int:
    """Find the leftmost occurrence of pattern in text (Numba-compiled).

    Parameters
    ----------
    pattern : np.ndarray (int32)
        Encoded pattern
    text : np.ndarray (int32)
        Encoded text
    pattern_hash : int
        window_hash(pattern, 0, m, mask)
    leading_weight : int
        leading_digit_weight(m, mask)
    mask : int
        2**hash_bits - 1

    Returns
    -------
    offset : int
        Leftmost match offset, or len(text) if none
    """
    m = len(pattern)
    n = len(text)
    if n < m:
        return n

    text_hash = window_hash(text, 0, m, mask)
    for i in range(n - m + 1):
        if text_hash == pattern_hash and windows_equal(pattern, text, i):
            return i
        if i == n - m:
            break
        # Remove leading digit, then shift in trailing digit
        text_hash = (text_hash - text[i] * leading_weight) & mask
        text_hash = ((text_hash << 1) + text[i + m]) & mask
    return n


class HashRollingMatcher(Matcher):
    """Karp-Rabin matcher with a wrapping base-2 rolling hash.

    Parameters
    ----------
    pattern : str, bytes-like, sequence of int or np.ndarray
        Pattern to search for
    alphabet_size : int, optional
        Pattern symbols must be below this value (default: 256)
    hash_bits : int
        Width of the hash register, 1..MAX_HASH_BITS (default: 32)

    Examples
    --------
    >>> HashRollingMatcher("atcgacgta").search("gcatcgatcagatatcgatcgacgtagcatgcacgacag")
    17
    """

    kind = MatcherKind.HASH_ROLLING

    def __init__(self, pattern: SymbolSequence, alphabet_size=None, hash_bits: int = HASH_BITS):
        if not 1 <= hash_bits <= MAX_HASH_BITS:
            raise ConfigurationError(
                f"hash_bits must be in [1, {MAX_HASH_BITS}], got {hash_bits}"
            )
        super().__init__(pattern, alphabet_size)

        self.hash_bits = int(hash_bits)
        self.mask = (1 << self.hash_bits) - 1
        m = len(self._pattern)
        self.leading_weight = int(leading_digit_weight(m, self.mask))
        self.pattern_hash = int(window_hash(self._pattern, 0, m, self.mask))

    def _search_symbols(self, text: np.ndarray) -> int:
        return rolling_hash_search(
            self._pattern, text, self.pattern_hash, self.leading_weight, self.mask
        )
