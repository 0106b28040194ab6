"""Bad-character matcher (Quick Search).

A simplification of Boyer-Moore that keeps only the bad-character rule.
After each window attempt the window jumps by the shift of the symbol
just past it, text[i + m]:

- m - k, where k is the rightmost position of that symbol in the pattern
- m + 1 when the symbol does not occur in the pattern at all

Preprocessing is O(m + R) for an alphabet of size R. The search is
sublinear on average and O(n * m) in the worst case.
"""

import numba
import numpy as np

from ..encoding import SymbolSequence, freeze
from .base import Matcher, MatcherKind


@numba.jit(nopython=True, cache=True)
def build_shift_table(pattern: np.ndarray, alphabet_size: int) -> np.ndarray:
    """Build the bad-character shift table.

    Parameters
    ----------
    pattern : np.ndarray (int32)
        Encoded pattern, every symbol < alphabet_size
    alphabet_size : int
        Number of table entries

    Returns
    -------
    shift_table : np.ndarray (int64)
        shift_table[c] = m - (rightmost index of c in pattern), or m + 1
    """
    m = len(pattern)
    shift_table = np.empty(alphabet_size, dtype=np.int64)
    shift_table[:] = m + 1
    # Left to right: later positions overwrite, so the rightmost wins
    for i in range(m):
        shift_table[pattern[i]] = m - i
    return shift_table


@numba.jit(nopython=True, cache=True)
def quick_search(pattern: np.ndarray, text: np.ndarray, shift_table: np.ndarray) -> int:
    """Find the leftmost occurrence of pattern in text (Numba-compiled).

    Text symbols outside the table do not occur in the pattern and shift
    by m + 1.
    """
    m = len(pattern)
    n = len(text)
    alphabet_size = len(shift_table)

    i = 0
    while i <= n - m:
        j = 0
        while j < m and pattern[j] == text[i + j]:
            j += 1
        if j == m:
            return i
        if i + m >= n:
            break
        c = text[i + m]
        if c < alphabet_size:
            i += shift_table[c]
        else:
            i += m + 1
    return n


class BadCharacterMatcher(Matcher):
    """Quick Search matcher driven by an alphabet-indexed shift table.

    Parameters
    ----------
    pattern : str, bytes-like, sequence of int or np.ndarray
        Pattern to search for
    alphabet_size : int, optional
        Size of the shift table; pattern symbols must be below it
        (default: 256)

    Attributes
    ----------
    shift_table : np.ndarray (int64, read-only)
        Window shift per lookahead symbol

    Examples
    --------
    >>> matcher = BadCharacterMatcher("gata", alphabet_size=128)
    >>> int(matcher.shift_table[ord("a")]), int(matcher.shift_table[ord("c")])
    (1, 5)
    """

    kind = MatcherKind.BAD_CHARACTER

    def __init__(self, pattern: SymbolSequence, alphabet_size=None):
        super().__init__(pattern, alphabet_size)
        self.shift_table = freeze(build_shift_table(self._pattern, self.alphabet_size))

    def _search_symbols(self, text: np.ndarray) -> int:
        return quick_search(self._pattern, text, self.shift_table)
