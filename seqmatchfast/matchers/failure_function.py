"""Prefix-function automaton (Morris-Pratt and Knuth-Morris-Pratt).

The automaton has states 0..m; state i means "the longest pattern prefix
matched so far has length i". On a mismatch in state i the search retries
from state next[i]. next[0] is -1, the reject floor: the search then
advances past the current text symbol.

Two table constructions share one search kernel:

- CLASSIC (Morris-Pratt): next[i] is the length of the longest proper
  prefix of pattern[:i] that is also a suffix of it.
- OPTIMIZED (Knuth-Morris-Pratt): when pattern[i] equals the symbol at
  the classic fallback pattern[next[i]], the retry is guaranteed to fail
  again, so next[i] is forwarded to that fallback's own entry. The stored
  values differ from CLASSIC wherever this holds; next[m] is unchanged.

Both constructions take O(m) time; the search performs at most 2n - 1
symbol comparisons.

Examples
--------
>>> build_classic_next(encode_sequence("aaaa"))
array([-1,  0,  1,  2,  3])
>>> build_optimized_next(encode_sequence("aaaa"))
array([-1, -1, -1, -1,  3])
"""

from enum import Enum

import numba
import numpy as np

from ..encoding import SymbolSequence, freeze
from ..exceptions import ConfigurationError
from .base import Matcher, MatcherKind


class FailureVariant(Enum):
    """Table construction for the prefix-function automaton."""
    CLASSIC = "classic"      # Morris-Pratt
    OPTIMIZED = "optimized"  # Knuth-Morris-Pratt


@numba.jit(nopython=True, cache=True)
def build_classic_next(pattern: np.ndarray) -> np.ndarray:
    """Build the Morris-Pratt fallback table (size m + 1)."""
    m = len(pattern)
    next_table = np.empty(m + 1, dtype=np.int64)
    next_table[0] = -1
    i = 0
    j = -1
    while i < m:
        while j > -1 and pattern[i] != pattern[j]:
            j = next_table[j]
        i += 1
        j += 1
        next_table[i] = j
    return next_table


@numba.jit(nopython=True, cache=True)
def build_optimized_next(pattern: np.ndarray) -> np.ndarray:
    """Build the Knuth-Morris-Pratt fallback table (size m + 1)."""
    m = len(pattern)
    next_table = np.empty(m + 1, dtype=np.int64)
    next_table[0] = -1
    i = 0
    j = -1
    while i < m:
        while j > -1 and pattern[i] != pattern[j]:
            j = next_table[j]
        i += 1
        j += 1
        # Same symbol at the fallback would mismatch again: skip it
        if i < m and pattern[i] == pattern[j]:
            next_table[i] = next_table[j]
        else:
            next_table[i] = j
    return next_table


@numba.jit(nopython=True, cache=True)
def failure_function_search(pattern: np.ndarray, text: np.ndarray, next_table: np.ndarray) -> int:
    """Run the prefix-function automaton over text (Numba-compiled).

    Parameters
    ----------
    pattern : np.ndarray (int32)
        Encoded pattern
    text : np.ndarray (int32)
        Encoded text
    next_table : np.ndarray (int64)
        Fallback table from build_classic_next() or build_optimized_next()

    Returns
    -------
    offset : int
        Leftmost match offset, or len(text) if none
    """
    m = len(pattern)
    n = len(text)
    if m == 0:
        return 0

    i = 0
    j = 0
    while j < n:
        while i > -1 and pattern[i] != text[j]:
            i = next_table[i]
        i += 1
        j += 1
        if i >= m:
            return j - m
    return n


_BUILDERS = {
    FailureVariant.CLASSIC: build_classic_next,
    FailureVariant.OPTIMIZED: build_optimized_next,
}


class FailureFunctionMatcher(Matcher):
    """Prefix-function matcher with a selectable table construction.

    Parameters
    ----------
    pattern : str, bytes-like, sequence of int or np.ndarray
        Pattern to search for
    alphabet_size : int, optional
        Pattern symbols must be below this value (default: 256)
    variant : FailureVariant or str
        CLASSIC (Morris-Pratt) or OPTIMIZED (Knuth-Morris-Pratt, default)

    Attributes
    ----------
    next_table : np.ndarray (int64, read-only)
        Fallback state for each automaton state 0..m
    """

    def __init__(self, pattern: SymbolSequence, alphabet_size=None,
                 variant=FailureVariant.OPTIMIZED):
        try:
            variant = FailureVariant(variant)
        except ValueError:
            raise ConfigurationError(f"Unknown failure-function variant: {variant!r}") from None
        super().__init__(pattern, alphabet_size)

        self.variant = variant
        self.next_table = freeze(_BUILDERS[variant](self._pattern))

    @property
    def kind(self) -> MatcherKind:
        if self.variant is FailureVariant.CLASSIC:
            return MatcherKind.FAILURE_CLASSIC
        return MatcherKind.FAILURE_OPTIMIZED

    def _search_symbols(self, text: np.ndarray) -> int:
        return failure_function_search(self._pattern, text, self.next_table)
