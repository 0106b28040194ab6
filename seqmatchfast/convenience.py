"""Convenience wrapper functions for easy-to-use API.

This module provides Python wrapper functions that build a matcher and
search in one call, compare all strategies on one input, and run a matcher
over many texts.

Use these functions when you do not need to keep a matcher around. For
repeated searches with the same pattern, construct a matcher once with
construct() and call its search() method directly.

Examples
--------
>>> find("gata", "gcatcgatcagatatcgatcgacgtagcatgcacgacag")
10

>>> find("gata", "gcatcgatcagatatcgatcgacgtagcatgcacgacag", kind="quick_search")
10

>>> find_with_all("gctc", "gcatcgatcagatatcgatcgacgtagcatgcacgacag")
{'hash_rolling': 39, 'failure_classic': 39, 'failure_optimized': 39, 'bad_character': 39, 'bit_parallel': 39}
"""

import logging
from typing import Dict, Iterable, List, Optional, Union

import numba
import numpy as np

from .encoding import SymbolSequence, encode_sequence
from .exceptions import ConfigurationError
from .matchers import DEFAULT_KIND, Matcher, MatcherKind, SearchParams, construct

logger = logging.getLogger(__name__)


# =============================================================================
# Reference Scan
# =============================================================================

@numba.jit(nopython=True, cache=True)
def brute_force_search(pattern: np.ndarray, text: np.ndarray) -> int:
    """Try every window left to right (Numba-compiled).

    O(n * m) reference implementation used to cross-check the matchers.
    """
    m = len(pattern)
    n = len(text)
    for i in range(n - m + 1):
        j = 0
        while j < m and pattern[j] == text[i + j]:
            j += 1
        if j == m:
            return i
    return n


def naive_search(pattern: SymbolSequence, text: SymbolSequence) -> int:
    """Leftmost occurrence of pattern in text by direct scan.

    Parameters
    ----------
    pattern, text : str, bytes-like, sequence of int or np.ndarray
        Sequences to compare (encoded with encode_sequence())

    Returns
    -------
    offset : int
        Leftmost match offset, or len(text) if none

    Examples
    --------
    >>> naive_search("aab", "aaab")
    1
    >>> naive_search("", "abc")
    0
    """
    return int(brute_force_search(encode_sequence(pattern), encode_sequence(text)))


# =============================================================================
# One-Shot Search
# =============================================================================

def find(
    pattern: SymbolSequence,
    text: SymbolSequence,
    kind: Union[MatcherKind, str] = DEFAULT_KIND,
    params: Optional[SearchParams] = None,
) -> int:
    """Build a matcher and search once.

    Parameters
    ----------
    pattern, text : str, bytes-like, sequence of int or np.ndarray
        Pattern to look for and text to scan
    kind : MatcherKind or str
        Strategy (default: FAILURE_OPTIMIZED)
    params : SearchParams, optional
        Construction parameters

    Returns
    -------
    offset : int
        Leftmost match offset, or len(text) if none
    """
    return construct(pattern, kind=kind, params=params).search(text)


def find_with_all(
    pattern: SymbolSequence,
    text: SymbolSequence,
    params: Optional[SearchParams] = None,
) -> Dict[str, int]:
    """Search with every strategy that accepts the pattern.

    Strategies that reject the pattern (e.g. Shift-Or for patterns longer
    than the word size) are logged and left out of the result.

    Returns
    -------
    offsets : dict
        MatcherKind value -> offset, in MatcherKind order
    """
    offsets = {}
    for kind in MatcherKind:
        try:
            matcher = construct(pattern, kind=kind, params=params)
        except ConfigurationError as e:
            logger.warning(f"Skipping {kind.value}: {e}")
            continue
        offsets[kind.value] = matcher.search(text)
    return offsets


# =============================================================================
# Batch Processing
# =============================================================================

def search_batch(matcher: Matcher, texts: Iterable[SymbolSequence]) -> List[int]:
    """Search many texts with one matcher.

    Parameters
    ----------
    matcher : Matcher
        Preprocessed matcher
    texts : iterable
        Texts to scan

    Returns
    -------
    offsets : list of int
        One offset per text (len(text) where the pattern is absent)

    Notes
    -----
    This is a simple loop wrapper. Matchers are read-only after
    construction, so for parallel processing the same matcher can be
    handed to several threads.
    """
    offsets = []
    n_found = 0
    for text in texts:
        symbols = encode_sequence(text)
        offset = matcher.search(symbols)
        if offset < len(symbols):
            n_found += 1
        offsets.append(offset)

    logger.info(f"✓ Searched {len(offsets):,} texts, {n_found:,} matched")
    return offsets
