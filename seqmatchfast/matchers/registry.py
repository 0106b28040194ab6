"""Construct a matcher by kind.

The strategies form a closed set (MatcherKind); this module maps each kind
to its class and forwards only the SearchParams fields that class uses.
"""

import logging
from typing import Optional, Union

from ..encoding import SymbolSequence
from .bad_character import BadCharacterMatcher
from .base import Matcher, MatcherKind, SearchParams
from .bit_parallel import BitParallelMatcher
from .failure_function import FailureFunctionMatcher, FailureVariant
from .rolling_hash import HashRollingMatcher

logger = logging.getLogger(__name__)

DEFAULT_KIND = MatcherKind.FAILURE_OPTIMIZED


def construct(
    pattern: SymbolSequence,
    kind: Union[MatcherKind, str] = DEFAULT_KIND,
    params: Optional[SearchParams] = None,
) -> Matcher:
    """Preprocess a pattern with the requested strategy.

    Parameters
    ----------
    pattern : str, bytes-like, sequence of int or np.ndarray
        Pattern to search for
    kind : MatcherKind or str
        Strategy, e.g. MatcherKind.BIT_PARALLEL, "bad_character" or "kmp"
        (default: FAILURE_OPTIMIZED)
    params : SearchParams, optional
        Alphabet size, word size and hash width (default: SearchParams())

    Returns
    -------
    matcher : Matcher
        Ready-to-use matcher

    Raises
    ------
    ConfigurationError
        If the kind is unknown or the pattern does not fit the parameters

    Examples
    --------
    >>> matcher = construct("gata", kind="shift-or")
    >>> matcher.search("gcatcgatcagatatcgatcgacgtagcatgcacgacag")
    10
    """
    kind = MatcherKind.from_name(kind)
    if params is None:
        params = SearchParams()

    if kind is MatcherKind.HASH_ROLLING:
        matcher = HashRollingMatcher(pattern, params.alphabet_size, hash_bits=params.hash_bits)
    elif kind is MatcherKind.FAILURE_CLASSIC:
        matcher = FailureFunctionMatcher(pattern, params.alphabet_size, variant=FailureVariant.CLASSIC)
    elif kind is MatcherKind.FAILURE_OPTIMIZED:
        matcher = FailureFunctionMatcher(pattern, params.alphabet_size, variant=FailureVariant.OPTIMIZED)
    elif kind is MatcherKind.BAD_CHARACTER:
        matcher = BadCharacterMatcher(pattern, params.alphabet_size)
    else:
        matcher = BitParallelMatcher(pattern, params.alphabet_size, word_size=params.word_size)

    logger.debug(f"Constructed {matcher!r}")
    return matcher
