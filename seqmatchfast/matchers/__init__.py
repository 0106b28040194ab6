"""Exact string matchers.

Five interchangeable strategies behind one contract (preprocess the
pattern once, then search any number of texts):

1. Rolling hash (Karp-Rabin) with symbol-by-symbol verification
2. Prefix-function automaton, classic table (Morris-Pratt)
3. Prefix-function automaton, optimized table (Knuth-Morris-Pratt)
4. Bad-character shift table (Quick Search)
5. Bit-parallel automaton (Shift-Or), patterns up to the word size

Every search returns the leftmost match offset, or len(text) when the
pattern does not occur.
"""

from .base import (
    Alphabet,
    Matcher,
    MatcherKind,
    SearchParams,
)

from .rolling_hash import (
    HashRollingMatcher,
    rolling_hash_search,
    window_hash,
    leading_digit_weight,
)

from .failure_function import (
    FailureFunctionMatcher,
    FailureVariant,
    build_classic_next,
    build_optimized_next,
    failure_function_search,
)

from .bad_character import (
    BadCharacterMatcher,
    build_shift_table,
    quick_search,
)

from .bit_parallel import (
    BitParallelMatcher,
    build_masks,
    acceptance_limit,
    shift_or_search,
)

from .registry import construct, DEFAULT_KIND

__all__ = [
    # Contract
    'Alphabet',
    'Matcher',
    'MatcherKind',
    'SearchParams',
    'construct',
    'DEFAULT_KIND',
    # Rolling hash
    'HashRollingMatcher',
    'rolling_hash_search',
    'window_hash',
    'leading_digit_weight',
    # Failure function
    'FailureFunctionMatcher',
    'FailureVariant',
    'build_classic_next',
    'build_optimized_next',
    'failure_function_search',
    # Bad character
    'BadCharacterMatcher',
    'build_shift_table',
    'quick_search',
    # Bit parallel
    'BitParallelMatcher',
    'build_masks',
    'acceptance_limit',
    'shift_or_search',
]
