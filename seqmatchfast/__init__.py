"""SeqMatchFast - Numba-compiled exact string matching.

This library finds the leftmost occurrence of a pattern in a text with five
classical strategies sharing one contract: Karp-Rabin rolling hash,
Morris-Pratt and Knuth-Morris-Pratt prefix-function automata, Quick Search
bad-character skipping, and Shift-Or bit-parallel matching.

Patterns are preprocessed once into read-only tables; searches run in
Numba-compiled kernels over integer symbol arrays and return the text
length when the pattern does not occur.

Examples
--------
>>> from seqmatchfast import construct
>>> matcher = construct("atcgacgta", kind="kmp")
>>> matcher.search("gcatcgatcagatatcgatcgacgtagcatgcacgacag")
17
"""

__version__ = "0.1.0"

# Import main submodules for convenient access
from seqmatchfast import constants
from seqmatchfast import encoding
from seqmatchfast import matchers
from seqmatchfast import convenience
from seqmatchfast import display

from seqmatchfast.exceptions import ConfigurationError
from seqmatchfast.encoding import encode_sequence, check_alphabet
from seqmatchfast.matchers import (
    Alphabet,
    Matcher,
    MatcherKind,
    SearchParams,
    construct,
    HashRollingMatcher,
    FailureFunctionMatcher,
    FailureVariant,
    BadCharacterMatcher,
    BitParallelMatcher,
)
from seqmatchfast.convenience import find, find_with_all, naive_search, search_batch
from seqmatchfast.display import render_match

__all__ = [
    "constants",
    "encoding",
    "matchers",
    "convenience",
    "display",
    "ConfigurationError",
    "encode_sequence",
    "check_alphabet",
    "Alphabet",
    "Matcher",
    "MatcherKind",
    "SearchParams",
    "construct",
    "HashRollingMatcher",
    "FailureFunctionMatcher",
    "FailureVariant",
    "BadCharacterMatcher",
    "BitParallelMatcher",
    "find",
    "find_with_all",
    "naive_search",
    "search_batch",
    "render_match",
]
