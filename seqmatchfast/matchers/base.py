"""Shared matcher contract.

Every matcher preprocesses its pattern once in ``__init__`` and then answers
``search(text)`` any number of times. Search results follow one convention:

- leftmost occurrence offset in ``[0, len(text))`` when the pattern occurs
- ``len(text)`` when it does not
- ``0`` for an empty pattern, whatever the text

Matcher state consists of read-only numpy arrays and ints, so a single
matcher may be shared between threads without locking.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np

from ..constants import (
    ASCII_ALPHABET_SIZE,
    BYTE_ALPHABET_SIZE,
    DEFAULT_ALPHABET_SIZE,
    HASH_BITS,
    SYMBOL_DTYPE,
    UNICODE_ALPHABET_SIZE,
    WORD_SIZE,
)
from ..encoding import SymbolSequence, check_alphabet, encode_sequence, freeze
from ..exceptions import ConfigurationError


class MatcherKind(Enum):
    """The closed set of matching strategies."""
    HASH_ROLLING = "hash_rolling"            # Karp-Rabin
    FAILURE_CLASSIC = "failure_classic"      # Morris-Pratt
    FAILURE_OPTIMIZED = "failure_optimized"  # Knuth-Morris-Pratt
    BAD_CHARACTER = "bad_character"          # Quick Search
    BIT_PARALLEL = "bit_parallel"            # Shift-Or

    @classmethod
    def from_name(cls, name) -> 'MatcherKind':
        """Resolve a kind from an enum member, its value or a classical name.

        Args:
            name: MatcherKind, value such as "bit_parallel", or an alias
                such as "kmp" or "shift-or" (case-insensitive)

        Returns:
            The matching MatcherKind

        Raises:
            ConfigurationError: If the name is unknown
        """
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower().replace("-", "_")
        if key in _ALIASES:
            return _ALIASES[key]
        try:
            return cls(key)
        except ValueError:
            raise ConfigurationError(f"Unknown matcher kind: {name!r}") from None


_ALIASES = {
    "karp_rabin": MatcherKind.HASH_ROLLING,
    "rabin_karp": MatcherKind.HASH_ROLLING,
    "morris_pratt": MatcherKind.FAILURE_CLASSIC,
    "mp": MatcherKind.FAILURE_CLASSIC,
    "knuth_morris_pratt": MatcherKind.FAILURE_OPTIMIZED,
    "kmp": MatcherKind.FAILURE_OPTIMIZED,
    "quick_search": MatcherKind.BAD_CHARACTER,
    "sunday": MatcherKind.BAD_CHARACTER,
    "shift_or": MatcherKind.BIT_PARALLEL,
    "bitap": MatcherKind.BIT_PARALLEL,
}


class Alphabet(Enum):
    """Alphabet presets with their sizes."""
    ASCII = ASCII_ALPHABET_SIZE
    BYTE = BYTE_ALPHABET_SIZE
    UNICODE = UNICODE_ALPHABET_SIZE


@dataclass(frozen=True)
class SearchParams:
    """Construction parameters shared by all matcher kinds.

    Each matcher reads only the fields it needs: ``word_size`` applies to
    the bit-parallel matcher, ``hash_bits`` to the rolling-hash matcher.
    """

    alphabet_size: int = DEFAULT_ALPHABET_SIZE
    word_size: int = WORD_SIZE
    hash_bits: int = HASH_BITS

    @classmethod
    def for_alphabet(cls, alphabet: Alphabet, **overrides) -> 'SearchParams':
        """Create parameters sized for an alphabet preset.

        Args:
            alphabet: Alphabet enum
            **overrides: Any other SearchParams field

        Returns:
            SearchParams with alphabet_size set from the preset
        """
        if not isinstance(alphabet, Alphabet):
            raise ConfigurationError(f"Unknown alphabet: {alphabet}")
        return cls(alphabet_size=alphabet.value, **overrides)


class Matcher(ABC):
    """Base class: pattern ownership, validation and the search convention.

    Subclasses build their tables in ``__init__`` after calling
    ``super().__init__`` and implement ``_search_symbols``, which is only
    ever called with a non-empty pattern and ``len(text) >= len(pattern)``.
    """

    kind: MatcherKind

    def __init__(self, pattern: SymbolSequence, alphabet_size: Optional[int] = None):
        if alphabet_size is None:
            alphabet_size = DEFAULT_ALPHABET_SIZE
        symbols = np.array(encode_sequence(pattern), dtype=SYMBOL_DTYPE, copy=True)
        check_alphabet(symbols, int(alphabet_size))

        self._pattern = freeze(symbols)
        self.alphabet_size = int(alphabet_size)

    @property
    def pattern(self) -> np.ndarray:
        """The encoded pattern (read-only)."""
        return self._pattern

    def __len__(self) -> int:
        return len(self._pattern)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind.value}, m={len(self)}, "
            f"alphabet_size={self.alphabet_size})"
        )

    def search(self, text: SymbolSequence) -> int:
        """Return the offset of the leftmost occurrence of the pattern in text.

        Parameters
        ----------
        text : str, bytes-like, sequence of int or np.ndarray
            Text to scan (encoded with encode_sequence())

        Returns
        -------
        offset : int
            Start of the leftmost occurrence, or len(text) if there is none
        """
        symbols = encode_sequence(text)
        n = len(symbols)
        m = len(self._pattern)
        if m == 0:
            return 0
        if n < m:
            return n
        return int(self._search_symbols(symbols))

    @abstractmethod
    def _search_symbols(self, text: np.ndarray) -> int:
        """Run the search kernel on an encoded text."""
