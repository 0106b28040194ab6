"""Tests for the rolling-hash (Karp-Rabin) matcher.

Covers hash construction, exact wraparound when the pattern is longer than
the hash register, and rejection of hash collisions.
"""

import numpy as np
import pytest

from seqmatchfast.convenience import naive_search
from seqmatchfast.encoding import encode_sequence
from seqmatchfast.exceptions import ConfigurationError
from seqmatchfast.matchers import MatcherKind
from seqmatchfast.matchers.rolling_hash import (
    HashRollingMatcher,
    leading_digit_weight,
    rolling_hash_search,
    window_hash,
)

MASK32 = (1 << 32) - 1


class TestHashPrimitives:
    """Test shift-and-add hashing and the leading-digit weight."""

    def test_window_hash_shift_and_add(self):
        """Hash is the base-2 positional value of the symbols."""
        symbols = encode_sequence("ab")
        assert window_hash(symbols, 0, 2, MASK32) == 97 * 2 + 98

    def test_window_hash_offset(self):
        """Hash of a window starting inside the array."""
        symbols = encode_sequence("xab")
        assert window_hash(symbols, 1, 2, MASK32) == window_hash(encode_sequence("ab"), 0, 2, MASK32)

    def test_window_hash_wraps(self):
        """Hash stays within the register width."""
        symbols = encode_sequence("z" * 100)
        h = window_hash(symbols, 0, 100, MASK32)
        assert 0 <= h <= MASK32

    def test_leading_weight_small(self):
        """Weight is 2**(m-1)."""
        assert leading_digit_weight(1, MASK32) == 1
        assert leading_digit_weight(4, MASK32) == 8
        assert leading_digit_weight(32, MASK32) == 2**31

    def test_leading_weight_shifted_out(self):
        """Weight becomes 0 once the leading digit leaves the register."""
        assert leading_digit_weight(33, MASK32) == 0
        assert leading_digit_weight(100, MASK32) == 0

    def test_leading_weight_empty_pattern(self):
        """Empty pattern keeps weight 1 (never used)."""
        assert leading_digit_weight(0, MASK32) == 1


class TestHashRollingMatcher:
    """Test end-to-end search behaviour."""

    def test_pattern_hash_stored(self):
        """Matcher precomputes pattern hash and weight."""
        matcher = HashRollingMatcher("gata")
        pattern = encode_sequence("gata")
        assert matcher.pattern_hash == window_hash(pattern, 0, 4, MASK32)
        assert matcher.leading_weight == 8
        assert matcher.kind is MatcherKind.HASH_ROLLING

    def test_worked_example(self, example_text):
        """Demo pattern found at offset 17."""
        assert HashRollingMatcher("atcgacgta").search(example_text) == 17

    def test_collision_rejected(self):
        """Equal hashes with different symbols are not reported."""
        # "ad" and "bb" both hash to 294
        assert window_hash(encode_sequence("ad"), 0, 2, MASK32) == \
            window_hash(encode_sequence("bb"), 0, 2, MASK32)

        matcher = HashRollingMatcher("bb")
        assert matcher.search("adxbb") == 3
        assert matcher.search("adad") == 4

    def test_one_bit_hash_still_exact(self, random_dna):
        """With a 1-bit hash nearly every window collides; results stay exact."""
        text = random_dna(300)
        for _ in range(30):
            start = np.random.randint(0, 290)
            pattern = text[start:start + 6]
            matcher = HashRollingMatcher(pattern, hash_bits=1)
            assert matcher.search(text) == naive_search(pattern, text)

    def test_pattern_longer_than_hash_width(self, random_dna):
        """Rolling update cancels exactly when the register wraps."""
        pattern = random_dna(50)
        text = random_dna(200, alphabet="ac") + pattern + random_dna(50)
        matcher = HashRollingMatcher(pattern)
        assert matcher.leading_weight == 0
        assert matcher.search(text) == naive_search(pattern, text)

    def test_pattern_exactly_hash_width(self, random_dna):
        """Boundary m == hash_bits."""
        pattern = random_dna(32)
        text = random_dna(100) + pattern
        assert HashRollingMatcher(pattern).search(text) == naive_search(pattern, text)

    def test_wide_symbols(self):
        """Code points far above a byte roll correctly."""
        pattern = "\U0001F600€" * 20
        text = "€" * 7 + pattern + "x"
        matcher = HashRollingMatcher(pattern, alphabet_size=0x110000)
        assert matcher.search(text) == 7

    def test_text_shorter_than_pattern(self):
        """Kernel returns n immediately."""
        pattern = encode_sequence("abc")
        text = encode_sequence("ab")
        assert rolling_hash_search(pattern, text, 0, 4, MASK32) == 2

    def test_invalid_hash_bits(self):
        """Hash width must be in [1, 32]."""
        with pytest.raises(ConfigurationError):
            HashRollingMatcher("abc", hash_bits=0)
        with pytest.raises(ConfigurationError):
            HashRollingMatcher("abc", hash_bits=33)
