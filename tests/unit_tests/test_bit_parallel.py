"""Tests for the bit-parallel (Shift-Or) matcher."""

import numpy as np
import pytest

from seqmatchfast.constants import MAX_WORD_SIZE, WORD_SIZE
from seqmatchfast.convenience import naive_search
from seqmatchfast.encoding import encode_sequence
from seqmatchfast.exceptions import ConfigurationError
from seqmatchfast.matchers import MatcherKind
from seqmatchfast.matchers.bit_parallel import (
    BitParallelMatcher,
    acceptance_limit,
    build_masks,
    shift_or_search,
)


class TestWordSizeBound:
    """Test the pattern length precondition."""

    def test_default_word_size(self):
        assert WORD_SIZE == 16
        assert BitParallelMatcher("a").word_size == 16

    def test_pattern_of_word_size_accepted(self):
        matcher = BitParallelMatcher("acgt" * 4)
        assert len(matcher) == 16
        assert matcher.search("tttt" + "acgt" * 4) == 4

    def test_pattern_longer_than_word_rejected(self):
        with pytest.raises(ConfigurationError, match="17 exceeds word size 16"):
            BitParallelMatcher("a" * 17)

    def test_wider_word_accepts_longer_pattern(self):
        matcher = BitParallelMatcher("a" * 17, word_size=32)
        assert matcher.search("b" + "a" * 17) == 1

    def test_word_size_range(self):
        with pytest.raises(ConfigurationError):
            BitParallelMatcher("a", word_size=0)
        with pytest.raises(ConfigurationError):
            BitParallelMatcher("a", word_size=MAX_WORD_SIZE + 1)

    def test_maximum_word_size(self, random_dna):
        """63-symbol patterns work without touching the int64 sign bit."""
        pattern = random_dna(MAX_WORD_SIZE)
        text = random_dna(200) + pattern + random_dna(10)
        matcher = BitParallelMatcher(pattern, word_size=MAX_WORD_SIZE)
        assert matcher.search(text) == naive_search(pattern, text)


class TestMasks:
    """Test mask and acceptance limit construction."""

    def test_masks_clear_pattern_positions(self):
        masks = build_masks(encode_sequence("ab"), 128, 0xFFFF)
        assert masks[ord("a")] == 0xFFFE
        assert masks[ord("b")] == 0xFFFD
        assert masks[ord("c")] == 0xFFFF

    def test_repeated_symbol_clears_several_bits(self):
        masks = build_masks(encode_sequence("aba"), 128, 0xFFFF)
        assert masks[ord("a")] == 0xFFFF & ~0b101

    def test_acceptance_limit(self):
        assert acceptance_limit(2, 0xFFFF) == 0xFFFE
        assert acceptance_limit(16, 0xFFFF) == 0x8000
        assert acceptance_limit(1, 0xFFFF) == 0xFFFF

    def test_matcher_state(self):
        matcher = BitParallelMatcher("ab", alphabet_size=128)
        assert matcher.ones == 0xFFFF
        assert matcher.limit == 0xFFFE
        assert len(matcher.masks) == 128
        assert matcher.kind is MatcherKind.BIT_PARALLEL


class TestShiftOrSearch:
    """Test the automaton run."""

    def test_worked_examples(self, example_text, example_patterns):
        for pattern, offset in example_patterns.items():
            assert BitParallelMatcher(pattern).search(example_text) == offset

    def test_kernel_directly(self):
        pattern = encode_sequence("gata")
        masks = build_masks(pattern, 128, 0xFFFF)
        text = encode_sequence("cgatag")
        assert shift_or_search(text, masks, 4, acceptance_limit(4, 0xFFFF), 0xFFFF) == 1

    def test_text_symbol_outside_alphabet(self):
        """Symbols beyond the mask table kill every hypothesis."""
        matcher = BitParallelMatcher("ab", alphabet_size=128)
        assert matcher.search("aĬab") == 2
        assert matcher.search("aĬb") == 3

    def test_random_against_naive(self):
        for _ in range(200):
            text = "".join(np.random.choice(["a", "b"], size=np.random.randint(0, 60)))
            pattern = "".join(np.random.choice(["a", "b"], size=np.random.randint(1, 17)))
            assert BitParallelMatcher(pattern).search(text) == naive_search(pattern, text)
