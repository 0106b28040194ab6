"""Tests for sequence encoding and alphabet checks."""

import numpy as np
import pytest

from seqmatchfast.constants import MAX_SYMBOL, SYMBOL_DTYPE
from seqmatchfast.encoding import (
    check_alphabet,
    encode_sequence,
    first_out_of_alphabet,
    freeze,
)
from seqmatchfast.exceptions import ConfigurationError


class TestEncodeSequence:
    """Test conversion of supported inputs to symbol arrays."""

    def test_encode_string(self):
        """Strings encode to ord() values."""
        symbols = encode_sequence("gata")
        assert symbols.dtype == SYMBOL_DTYPE
        assert symbols.tolist() == [103, 97, 116, 97]

    def test_encode_wide_characters(self):
        """Characters beyond one byte keep their code point."""
        assert encode_sequence("λ€").tolist() == [0x3BB, 0x20AC]

    def test_encode_bytes(self):
        """Bytes encode to byte values."""
        assert encode_sequence(b"\x00\x7f\xff").tolist() == [0, 127, 255]
        assert encode_sequence(bytearray(b"ab")).tolist() == [97, 98]

    def test_encode_int_list(self):
        """Integer sequences are taken as-is."""
        symbols = encode_sequence([3, 1, 4, 1, 5])
        assert symbols.dtype == SYMBOL_DTYPE
        assert symbols.tolist() == [3, 1, 4, 1, 5]

    def test_encode_numpy_array(self):
        """Integer arrays of any width are converted."""
        array = np.array([1, 2, 255], dtype=np.uint8)
        symbols = encode_sequence(array)
        assert symbols.dtype == SYMBOL_DTYPE
        assert symbols.tolist() == [1, 2, 255]

    def test_encode_empty_inputs(self):
        """Empty inputs give empty arrays."""
        for empty in ("", b"", [], np.array([], dtype=np.int64)):
            symbols = encode_sequence(empty)
            assert len(symbols) == 0
            assert symbols.dtype == SYMBOL_DTYPE

    def test_negative_symbol_rejected(self):
        """Negative symbols cannot index alphabet tables."""
        with pytest.raises(ValueError, match="non-negative"):
            encode_sequence([1, -1, 2])

    def test_too_large_symbol_rejected(self):
        """Symbols must fit SYMBOL_DTYPE."""
        with pytest.raises(ValueError, match="exceeds"):
            encode_sequence(np.array([MAX_SYMBOL + 1], dtype=np.int64))

    def test_two_dimensional_rejected(self):
        """Only 1-D arrays are sequences."""
        with pytest.raises(ValueError, match="1-D"):
            encode_sequence(np.zeros((2, 2), dtype=np.int32))

    def test_float_array_rejected(self):
        """Float arrays are not symbol sequences."""
        with pytest.raises(TypeError):
            encode_sequence(np.array([1.0, 2.0]))

    def test_non_iterable_rejected(self):
        """Scalars are not sequences."""
        with pytest.raises(TypeError):
            encode_sequence(42)


class TestCheckAlphabet:
    """Test alphabet range validation."""

    def test_symbols_within_alphabet(self):
        """No error when all symbols are below the alphabet size."""
        check_alphabet(encode_sequence("acgt"), 128)

    def test_symbol_equal_to_size_rejected(self):
        """Valid symbols are 0..alphabet_size-1."""
        with pytest.raises(ConfigurationError, match="position 1"):
            check_alphabet(np.array([0, 4, 1], dtype=SYMBOL_DTYPE), 4)

    def test_non_positive_size_rejected(self):
        """Alphabet size must be positive."""
        with pytest.raises(ConfigurationError):
            check_alphabet(encode_sequence(""), 0)

    def test_configuration_error_is_value_error(self):
        """Callers catching ValueError also catch ConfigurationError."""
        with pytest.raises(ValueError):
            check_alphabet(encode_sequence("é"), 128)

    def test_first_out_of_alphabet(self):
        """Kernel returns first offending index or -1."""
        symbols = np.array([1, 9, 2, 10], dtype=SYMBOL_DTYPE)
        assert first_out_of_alphabet(symbols, 11) == -1
        assert first_out_of_alphabet(symbols, 9) == 1


class TestFreeze:
    """Test read-only marking."""

    def test_freeze_blocks_writes(self):
        array = freeze(np.zeros(3, dtype=np.int64))
        with pytest.raises(ValueError):
            array[0] = 1
