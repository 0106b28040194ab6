"""Word widths, alphabet sizes and demo data for exact string matching.

This module provides all fixed parameters used throughout SeqMatchFast.
Matchers read their defaults from here so that a single edit changes the
behaviour of every kernel consistently.

Symbols are plain non-negative integers (ord() values for strings, byte
values for bytes). Alphabet-indexed tables are sized by an explicit
alphabet size rather than a hardcoded byte range, so wide alphabets stay
supportable at the cost of larger tables.

Key Features
------------
- WORD_SIZE: bit width of the Shift-Or state register (default 16)
- HASH_BITS: width of the wrapping rolling-hash register (default 32)
- Alphabet presets (ASCII, byte, full Unicode code point range)
- Worked DNA example reused by tests, docs and the CLI demo
"""

import numpy as np

# =============================================================================
# Symbol Encoding
# =============================================================================

# dtype of every encoded pattern and text
# int32 holds any Unicode code point and promotes cleanly to int64 in Numba
SYMBOL_DTYPE = np.int32

# Largest symbol value representable in SYMBOL_DTYPE
MAX_SYMBOL = int(np.iinfo(SYMBOL_DTYPE).max)

# =============================================================================
# Alphabet Sizes
# =============================================================================

# 7-bit ASCII
ASCII_ALPHABET_SIZE = 128

# One byte per symbol (default for all table-driven matchers)
BYTE_ALPHABET_SIZE = 256

# Full Unicode code point range (U+0000 to U+10FFFF)
# Tables of this size cost ~8.9 MB per matcher (int64 entries)
UNICODE_ALPHABET_SIZE = 0x110000

DEFAULT_ALPHABET_SIZE = BYTE_ALPHABET_SIZE

# =============================================================================
# Bit-Parallel (Shift-Or) Word Width
# =============================================================================

# Number of bits in the Shift-Or state register
# Patterns longer than this are rejected at construction
WORD_SIZE = 16

# Masks are held in int64; bit 63 is the sign bit and stays unused
MAX_WORD_SIZE = 63

# =============================================================================
# Rolling Hash Width
# =============================================================================

# Hash arithmetic wraps modulo 2**HASH_BITS
HASH_BITS = 32

# symbol * weight must fit an int64 before masking:
# (2**31 - 1) * 2**32 < 2**63
MAX_HASH_BITS = 32

# =============================================================================
# Worked Example (DNA)
# =============================================================================

EXAMPLE_TEXT = "gcatcgatcagatatcgatcgacgtagcatgcacgacag"

# pattern -> offset of leftmost occurrence in EXAMPLE_TEXT
# Absent patterns map to len(EXAMPLE_TEXT)
EXAMPLE_PATTERNS = {
    "atcgacgta": 17,
    "gata": 10,
    "gctc": len(EXAMPLE_TEXT),
    "gcatcgat": 0,
    "cgacag": 33,
}


def validate_constants():
    """Validate that constants are mutually consistent.

    Raises AssertionError if any constant is out of expected range.
    """
    assert 1 <= WORD_SIZE <= MAX_WORD_SIZE, f"WORD_SIZE is wrong: {WORD_SIZE}"
    assert 1 <= HASH_BITS <= MAX_HASH_BITS, f"HASH_BITS is wrong: {HASH_BITS}"
    assert MAX_SYMBOL * (1 << (MAX_HASH_BITS - 1)) < 2**63, \
        "MAX_HASH_BITS too wide for int64 hash arithmetic"
    assert ASCII_ALPHABET_SIZE < BYTE_ALPHABET_SIZE < UNICODE_ALPHABET_SIZE

    for pattern, offset in EXAMPLE_PATTERNS.items():
        found = EXAMPLE_TEXT.find(pattern)
        expected = found if found >= 0 else len(EXAMPLE_TEXT)
        assert offset == expected, f"EXAMPLE_PATTERNS[{pattern!r}] is wrong: {offset}"
