"""Pytest configuration for SeqMatchFast tests.

This module provides common fixtures and configuration for all tests.
"""

import numpy as np
import pytest


@pytest.fixture
def example_text():
    """39-symbol DNA text from the command-line demo."""
    from seqmatchfast.constants import EXAMPLE_TEXT
    return EXAMPLE_TEXT


@pytest.fixture
def example_patterns():
    """Demo patterns and their expected offsets in example_text."""
    from seqmatchfast.constants import EXAMPLE_PATTERNS
    return EXAMPLE_PATTERNS


@pytest.fixture
def all_kinds():
    """Every matcher kind."""
    from seqmatchfast.matchers import MatcherKind
    return list(MatcherKind)


@pytest.fixture
def random_dna():
    """Factory for random DNA strings (np.random seeded per session)."""
    def make(length: int, alphabet: str = "acgt") -> str:
        return "".join(np.random.choice(list(alphabet), size=length))
    return make


# Random seed for reproducibility
@pytest.fixture(scope="session", autouse=True)
def set_random_seed():
    """Set random seed for reproducible tests."""
    np.random.seed(42)
