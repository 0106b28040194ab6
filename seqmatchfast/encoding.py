"""Sequence encoding for Numba processing.

All kernels operate on 1-D integer arrays; no string operations happen in
Numba. This module converts user input (str, bytes, integer sequences or
numpy arrays) to SYMBOL_DTYPE arrays and checks symbols against an
alphabet size.
"""

from typing import Sequence, Union

import numba
import numpy as np

from .constants import MAX_SYMBOL, SYMBOL_DTYPE
from .exceptions import ConfigurationError

SymbolSequence = Union[str, bytes, bytearray, memoryview, Sequence[int], np.ndarray]


def encode_sequence(sequence: SymbolSequence) -> np.ndarray:
    """Encode a sequence to a symbol array.

    Parameters
    ----------
    sequence : str, bytes-like, sequence of int or np.ndarray
        - str: one symbol per character, ord() value
        - bytes, bytearray, memoryview: one symbol per byte
        - integer sequence or 1-D integer array: taken as-is

    Returns
    -------
    symbols : np.ndarray (int32)
        Encoded symbols

    Raises
    ------
    TypeError
        If the input type (or array dtype) is not supported
    ValueError
        If a symbol is negative or exceeds MAX_SYMBOL, or an array is not 1-D

    Examples
    --------
    >>> encode_sequence("gata")
    array([103,  97, 116,  97], dtype=int32)
    >>> encode_sequence(b"\\x00\\xff")
    array([  0, 255], dtype=int32)
    """
    if isinstance(sequence, str):
        return np.array([ord(c) for c in sequence], dtype=SYMBOL_DTYPE)

    if isinstance(sequence, (bytes, bytearray, memoryview)):
        return np.frombuffer(bytes(sequence), dtype=np.uint8).astype(SYMBOL_DTYPE)

    if isinstance(sequence, np.ndarray):
        array = sequence
    else:
        try:
            array = np.asarray(list(sequence))
        except TypeError:
            raise TypeError(
                f"Cannot encode {type(sequence).__name__}; expected str, bytes, "
                f"integer sequence or numpy array"
            ) from None
        if array.size == 0:
            return np.empty(0, dtype=SYMBOL_DTYPE)

    if array.ndim != 1:
        raise ValueError(f"Symbol arrays must be 1-D, got shape {array.shape}")
    if array.dtype.kind not in "iu":
        raise TypeError(f"Symbol arrays must have an integer dtype, got {array.dtype}")

    if array.size:
        low = int(array.min())
        high = int(array.max())
        if low < 0:
            raise ValueError(f"Symbols must be non-negative, got {low}")
        if high > MAX_SYMBOL:
            raise ValueError(f"Symbol {high} exceeds maximum {MAX_SYMBOL}")

    return array.astype(SYMBOL_DTYPE, copy=False)


@numba.jit(nopython=True, cache=True)
def first_out_of_alphabet(symbols: np.ndarray, alphabet_size: int) -> int:
    """Return the index of the first symbol >= alphabet_size, or -1."""
    for i in range(len(symbols)):
        if symbols[i] >= alphabet_size:
            return i
    return -1


def check_alphabet(symbols: np.ndarray, alphabet_size: int) -> None:
    """Check that every symbol is below alphabet_size.

    Parameters
    ----------
    symbols : np.ndarray (int32)
        Encoded symbols (use encode_sequence())
    alphabet_size : int
        Number of symbols in the alphabet (valid symbols are 0..alphabet_size-1)

    Raises
    ------
    ConfigurationError
        If alphabet_size < 1 or any symbol is out of range
    """
    if alphabet_size < 1:
        raise ConfigurationError(f"Alphabet size must be positive, got {alphabet_size}")

    idx = first_out_of_alphabet(symbols, alphabet_size)
    if idx >= 0:
        raise ConfigurationError(
            f"Symbol {int(symbols[idx])} at position {idx} does not fit "
            f"alphabet of size {alphabet_size}"
        )


def freeze(array: np.ndarray) -> np.ndarray:
    """Mark an array read-only and return it."""
    array.flags.writeable = False
    return array
