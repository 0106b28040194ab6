#!/usr/bin/env python
"""Benchmark all matching strategies on random DNA text.

This script:
1. Generates a random DNA text and a set of patterns (half present, half absent)
2. Builds one matcher per pattern and strategy
3. Times the searches and cross-checks every result against the direct scan
4. Reports throughput per strategy

Usage:
    python scripts/benchmark_matchers.py --text-length 1000000 --n-patterns 50
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import argparse
import time

import numpy as np

from seqmatchfast.constants import WORD_SIZE
from seqmatchfast.convenience import naive_search
from seqmatchfast.encoding import encode_sequence
from seqmatchfast.matchers import MatcherKind, construct


def make_patterns(text: np.ndarray, n_patterns: int, length: int) -> list:
    """Half the patterns are copied from the text, half are random."""
    patterns = []
    for k in range(n_patterns):
        if k % 2 == 0:
            start = np.random.randint(0, len(text) - length)
            patterns.append(text[start:start + length].copy())
        else:
            patterns.append(np.random.choice(text[:1000], size=length))
    return patterns


def main():
    parser = argparse.ArgumentParser(description="Benchmark exact matchers")
    parser.add_argument("--text-length", type=int, default=1_000_000)
    parser.add_argument("--n-patterns", type=int, default=20)
    parser.add_argument("--pattern-length", type=int, default=WORD_SIZE)
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args()

    np.random.seed(args.seed)

    print("=" * 80)
    print("SeqMatchFast: Matcher Benchmark")
    print("=" * 80)
    print()

    print("[1] Generating data...")
    text = encode_sequence("".join(np.random.choice(list("acgt"), size=args.text_length)))
    patterns = make_patterns(text, args.n_patterns, args.pattern_length)
    expected = [naive_search(p, text) for p in patterns]
    print(f"    ✓ Text: {len(text):,} symbols, {len(patterns)} patterns of length {args.pattern_length}")
    print()

    print("[2] Warming up JIT...")
    for kind in MatcherKind:
        construct("acgt", kind=kind).search("ttacgt")
    print("    ✓ Compiled")
    print()

    print("[3] Searching...")
    print(f"    {'Strategy':<20} {'Time (s)':>10} {'MB/s':>10}   Status")
    for kind in MatcherKind:
        if kind is MatcherKind.BIT_PARALLEL and args.pattern_length > WORD_SIZE:
            print(f"    {kind.value:<20} {'-':>10} {'-':>10}   skipped (pattern > word size)")
            continue

        matchers = [construct(p, kind=kind) for p in patterns]
        start = time.perf_counter()
        results = [m.search(text) for m in matchers]
        elapsed = time.perf_counter() - start

        scanned = sum(r + args.pattern_length if r < len(text) else len(text) for r in results)
        throughput = scanned / elapsed / 1e6 if elapsed > 0 else float("inf")
        status = "✓" if results == expected else "✗ MISMATCH"
        print(f"    {kind.value:<20} {elapsed:>10.4f} {throughput:>10.1f}   {status}")

    print()
    print("=" * 80)


if __name__ == "__main__":
    main()
