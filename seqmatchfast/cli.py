"""Command-line demo: search a pattern in a text and draw the result.

    $ seqmatchfast atcgacgta gcatcgatcagatatcgatcgacgtagcatgcacgacag -a shift-or
    pattern: atcgacgta
    text:    gcatcgatcagatatcgatcgacgtagcatgcacgacag
    match:                    atcgacgta
"""

import argparse
import logging
import sys

from .constants import DEFAULT_ALPHABET_SIZE, HASH_BITS, WORD_SIZE
from .display import render_match
from .exceptions import ConfigurationError
from .matchers import DEFAULT_KIND, MatcherKind, SearchParams, construct

logger = logging.getLogger(__name__)

KIND_CHOICES = [kind.value for kind in MatcherKind] + [
    "karp-rabin", "morris-pratt", "kmp", "quick-search", "shift-or",
]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="seqmatchfast",
        description="Find the first occurrence of PATTERN in TEXT",
    )
    parser.add_argument("pattern", help="Pattern to search for")
    parser.add_argument("text", help="Text to search in")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("-a", "--algorithm", choices=KIND_CHOICES, default=DEFAULT_KIND.value,
                       help=f"Matching strategy (default: {DEFAULT_KIND.value})")
    group.add_argument("--all", dest="all_kinds", action="store_true",
                       help="Run every strategy and draw each result")
    parser.add_argument("--alphabet-size", dest="alphabet_size", type=int,
                        default=DEFAULT_ALPHABET_SIZE,
                        help=f"Symbols must be below this value (default: {DEFAULT_ALPHABET_SIZE})")
    parser.add_argument("--word-size", dest="word_size", type=int, default=WORD_SIZE,
                        help=f"Shift-Or register width in bits (default: {WORD_SIZE})")
    parser.add_argument("--hash-bits", dest="hash_bits", type=int, default=HASH_BITS,
                        help=f"Rolling hash width in bits (default: {HASH_BITS})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log construction details")
    return parser.parse_args(argv)


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)

    params = SearchParams(
        alphabet_size=args.alphabet_size,
        word_size=args.word_size,
        hash_bits=args.hash_bits,
    )
    kinds = list(MatcherKind) if args.all_kinds else [MatcherKind.from_name(args.algorithm)]

    matchers = []
    for kind in kinds:
        try:
            matchers.append(construct(args.pattern, kind=kind, params=params))
        except ConfigurationError as e:
            if not args.all_kinds:
                print(f"seqmatchfast: error: {e}", file=sys.stderr)
                return 2
            logger.warning(f"Skipping {kind.value}: {e}")
    if not matchers:
        print("seqmatchfast: error: no strategy accepts this pattern", file=sys.stderr)
        return 2

    blocks = []
    for matcher in matchers:
        offset = matcher.search(args.text)
        logger.info(f"{matcher.kind.value}: offset {offset}")
        diagram = render_match(args.pattern, args.text, offset)
        if args.all_kinds:
            diagram = f"[{matcher.kind.value}]\n{diagram}"
        blocks.append(diagram)

    print("\n\n".join(blocks))
    return 0


if __name__ == "__main__":
    sys.exit(main())
