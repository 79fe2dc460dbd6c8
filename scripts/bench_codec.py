#!/usr/bin/env python3
"""Measure Base32 encode/decode throughput.

Runs encode and decode over a random payload for each requested size and
prints MB/s per alphabet. Extra sizes can be listed in a YAML file:

    sizes: [5, 1024, 65536]
"""

import argparse
import random
import sys
import timeit
from pathlib import Path

import yaml

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from b32codec import Base32Type, decode, encode


def load_sizes(path: Path) -> list:
    """Read the `sizes` list from a YAML file."""
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    sizes = data.get("sizes", [])
    if not all(isinstance(size, int) and size >= 0 for size in sizes):
        raise ValueError(f"{path}: sizes must be non-negative integers, got {sizes}")
    return sizes


def bench(alphabet, size: int, iterations: int, seed: int = 0):
    """Return (encode seconds, decode seconds) for `iterations` calls each."""
    rng = random.Random(seed)
    data = bytes(rng.randrange(256) for _ in range(size))
    text = encode(alphabet, data)
    encode_time = timeit.timeit(lambda: encode(alphabet, data), number=iterations)
    decode_time = timeit.timeit(lambda: decode(alphabet, text), number=iterations)
    return encode_time, decode_time


def throughput(size: int, iterations: int, seconds: float) -> float:
    if seconds <= 0:
        return float("inf")
    return size * iterations / seconds / 1e6


def main():
    parser = argparse.ArgumentParser(description="Benchmark Base32 encode and decode")
    parser.add_argument("--alphabet", action="append",
                        choices=[member.value for member in Base32Type],
                        help="Alphabet to benchmark (repeatable, default: all)")
    parser.add_argument("--size", type=int, action="append",
                        help="Payload size in bytes (repeatable, default: 5 and 4096)")
    parser.add_argument("--sizes-file", type=Path,
                        help="YAML file with a 'sizes' list of payload sizes")
    parser.add_argument("--iterations", type=int, default=1000,
                        help="Calls per measurement")
    args = parser.parse_args()

    alphabets = [Base32Type.from_name(name).alphabet
                 for name in (args.alphabet or [member.value for member in Base32Type])]
    sizes = list(args.size or [])
    if args.sizes_file:
        sizes.extend(load_sizes(args.sizes_file))
    if not sizes:
        sizes = [5, 4096]

    print(f"{'alphabet':<20} {'bytes':>8} {'encode MB/s':>12} {'decode MB/s':>12}")
    print("-" * 55)
    for alphabet in alphabets:
        for size in sizes:
            encode_time, decode_time = bench(alphabet, size, args.iterations)
            print(f"{alphabet.name:<20} {size:>8} "
                  f"{throughput(size, args.iterations, encode_time):>12.2f} "
                  f"{throughput(size, args.iterations, decode_time):>12.2f}")


if __name__ == "__main__":
    main()
