"""Shamir's Secret Sharing over GF(256) — Entry Point.

Splits a single secret byte with threshold t and n shares, then
reconstructs it from share subsets. Usage: python main.py [seed]
"""

import sys
from itertools import combinations

from core import rng
from core.polynomial import generate, evaluate, interpolate


SECRET_BYTE = 0x2A
THRESHOLD = 3
NUM_SHARES = 5


def split_byte(secret: int, threshold: int, n: int) -> list[tuple[int, int]]:
    """Share one byte as n (x, y) points at x = 1..n."""
    assert 1 <= threshold <= n <= 255
    poly = generate(rng.get_source(), threshold - 1, secret)
    return [(x, evaluate(poly, x)) for x in range(1, n + 1)]


def run_threshold_scenario(secret: int, threshold: int, n: int):
    print(f"Secret: {secret:#04x}, threshold={threshold}, shares={n}")
    shares = split_byte(secret, threshold, n)
    print(f"Shares: {[(x, f'{y:#04x}') for x, y in shares]}")

    ok = 0
    subsets = list(combinations(shares, threshold))
    for subset in subsets:
        recovered = interpolate(subset)
        xs = [x for x, _ in subset]
        status = "ok" if recovered == secret else "MISMATCH"
        print(f"  x={xs}: {recovered:#04x} {status}")
        ok += recovered == secret
    print(f"\n  Recovered from {ok}/{len(subsets)} subsets\n")
    return ok == len(subsets)


def run_insufficient_scenario(secret: int, threshold: int, n: int):
    shares = split_byte(secret, threshold, n)
    subset = shares[:threshold - 1]
    recovered = interpolate(subset)
    print(f"Interpolating {len(subset)} of {threshold} required shares")
    print(f"  Result: {recovered:#04x} (secret is {secret:#04x})")
    print("  Below the threshold the result carries no information about the secret\n")
    return recovered


def run_duplicate_scenario(secret: int, threshold: int, n: int):
    shares = split_byte(secret, threshold, n)
    subset = shares[:threshold - 1] + [shares[0]]
    print(f"Interpolating with duplicated x: {[x for x, _ in subset]}")
    try:
        interpolate(subset)
    except ZeroDivisionError as e:
        print(f"  Rejected: {e}\n")
        return True
    print("  Unexpectedly returned a value\n")
    return False


def main():
    seed = int(sys.argv[1]) if len(sys.argv) > 1 else None
    rng.set_seed(seed)
    if seed is not None:
        print(f"Seed: {seed}\n")

    print("=" * 50)
    print("SCENARIO 1: Reconstruct from every threshold subset")
    print("=" * 50)
    run_threshold_scenario(SECRET_BYTE, THRESHOLD, NUM_SHARES)

    print("=" * 50)
    print("SCENARIO 2: Fewer shares than the threshold")
    print("=" * 50)
    run_insufficient_scenario(SECRET_BYTE, THRESHOLD, NUM_SHARES)

    print("=" * 50)
    print("SCENARIO 3: Duplicate x-coordinate")
    print("=" * 50)
    run_duplicate_scenario(SECRET_BYTE, THRESHOLD, NUM_SHARES)


if __name__ == "__main__":
    main()
