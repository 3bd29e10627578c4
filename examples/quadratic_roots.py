"""
Quadratic Roots with a Full Derivation Log

Computes one root of a*x^2 + b*x + c and prints the tree of every
intermediate step. With complex roots the log shows exactly where the
calculation stopped:

    Failed: Extracting root
      Failed: Calculating Numerator
        Calculating Determinant
          ...
          Got b^2 - 4ac: -55.0
        Failed: Calculating sqrt(determinant)
          Failed: Determinant (-55.0) is < 0
"""

from dataclasses import dataclass

import numpy as np

from treelog import described, success, failure_of
from treelog.log_setup import setup_logging


@dataclass(frozen=True)
class Parameters:
    a: float
    b: float
    c: float


def print_section(title):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


@described
def b_squared(p: Parameters):
    b = yield success(p.b, lambda v: f"Got b: {v}")
    result = yield success(b * b, lambda v: f"Got b^2: {v}")
    return result


@described
def four_ac(p: Parameters):
    a = yield success(p.a, lambda v: f"Got a: {v}")
    c = yield success(p.c, lambda v: f"Got c: {v}")
    result = yield success(4 * a * c, lambda v: f"Got 4ac: {v}")
    return result


@described
def determinant(p: Parameters):
    bb = yield b_squared(p).describe("Calculating b^2")
    ac = yield four_ac(p).describe("Calculating 4ac")
    result = yield success(bb - ac, lambda v: f"Got b^2 - 4ac: {v}")
    return result


@described
def sqrt_determinant(det: float):
    if det >= 0:
        yield success(det, lambda d: f"Determinant ({d}) is >= 0")
    else:
        yield failure_of(det, lambda d: f"Determinant ({d}) is < 0")
    result = yield success(float(np.sqrt(det)), lambda v: f"Got sqrt(determinant): {v}")
    return result


@described
def numerator(p: Parameters):
    det = yield determinant(p).describe("Calculating Determinant")
    sqrt_det = yield sqrt_determinant(det).describe("Calculating sqrt(determinant)")
    b = yield success(p.b, lambda v: f"Got b: {v}")
    minus_b = yield success(-b, lambda v: f"Got -b: {v}")
    total = yield success(minus_b + sqrt_det, lambda v: f"Got -b + sqrt(determinant): {v}")
    return total


@described
def denominator(p: Parameters):
    a = yield success(p.a, lambda v: f"Got a: {v}")
    two_a = yield success(2 * a, lambda v: f"Got 2a: {v}")
    return two_a


@described
def _root(p: Parameters):
    num = yield numerator(p).describe("Calculating Numerator")
    den = yield denominator(p).describe("Calculating Denominator")
    result = yield success(num / den, lambda v: f"Got root = numerator / denominator: {v}")
    return result


def root(p: Parameters):
    return _root(p).describe("Extracting root")


def main():
    setup_logging(level="WARNING")

    print_section("Real roots: 2x^2 + 5x + 3")
    result = root(Parameters(2, 5, 3))
    print(result.show())
    print(f"\nRoot: {result.value}")

    print_section("Complex roots: 2x^2 + 5x + 10")
    result = root(Parameters(2, 5, 10))
    print(result.show())
    print(f"\nFailure: {result.failure_description}")


if __name__ == "__main__":
    main()
