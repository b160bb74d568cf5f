"""Polynomial operations and Lagrange interpolation over GF(256).

Polynomials are byte strings: index i holds the coefficient of x^i, and
index 0 is the intercept (the secret byte for a sharing polynomial).
"""

from core import rng
from core.field import FieldElement, add, sub, mul, div

# Each draw succeeds with probability 255/256, so hitting this cap means
# the random source is broken.
MAX_GENERATE_ATTEMPTS = 1024


class RandomSourceError(RuntimeError):
    """The random source never produced a polynomial of the requested degree."""


def evaluate(p: bytes, x: int) -> int:
    """Evaluate polynomial p at x using Horner's method."""
    result = 0
    for coeff in reversed(p):
        result = add(mul(result, x), coeff)
    return result


def degree(p: bytes) -> int:
    """Index of the highest nonzero coefficient above the intercept, else 0.

    The intercept is never inspected, so [s, 0, 0] has degree 0 for any s.
    """
    for i in range(len(p) - 1, 0, -1):
        if p[i] != 0:
            return i
    return 0


def generate(source, degree_: int, intercept: int) -> bytes:
    """Random polynomial of exactly the given degree with p(0) = intercept.

    source: anything with randbytes(n), e.g. random.SystemRandom or
    core.rng.DeterministicRNG. None uses the process-wide core.rng source.

    Draws are rejected until the leading coefficient is nonzero; a source
    that fails MAX_GENERATE_ATTEMPTS times raises RandomSourceError.
    """
    if degree_ < 0:
        raise ValueError(f"degree must be non-negative, got {degree_}")
    if not 0 <= intercept <= 0xFF:
        raise ValueError(f"intercept {intercept} is not a byte")
    if source is None:
        source = rng.get_source()

    for _ in range(MAX_GENERATE_ATTEMPTS):
        p = bytearray(source.randbytes(degree_ + 1))
        if len(p) != degree_ + 1:
            raise RandomSourceError(
                f"source returned {len(p)} bytes, expected {degree_ + 1}")
        if degree(p) == degree_:
            break
    else:
        raise RandomSourceError(
            f"no degree-{degree_} polynomial after {MAX_GENERATE_ATTEMPTS} draws")

    p[0] = intercept
    return bytes(p)


def lagrange_coefficients_at_zero(x_values: list[int]) -> list[int]:
    """Lagrange basis values at x=0 for the given x-coordinates.

    Returns l_i = prod_{j!=i} (0 - x_j) / (x_i - x_j) for each i. Repeated
    x-coordinates raise ZeroDivisionError.
    """
    n = len(x_values)
    lambdas = []
    for i in range(n):
        li = 1
        for j in range(n):
            if i == j:
                continue
            li = mul(li, div(sub(0, x_values[j]), sub(x_values[i], x_values[j])))
        lambdas.append(li)
    return lambdas


def interpolate(points) -> int:
    """Recover p(0) from (x, y) sample points.

    The x-coordinates must be distinct and nonzero. Fewer points than the
    threshold yield some field element, not the secret.
    """
    points = list(points)
    if not points:
        raise ValueError("Cannot interpolate an empty point set")
    lambdas = lagrange_coefficients_at_zero([x for x, _ in points])
    result = 0
    for li, (_, y) in zip(lambdas, points):
        result = add(result, mul(li, y))
    return result


class Polynomial:
    """Polynomial over GF(256). coeffs[0] = constant term."""

    def __init__(self, coeffs):
        self.coeffs = bytes(int(c) for c in coeffs)

    @property
    def degree(self) -> int:
        return degree(self.coeffs)

    def evaluate(self, x) -> FieldElement:
        """Evaluate polynomial at x using Horner's method."""
        if not isinstance(x, FieldElement):
            x = FieldElement(x)
        return FieldElement(evaluate(self.coeffs, x.value))

    def __len__(self):
        return len(self.coeffs)

    def __eq__(self, other):
        if isinstance(other, Polynomial):
            return self.coeffs == other.coeffs
        return NotImplemented

    def __repr__(self):
        return f"Polynomial({self.coeffs.hex()})"

    @staticmethod
    def random(degree: int, constant, source=None) -> 'Polynomial':
        """Random polynomial of exactly the given degree with p(0) = constant."""
        return Polynomial(generate(source, degree, int(constant)))

    @staticmethod
    def interpolate_at_zero(points) -> FieldElement:
        """Lagrange interpolation evaluated at x=0.

        points: list of (x_i, y_i) pairs, as ints or FieldElements.
        """
        return FieldElement(interpolate([(int(x), int(y)) for x, y in points]))
