"""Core primitives: GF(256) tables and arithmetic, polynomials, random source."""

from core.tables import LOG, EXP, FIELD_POLYNOMIAL, GENERATOR
from core.field import FieldElement, add, sub, mul, div, inverse, power
from core.polynomial import (
    Polynomial, RandomSourceError, MAX_GENERATE_ATTEMPTS,
    evaluate, degree, generate, interpolate, lagrange_coefficients_at_zero,
)
from core import rng
