"""Special functions behind the Student t-distribution.

This module provides:
- ``log_gamma`` via the Lanczos approximation (g = 5, six coefficients),
- ``log_beta`` and ``beta`` built from it, and
- ``regularized_incomplete_beta`` evaluated with a continued fraction.

All functions operate on Python floats and have no side effects.
"""

from __future__ import annotations

import math

from tcalc.errors import DomainError

LANCZOS_COEFFICIENTS: tuple[float, ...] = (
    76.18009172947146,
    -86.50532032941677,
    24.01409824083091,
    -1.231739572450155,
    0.1208650973866179e-2,
    -0.5395239384953e-5,
)
LANCZOS_SERIES_BASE = 1.000000000190015
SQRT_TWO_PI = 2.5066282746310005

MAX_CF_ITERATIONS = 200
CF_EPSILON = 1e-10
# Smallest magnitude allowed for Lentz denominators before they are clamped.
CF_TINY = 1e-300


def log_gamma(x: float) -> float:
    """Return ``ln(Gamma(x))`` for ``x > 0``.

    Args:
        x (float): Positive argument. Degrees of freedom and beta shape
            parameters are always at least ``0.5`` in this package.

    Returns:
        float: Natural logarithm of the gamma function at ``x``.

    Raises:
        DomainError: If ``x`` is zero or negative.

    Note:
        Relative accuracy is about ``2e-10`` across the positive axis; it
        degrades for ``x`` very close to zero.

    References:
        Lanczos, C. (1964). A precision approximation of the gamma function.
    """
    x = float(x)
    if x <= 0.0:
        raise DomainError(f"log_gamma is only defined for x > 0, got {x!r}")

    y = x
    tmp = x + 5.5
    tmp -= (x + 0.5) * math.log(tmp)
    series = LANCZOS_SERIES_BASE
    for coefficient in LANCZOS_COEFFICIENTS:
        y += 1.0
        series += coefficient / y
    return -tmp + math.log(SQRT_TWO_PI * series / x)


def log_beta(a: float, b: float) -> float:
    """Return ``ln(B(a, b))``."""
    return log_gamma(a) + log_gamma(b) - log_gamma(a + b)


def beta(a: float, b: float) -> float:
    """Return the complete beta function ``B(a, b)``."""
    return math.exp(log_beta(a, b))


def _clamp_tiny(value: float) -> float:
    return CF_TINY if abs(value) < CF_TINY else value


def _beta_continued_fraction(x: float, a: float, b: float) -> float:
    """Evaluate the continued fraction for ``I_x(a, b)`` (modified Lentz).

    At most ``MAX_CF_ITERATIONS`` terms are used. If the fraction has not
    settled to ``CF_EPSILON`` relative change by then, the last iterate is
    returned as the best available estimate.
    """
    qab = a + b
    qap = a + 1.0
    qam = a - 1.0

    c = 1.0
    d = 1.0 / _clamp_tiny(1.0 - qab * x / qap)
    h = d

    for m in range(1, MAX_CF_ITERATIONS + 1):
        m2 = 2 * m

        # Even step.
        numerator = m * (b - m) * x / ((qam + m2) * (a + m2))
        d = 1.0 / _clamp_tiny(1.0 + numerator * d)
        c = _clamp_tiny(1.0 + numerator / c)
        h *= d * c

        # Odd step.
        numerator = -(a + m) * (qab + m) * x / ((a + m2) * (qap + m2))
        d = 1.0 / _clamp_tiny(1.0 + numerator * d)
        c = _clamp_tiny(1.0 + numerator / c)
        h_old = h
        h *= d * c

        if abs(h - h_old) < CF_EPSILON * abs(h):
            return h

    return h


def regularized_incomplete_beta(x: float, a: float, b: float) -> float:
    """Return the regularized incomplete beta function ``I_x(a, b)``.

    Args:
        x (float): Upper integration limit. Values ``<= 0`` return ``0`` and
            values ``>= 1`` return ``1``.
        a (float): First shape parameter (``> 0``).
        b (float): Second shape parameter (``> 0``).

    Returns:
        float: ``I_x(a, b)`` in ``[0, 1]``; ``nan`` when ``x`` is ``nan``.

    Note:
        The continued fraction converges quickly only for
        ``x < (a + 1) / (a + b + 2)``; above that point the reflection
        ``I_x(a, b) = 1 - I_{1-x}(b, a)`` is evaluated instead. The prefactor
        ``x^a (1-x)^b / B(a, b)`` is computed in log space.

    References:
        Press, W. H. et al. Numerical Recipes, section 6.4 (incomplete beta).
    """
    x = float(x)
    if math.isnan(x):
        return math.nan
    if x <= 0.0:
        return 0.0
    if x >= 1.0:
        return 1.0

    log_front = a * math.log(x) + b * math.log1p(-x) - log_beta(a, b)
    front = math.exp(log_front)

    if x < (a + 1.0) / (a + b + 2.0):
        return front * _beta_continued_fraction(x, a, b) / a
    return 1.0 - front * _beta_continued_fraction(1.0 - x, b, a) / b
