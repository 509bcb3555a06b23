"""Central Student t-distribution: density, CDF and quantile.

The CDF is expressed through the regularized incomplete beta function,

    P(T <= t) = 1 - I_x(df/2, 1/2) / 2   for t > 0, with x = df / (df + t^2),

and the quantile inverts it numerically with a bracketed bisection.
"""

from __future__ import annotations

import math

import numpy as np

from tcalc.errors import DomainError

from .special import log_beta, regularized_incomplete_beta

QUANTILE_TOLERANCE = 1e-4
QUANTILE_XTOL = 1e-10
MAX_QUANTILE_ITERATIONS = 1000


def _check_df(df: float) -> float:
    df = float(df)
    if not df > 0.0:
        raise DomainError(f"Degrees of freedom must be > 0, got {df!r}")
    return df


def t_pdf(x, df: float):
    """Evaluate the t density at ``x``.

    Args:
        x (float or array-like): Point or grid of points on the t scale.
        df (float): Degrees of freedom (``> 0``).

    Returns:
        float or numpy.ndarray: Density values, matching the shape of ``x``.

    Note:
        Used for visualization only; test decisions go through ``t_cdf``.
    """
    df = _check_df(df)
    norm = math.exp(-0.5 * math.log(df) - log_beta(0.5 * df, 0.5))
    x_arr = np.asarray(x, dtype=float)
    density = norm * np.power(1.0 + x_arr**2 / df, -0.5 * (df + 1.0))
    if density.ndim == 0:
        return float(density)
    return density


def t_cdf(t: float, df: float) -> float:
    """Return ``P(T <= t)`` for a central t-distribution with ``df`` degrees of freedom.

    ``t_cdf(0, df)`` is exactly ``0.5`` and ``t_cdf(-t, df) == 1 - t_cdf(t, df)``.
    Infinite ``t`` maps to ``0`` or ``1``; ``nan`` propagates.
    """
    df = _check_df(df)
    t = float(t)
    x = df / (df + t * t)
    tail = regularized_incomplete_beta(x, 0.5 * df, 0.5)
    if t > 0:
        return 1.0 - 0.5 * tail
    return 0.5 * tail


def t_quantile(p: float, df: float) -> float:
    """Return ``t`` such that ``t_cdf(t, df) == p``.

    Args:
        p (float): Lower-tail probability, strictly inside ``(0, 1)``.
        df (float): Degrees of freedom (``> 0``).

    Returns:
        float: Quantile estimate with ``|t_cdf(t, df) - p| < 1e-4`` once
        converged.

    Raises:
        DomainError: If ``p`` is outside ``(0, 1)`` or ``nan``.

    Note:
        The bracket ``[-1, 1]`` is doubled toward the root and then bisected.
        Bracketing and bisection share a budget of ``MAX_QUANTILE_ITERATIONS``
        CDF evaluations; when it runs out the current midpoint is returned.
    """
    p = float(p)
    if not 0.0 < p < 1.0:
        raise DomainError(f"Probability must be strictly between 0 and 1, got {p!r}")
    df = _check_df(df)
    if p == 0.5:
        return 0.0

    iterations = 0
    if p > 0.5:
        lo, hi = 0.0, 1.0
        while t_cdf(hi, df) < p and iterations < MAX_QUANTILE_ITERATIONS:
            lo, hi = hi, 2.0 * hi
            iterations += 1
    else:
        lo, hi = -1.0, 0.0
        while t_cdf(lo, df) > p and iterations < MAX_QUANTILE_ITERATIONS:
            lo, hi = 2.0 * lo, lo
            iterations += 1

    t = 0.5 * (lo + hi)
    while iterations < MAX_QUANTILE_ITERATIONS:
        t = 0.5 * (lo + hi)
        cdf = t_cdf(t, df)
        iterations += 1
        if cdf < p:
            lo = t
        else:
            hi = t
        converged = hi - lo <= QUANTILE_XTOL * max(1.0, abs(t))
        if abs(cdf - p) < QUANTILE_TOLERANCE and converged:
            break
    return t
