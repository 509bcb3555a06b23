"""Exception types raised by the t-test core.

Every error derives from :class:`ValueError` so callers that already guard
numeric input with ``except ValueError`` keep working.
"""

from __future__ import annotations


class TTestError(ValueError):
    """Base class for errors signalled by tcalc."""


class ValidationError(TTestError):
    """Input is malformed or insufficient for the requested test.

    Raised for samples shorter than two values, mismatched paired samples,
    missing second-sample data, a significance level outside ``(0, 1)`` and
    text that cannot be parsed as numbers.
    """


class DomainError(TTestError):
    """A mathematically undefined request, such as a quantile at ``p >= 1``."""
