"""
Student t-test engine.

Two entry points share one downstream computation:

- ``run_t_test`` works on raw samples and summarizes them first.
- ``run_t_test_from_summary`` starts from mean, SD and size directly.

Supported designs:
- one-sample:  t = (mean - mu0) / (s / sqrt(n)),               df = n - 1
- paired:      t = mean(d) / (s_d / sqrt(n)),  d = x - y,      df = n - 1
- two-sample:  t = (mean1 - mean2) / (s_p * sqrt(1/n1 + 1/n2)), df = n1 + n2 - 2
  with the pooled SD s_p (Student's equal-variance test, not Welch).

Tail handling:
- two-tailed:   p = 2 * (1 - F(|t|)),  critical values (-q, q), q = F^-1(1 - alpha/2)
- right-tailed: p = 1 - F(t),          critical value F^-1(1 - alpha)
- left-tailed:  p = F(t),              critical value F^-1(alpha)

The decision is ``p < alpha`` (strict). A zero standard error is not an error:
the statistic becomes +/-inf (or nan for a zero numerator) and flows through
the CDF as an IEEE special value.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

from .errors import ValidationError
from .models import (
    MIN_SAMPLE_SIZE,
    Hypotheses,
    SummaryStatistics,
    TailType,
    TestConfiguration,
    TestType,
    TTestResult,
)
from .stats.descriptive import mean, paired_differences, standard_deviation
from .stats.distribution import t_cdf, t_quantile

_PARAMETER_SYMBOL = {
    TestType.ONE_SAMPLE: "μ",
    TestType.PAIRED: "μd",
    TestType.TWO_SAMPLE: "μ₁",
}
_ALTERNATIVE_OPERATOR = {
    TailType.TWO_TAILED: "≠",
    TailType.RIGHT_TAILED: ">",
    TailType.LEFT_TAILED: "<",
}


def _format_number(value: float) -> str:
    """Render ``25.0`` as ``25`` and keep other values at full precision."""
    return f"{value:g}" if float(value).is_integer() else repr(float(value))


def _ratio(numerator: float, denominator: float) -> float:
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def _check_size(size: int, label: str) -> None:
    if size < MIN_SAMPLE_SIZE:
        raise ValidationError(
            f"{label} must have at least {MIN_SAMPLE_SIZE} values, got {size}."
        )


def _hypotheses(config: TestConfiguration) -> Hypotheses:
    symbol = _PARAMETER_SYMBOL[config.test_type]
    if config.test_type is TestType.ONE_SAMPLE:
        reference = _format_number(config.hypothesized_mean)
    elif config.test_type is TestType.PAIRED:
        reference = "0"
    else:
        reference = "μ₂"
    operator = _ALTERNATIVE_OPERATOR[config.tail_type]
    return Hypotheses(
        null=f"{symbol} = {reference}",
        alternative=f"{symbol} {operator} {reference}",
    )


def _p_value_and_critical_values(
    t_statistic: float, df: float, tail_type: TailType, alpha: float
) -> Tuple[float, Tuple[float, ...]]:
    if tail_type is TailType.TWO_TAILED:
        p_value = 2.0 * (1.0 - t_cdf(abs(t_statistic), df))
        t_crit = t_quantile(1.0 - alpha / 2.0, df)
        return p_value, (-t_crit, t_crit)
    if tail_type is TailType.RIGHT_TAILED:
        return 1.0 - t_cdf(t_statistic, df), (t_quantile(1.0 - alpha, df),)
    return t_cdf(t_statistic, df), (t_quantile(alpha, df),)


def _conclusion(reject: bool, alpha: float) -> str:
    evidence = "sufficient" if reject else "insufficient"
    return (
        f"There is {evidence} evidence at the {alpha * 100:g}% significance "
        "level to reject the null hypothesis."
    )


def _interpretation(config: TestConfiguration, reject: bool, sample_mean: float) -> str:
    shown = f"{sample_mean:.2f}"
    if config.test_type is TestType.ONE_SAMPLE:
        verdict = "significantly" if reject else "not significantly"
        return (
            f"The sample mean ({shown}) is {verdict} different from the "
            f"hypothesized mean ({_format_number(config.hypothesized_mean)})."
        )
    if config.test_type is TestType.PAIRED:
        subject = "the paired observations"
    else:
        subject = "the two groups"
    verdict = "a significant" if reject else "no significant"
    return (
        f"There is {verdict} difference between {subject} "
        f"(mean difference = {shown})."
    )


def _build_result(
    config: TestConfiguration,
    t_statistic: float,
    df: float,
    sample_mean: float,
    sample_sd: float,
    sample_size: int,
) -> TTestResult:
    alpha = config.significance_level
    p_value, critical_values = _p_value_and_critical_values(
        t_statistic, df, config.tail_type, alpha
    )
    reject = bool(p_value < alpha)
    return TTestResult(
        t_statistic=float(t_statistic),
        degrees_of_freedom=float(df),
        p_value=float(p_value),
        critical_values=tuple(float(c) for c in critical_values),
        sample_mean=float(sample_mean),
        sample_standard_deviation=float(sample_sd),
        sample_size=int(sample_size),
        hypotheses=_hypotheses(config),
        reject=reject,
        conclusion=_conclusion(reject, alpha),
        interpretation=_interpretation(config, reject, sample_mean),
    )


def _single_sample_test(
    config: TestConfiguration, sample_mean: float, sample_sd: float, n: int
) -> TTestResult:
    reference = (
        config.hypothesized_mean if config.test_type is TestType.ONE_SAMPLE else 0.0
    )
    se = sample_sd / math.sqrt(n)
    t_statistic = _ratio(sample_mean - reference, se)
    return _build_result(config, t_statistic, n - 1, sample_mean, sample_sd, n)


def _two_sample_test(
    config: TestConfiguration,
    mean1: float,
    sd1: float,
    n1: int,
    mean2: float,
    sd2: float,
    n2: int,
) -> TTestResult:
    df = n1 + n2 - 2
    pooled_sd = math.sqrt(((n1 - 1) * sd1**2 + (n2 - 1) * sd2**2) / df)
    se = pooled_sd * math.sqrt(1.0 / n1 + 1.0 / n2)
    diff = mean1 - mean2
    t_statistic = _ratio(diff, se)
    return _build_result(config, t_statistic, df, diff, pooled_sd, n1 + n2)


def run_t_test(
    sample: Sequence[float],
    config: TestConfiguration,
    second_sample: Optional[Sequence[float]] = None,
) -> TTestResult:
    """Run a t-test on raw samples.

    Args:
        sample (Sequence[float]): First sample (the "before" values for a
            paired test).
        config (TestConfiguration): Test design, tail, alpha and ``mu0``.
        second_sample (Sequence[float], optional): Second group for a
            two-sample test, or the "after" values for a paired test.

    Returns:
        TTestResult: Statistic, df, p-value, critical values and decision.

    Raises:
        ValidationError: If a sample has fewer than two values, the paired
            samples differ in length, or the second sample is missing (or
            supplied for a one-sample test).
    """
    test_type = config.test_type

    if test_type is TestType.ONE_SAMPLE:
        if second_sample is not None:
            raise ValidationError("A one-sample test takes a single sample.")
        _check_size(len(sample), "Sample")
        return _single_sample_test(
            config, mean(sample), standard_deviation(sample), len(sample)
        )

    if second_sample is None:
        raise ValidationError(f"A {test_type.value} test requires a second sample.")

    if test_type is TestType.PAIRED:
        differences = paired_differences(sample, second_sample)
        _check_size(len(differences), "Paired samples")
        return _single_sample_test(
            config,
            mean(differences),
            standard_deviation(differences),
            len(differences),
        )

    _check_size(len(sample), "Sample 1")
    _check_size(len(second_sample), "Sample 2")
    return _two_sample_test(
        config,
        mean(sample),
        standard_deviation(sample),
        len(sample),
        mean(second_sample),
        standard_deviation(second_sample),
        len(second_sample),
    )


def run_t_test_from_summary(
    summary: SummaryStatistics,
    config: TestConfiguration,
    second_summary: Optional[SummaryStatistics] = None,
) -> TTestResult:
    """Run a t-test from summary statistics.

    Args:
        summary (SummaryStatistics): First sample. For a paired test this is
            the summary of the differences.
        config (TestConfiguration): Test design, tail, alpha and ``mu0``.
        second_summary (SummaryStatistics, optional): Second group; required
            for a two-sample test.

    Returns:
        TTestResult: Same structure as :func:`run_t_test`.

    Raises:
        ValidationError: If a two-sample test lacks ``second_summary`` or a
            single-sample design receives one.
    """
    if config.test_type is TestType.TWO_SAMPLE:
        if second_summary is None:
            raise ValidationError(
                "Two-sample test requires second sample statistics."
            )
        return _two_sample_test(
            config,
            summary.mean,
            summary.standard_deviation,
            summary.size,
            second_summary.mean,
            second_summary.standard_deviation,
            second_summary.size,
        )

    if second_summary is not None:
        raise ValidationError(
            f"A {config.test_type.value} test from summary statistics takes a "
            "single summary (the differences for a paired test)."
        )
    return _single_sample_test(
        config, summary.mean, summary.standard_deviation, summary.size
    )
