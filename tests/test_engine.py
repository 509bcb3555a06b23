import math

import numpy as np
import pytest
import scipy.stats

from tcalc import engine
from tcalc.engine import run_t_test, run_t_test_from_summary
from tcalc.errors import ValidationError
from tcalc.models import SummaryStatistics, TailType, TestConfiguration, TestType

ONE_SAMPLE = [23, 25, 27, 29, 31]
GROUP_A = [20, 22, 19, 24, 25]
GROUP_B = [28, 27, 30, 26, 29]
BEFORE = [10, 12, 9, 11]
AFTER = [12, 13, 10, 14]


def test_one_sample_two_tailed_reference_case():
    config = TestConfiguration("one-sample", "two-tailed", 0.05, hypothesized_mean=25)
    result = run_t_test(ONE_SAMPLE, config)

    ref = scipy.stats.ttest_1samp(ONE_SAMPLE, popmean=25)
    assert math.isclose(result.sample_mean, 27.0)
    assert round(result.sample_standard_deviation, 4) == 3.1623
    assert result.degrees_of_freedom == 4
    assert result.sample_size == 5
    assert np.isclose(result.t_statistic, math.sqrt(2.0))
    assert round(result.p_value, 3) == round(float(ref.pvalue), 3)
    assert np.isclose(result.p_value, 0.2302, atol=1e-3)
    crit = scipy.stats.t.ppf(0.975, 4)
    assert np.allclose(result.critical_values, (-crit, crit), atol=1e-3)
    assert result.reject is False
    assert result.hypotheses.null == "μ = 25"
    assert result.hypotheses.alternative == "μ ≠ 25"
    assert "insufficient evidence at the 5% significance level" in result.conclusion
    assert result.interpretation == (
        "The sample mean (27.00) is not significantly different from the "
        "hypothesized mean (25)."
    )


def test_two_sample_pooled_reference_case():
    config = TestConfiguration(TestType.TWO_SAMPLE, TailType.TWO_TAILED, 0.05)
    result = run_t_test(GROUP_A, config, GROUP_B)

    ref = scipy.stats.ttest_ind(GROUP_A, GROUP_B, equal_var=True)
    n1, n2 = len(GROUP_A), len(GROUP_B)
    s1, s2 = np.std(GROUP_A, ddof=1), np.std(GROUP_B, ddof=1)
    pooled = math.sqrt(((n1 - 1) * s1**2 + (n2 - 1) * s2**2) / (n1 + n2 - 2))

    assert result.degrees_of_freedom == 8
    assert result.t_statistic < 0
    assert np.isclose(result.t_statistic, float(ref.statistic))
    assert np.isclose(result.p_value, float(ref.pvalue), atol=1e-6)
    assert np.isclose(result.sample_standard_deviation, pooled)
    assert np.isclose(result.sample_mean, -6.0)
    assert result.sample_size == 10
    assert result.reject is True
    assert result.hypotheses.null == "μ₁ = μ₂"
    assert result.hypotheses.alternative == "μ₁ ≠ μ₂"
    assert "significant difference between the two groups" in result.interpretation


def test_paired_reference_case():
    config = TestConfiguration("paired", "two-tailed", 0.05)
    result = run_t_test(BEFORE, config, AFTER)

    ref = scipy.stats.ttest_rel(BEFORE, AFTER)
    assert np.isclose(result.sample_mean, -1.75)
    assert result.degrees_of_freedom == 3
    assert result.sample_size == 4
    assert np.isclose(result.t_statistic, float(ref.statistic))
    assert np.isclose(result.p_value, float(ref.pvalue), atol=1e-6)
    assert result.reject == (result.p_value < 0.05)
    assert result.hypotheses.null == "μd = 0"
    assert "(mean difference = -1.75)" in result.interpretation


def test_paired_ignores_hypothesized_mean():
    a = run_t_test(BEFORE, TestConfiguration("paired", hypothesized_mean=3.0), AFTER)
    b = run_t_test(BEFORE, TestConfiguration("paired"), AFTER)
    assert a.t_statistic == b.t_statistic


@pytest.mark.parametrize(
    "tail, alternative",
    [("right-tailed", "greater"), ("left-tailed", "less")],
)
def test_one_tailed_p_values_match_scipy(tail, alternative):
    config = TestConfiguration("one-sample", tail, 0.05, hypothesized_mean=26)
    result = run_t_test(ONE_SAMPLE, config)
    ref = scipy.stats.ttest_1samp(ONE_SAMPLE, popmean=26, alternative=alternative)
    assert np.isclose(result.p_value, float(ref.pvalue), atol=1e-6)
    assert len(result.critical_values) == 1
    expected_q = 0.95 if tail == "right-tailed" else 0.05
    assert np.isclose(result.critical_values[0], scipy.stats.t.ppf(expected_q, 4), atol=1e-3)


def test_right_tailed_hypothesis_text():
    result = run_t_test(GROUP_A, TestConfiguration("two-sample", "right"), GROUP_B)
    assert result.hypotheses.alternative == "μ₁ > μ₂"
    assert result.reject is False


@pytest.mark.parametrize("test_type", list(TestType))
@pytest.mark.parametrize("tail_type", list(TailType))
@pytest.mark.parametrize("alpha", [0.01, 0.05, 0.1])
def test_result_invariants(test_type, tail_type, alpha):
    config = TestConfiguration(test_type, tail_type, alpha, hypothesized_mean=26)
    second = None if test_type is TestType.ONE_SAMPLE else GROUP_B
    result = run_t_test(GROUP_A, config, second)

    assert result.reject == (result.p_value < alpha)
    assert 0.0 <= result.p_value <= 1.0
    if tail_type is TailType.TWO_TAILED:
        assert len(result.critical_values) == 2
        low, high = result.critical_values
        assert high > 0 and low == -high
    else:
        assert len(result.critical_values) == 1


def test_p_value_equal_to_alpha_does_not_reject(monkeypatch):
    monkeypatch.setattr(engine, "t_cdf", lambda t, df: 0.05)
    config = TestConfiguration("one-sample", "left-tailed", 0.05)
    result = run_t_test(ONE_SAMPLE, config)
    assert result.p_value == 0.05
    assert result.reject is False
    assert "insufficient evidence" in result.conclusion


def test_summary_mode_matches_raw_mode():
    config = TestConfiguration("two-sample", "two-tailed", 0.05)
    raw = run_t_test(GROUP_A, config, GROUP_B)
    summary = run_t_test_from_summary(
        SummaryStatistics.from_sample(GROUP_A),
        config,
        SummaryStatistics.from_sample(GROUP_B),
    )
    assert np.isclose(summary.t_statistic, raw.t_statistic)
    assert np.isclose(summary.p_value, raw.p_value)
    assert summary.critical_values == raw.critical_values


def test_paired_summary_uses_difference_statistics():
    diffs = [b - a for a, b in zip(AFTER, BEFORE)]
    config = TestConfiguration("paired")
    raw = run_t_test(BEFORE, config, AFTER)
    summary = run_t_test_from_summary(SummaryStatistics.from_sample(diffs), config)
    assert np.isclose(summary.t_statistic, raw.t_statistic)


def test_paired_length_mismatch_raises():
    config = TestConfiguration("paired")
    with pytest.raises(ValidationError, match="equal length"):
        run_t_test([1, 2, 3, 4, 5], config, [1, 2, 3, 4])


def test_missing_second_sample_raises():
    with pytest.raises(ValidationError, match="second sample"):
        run_t_test(GROUP_A, TestConfiguration("two-sample"))
    with pytest.raises(ValidationError, match="second sample"):
        run_t_test(BEFORE, TestConfiguration("paired"))


def test_two_sample_summary_requires_second_summary():
    summary = SummaryStatistics(mean=22.0, standard_deviation=2.5, size=5)
    with pytest.raises(ValidationError, match="second sample statistics"):
        run_t_test_from_summary(summary, TestConfiguration("two-sample"))


def test_one_sample_rejects_second_input():
    with pytest.raises(ValidationError):
        run_t_test(ONE_SAMPLE, TestConfiguration("one-sample"), GROUP_B)
    summary = SummaryStatistics(mean=1.0, standard_deviation=1.0, size=4)
    with pytest.raises(ValidationError):
        run_t_test_from_summary(summary, TestConfiguration("one-sample"), summary)


def test_sample_too_short_raises():
    with pytest.raises(ValidationError, match="at least 2"):
        run_t_test([5.0], TestConfiguration("one-sample"))
    with pytest.raises(ValidationError, match="at least 2"):
        run_t_test([1.0, 2.0], TestConfiguration("two-sample"), [3.0])


def test_zero_variance_produces_infinite_statistic():
    result = run_t_test([5.0, 5.0, 5.0], TestConfiguration("one-sample", hypothesized_mean=4.0))
    assert result.t_statistic == math.inf
    assert result.p_value == 0.0
    assert result.reject is True


def test_zero_variance_and_zero_effect_produces_nan():
    result = run_t_test([5.0, 5.0, 5.0], TestConfiguration("one-sample", hypothesized_mean=5.0))
    assert math.isnan(result.t_statistic)
    assert math.isnan(result.p_value)
    assert result.reject is False


def test_result_is_immutable_and_serializable():
    result = run_t_test(ONE_SAMPLE, TestConfiguration("one-sample", hypothesized_mean=25))
    with pytest.raises(AttributeError):
        result.reject = True
    data = result.to_dict()
    assert data["critical_values"] == list(result.critical_values)
    assert data["hypotheses"] == {"null": "μ = 25", "alternative": "μ ≠ 25"}


def test_paired_summary_rejects_second_summary():
    summary = SummaryStatistics(mean=-1.75, standard_deviation=0.9574, size=4)
    with pytest.raises(ValidationError, match="differences for a paired test"):
        run_t_test_from_summary(summary, TestConfiguration("paired"), summary)


@pytest.mark.parametrize(
    "alpha, shown", [(0.005, "0.5%"), (0.025, "2.5%"), (0.05, "5%"), (0.1, "10%")]
)
def test_conclusion_shows_exact_significance_level(alpha, shown):
    result = run_t_test(ONE_SAMPLE, TestConfiguration("one-sample", significance_level=alpha))
    assert f"at the {shown} significance level" in result.conclusion
