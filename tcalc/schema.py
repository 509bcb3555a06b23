"""Define standardized labels for result tables."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ResultColumns:
    """Container for standardized report labels.

    The report table is long-form: one row per quantity with a ``Quantity``
    label and a formatted ``Value``. The same labels are used by the text
    report and the CSV export.

    Attributes:
        quantity: Column holding the quantity label.
        value: Column holding the formatted value.
        t_statistic: Observed t-statistic. May be ``inf``/``nan`` when the
            standard error is zero; such values are written as text.
        p_value: Probability under H0 of a statistic at least as extreme as
            the one observed, for the chosen tail.
        critical_values: Rejection-region boundaries on the t scale; two
            comma-separated values for a two-tailed test.
    """

    quantity: str = "Quantity"
    value: str = "Value"
    test_type: str = "Test type"
    tail_type: str = "Tail"
    alpha: str = "Significance level (α)"
    null: str = "Null hypothesis (H₀)"
    alternative: str = "Alternative hypothesis (H₁)"
    t_statistic: str = "t-statistic"
    df: str = "Degrees of freedom"
    p_value: str = "p-value"
    critical_values: str = "Critical value(s)"
    sample_mean: str = "Sample mean"
    sample_sd: str = "Sample standard deviation"
    sample_size: str = "Sample size"
    decision: str = "Decision"
    conclusion: str = "Conclusion"
    interpretation: str = "Interpretation"


COLUMNS = ResultColumns()
