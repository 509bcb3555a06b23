"""Value types passed into and returned from the t-test engine."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Sequence, Tuple

from .errors import ValidationError
from .stats.descriptive import mean, standard_deviation

DEFAULT_SIGNIFICANCE_LEVEL = 0.05
MIN_SAMPLE_SIZE = 2


class TestType(str, Enum):
    """Supported t-test designs."""

    # Keeps pytest from collecting this enum as a test class.
    __test__ = False

    ONE_SAMPLE = "one-sample"
    TWO_SAMPLE = "two-sample"
    PAIRED = "paired"

    @classmethod
    def parse(cls, value: "TestType | str") -> "TestType":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            choices = ", ".join(member.value for member in cls)
            raise ValidationError(
                f"Unknown test type {value!r}; expected one of: {choices}."
            ) from exc


class TailType(str, Enum):
    """Direction of the alternative hypothesis."""

    TWO_TAILED = "two-tailed"
    LEFT_TAILED = "left-tailed"
    RIGHT_TAILED = "right-tailed"

    @classmethod
    def parse(cls, value: "TailType | str") -> "TailType":
        """Accept enum members, full names or the short forms ``two``/``left``/``right``."""
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        if not text.endswith("-tailed"):
            text = f"{text}-tailed"
        try:
            return cls(text)
        except ValueError as exc:
            choices = ", ".join(member.value for member in cls)
            raise ValidationError(
                f"Unknown tail type {value!r}; expected one of: {choices}."
            ) from exc


@dataclass(frozen=True)
class SummaryStatistics:
    """Mean, standard deviation and size standing in for a raw sample.

    Attributes:
        mean: Sample mean.
        standard_deviation: Sample standard deviation (``n - 1`` divisor).
            Zero is accepted and yields an infinite or undefined statistic.
        size: Number of observations, at least 2.
    """

    mean: float
    standard_deviation: float
    size: int

    def __post_init__(self) -> None:
        try:
            size = float(self.size)
            object.__setattr__(self, "mean", float(self.mean))
            object.__setattr__(self, "standard_deviation", float(self.standard_deviation))
        except (TypeError, ValueError) as exc:
            raise ValidationError("Summary statistics must be numbers.") from exc
        if isinstance(self.size, bool) or not size.is_integer():
            raise ValidationError(f"Sample size must be an integer, got {self.size!r}.")
        object.__setattr__(self, "size", int(size))

        if self.size < MIN_SAMPLE_SIZE:
            raise ValidationError(
                f"Sample size must be at least {MIN_SAMPLE_SIZE}, got {self.size}."
            )
        if not math.isfinite(self.mean):
            raise ValidationError(f"Sample mean must be finite, got {self.mean!r}.")
        sd = self.standard_deviation
        if not math.isfinite(sd) or sd < 0:
            raise ValidationError(
                f"Standard deviation must be finite and >= 0, got {sd!r}."
            )

    @classmethod
    def from_sample(cls, data: Sequence[float]) -> "SummaryStatistics":
        """Summarize a raw sample of at least two values."""
        sd = standard_deviation(data)
        return cls(mean=mean(data), standard_deviation=sd, size=len(data))


@dataclass(frozen=True)
class TestConfiguration:
    """Immutable parameters of one t-test invocation.

    Strings are accepted for ``test_type`` and ``tail_type`` and converted to
    the corresponding enum members.
    """

    __test__ = False

    test_type: TestType
    tail_type: TailType = TailType.TWO_TAILED
    significance_level: float = DEFAULT_SIGNIFICANCE_LEVEL
    hypothesized_mean: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "test_type", TestType.parse(self.test_type))
        object.__setattr__(self, "tail_type", TailType.parse(self.tail_type))

        try:
            alpha = float(self.significance_level)
            mu0 = float(self.hypothesized_mean)
        except (TypeError, ValueError) as exc:
            raise ValidationError("Significance level and hypothesized mean must be numbers.") from exc
        if not 0.0 < alpha < 1.0:
            raise ValidationError(f"Alpha must be between 0 and 1, got {alpha!r}.")
        if not math.isfinite(mu0):
            raise ValidationError(f"Hypothesized mean must be finite, got {mu0!r}.")
        object.__setattr__(self, "significance_level", alpha)
        object.__setattr__(self, "hypothesized_mean", mu0)


@dataclass(frozen=True)
class Hypotheses:
    null: str
    alternative: str


@dataclass(frozen=True)
class TTestResult:
    """Outcome of a t-test.

    For two-sample tests ``sample_mean`` is the difference of means,
    ``sample_standard_deviation`` the pooled SD and ``sample_size`` the
    combined size. For paired tests they describe the differences.
    """

    __test__ = False

    t_statistic: float
    degrees_of_freedom: float
    p_value: float
    critical_values: Tuple[float, ...]
    sample_mean: float
    sample_standard_deviation: float
    sample_size: int
    hypotheses: Hypotheses
    reject: bool
    conclusion: str
    interpretation: str

    def to_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["critical_values"] = list(self.critical_values)
        return out
