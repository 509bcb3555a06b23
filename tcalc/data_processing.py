"""
Turns user-entered text and CSV columns into numeric samples.
"""

# Free-text entry mirrors the calculator form: values separated by commas
# (whitespace and semicolons are accepted too); tokens that are not numbers
# are dropped, and at least two values must remain.

import math
import re

import pandas as pd

from .errors import ValidationError
from .models import MIN_SAMPLE_SIZE

_SEPARATORS = re.compile(r"[,;\s]+")


def parse_number(text, label="Value"):
    """Parse a single finite number typed by the user.

    Args:
        text: String (or number) to parse.
        label: Name used in the error message.

    Returns:
        float: The parsed value.

    Raises:
        ValidationError: If ``text`` is not a finite number.
    """
    try:
        value = float(str(text).strip())
    except ValueError as exc:
        raise ValidationError(f"Invalid {label.lower()}: {text!r}") from exc
    if not math.isfinite(value):
        raise ValidationError(f"Invalid {label.lower()}: {text!r}")
    return value


def parse_sample_text(text, label="Sample"):
    """Parse a comma-separated list of numbers.

    Unparseable tokens are skipped, so ``"1, 2, x, 4"`` yields
    ``[1.0, 2.0, 4.0]``.

    Args:
        text: Raw text such as ``"23, 25, 27, 29, 31"``.
        label: Name used in the error message (for example ``"Sample 2"``).

    Returns:
        list[float]: Parsed values in input order.

    Raises:
        ValidationError: If fewer than two numbers remain.
    """
    values = []
    for token in _SEPARATORS.split(str(text or "").strip()):
        if not token:
            continue
        try:
            value = float(token)
        except ValueError:
            continue
        if math.isfinite(value):
            values.append(value)

    if len(values) < MIN_SAMPLE_SIZE:
        raise ValidationError(
            f"{label} must have at least {MIN_SAMPLE_SIZE} values"
        )
    return values


def load_samples_csv(filepath, columns, paired=False):
    """Load one or more samples from named CSV columns.

    Each column is coerced to numeric and missing or non-numeric cells are
    dropped. By default this happens per column, so samples may differ in
    length; with ``paired=True`` a row is dropped from every sample when any
    of its cells is missing, keeping observations aligned.

    Args:
        filepath (str): Path to the CSV file.
        columns (Sequence[str]): Column names to read.
        paired (bool): Drop incomplete rows jointly.

    Returns:
        list[list[float]]: One sample per requested column.

    Raises:
        ValidationError: If a column is repeated, missing or holds fewer than
            two numbers.
    """
    columns = list(columns)
    repeated = [column for i, column in enumerate(columns) if column in columns[:i]]
    if repeated:
        raise ValidationError(
            f"Column {repeated[0]!r} was requested more than once; "
            "each sample needs its own column"
        )

    df = pd.read_csv(filepath)
    missing = [column for column in columns if column not in df.columns]
    if missing:
        available = ", ".join(map(str, df.columns))
        raise ValidationError(
            f"Column {missing[0]!r} not found in {filepath}; available: {available}"
        )

    numeric = df[columns].apply(pd.to_numeric, errors="coerce")
    if paired:
        numeric = numeric.dropna(how="any")

    samples = []
    for column in columns:
        values = numeric[column].dropna()
        if len(values) < MIN_SAMPLE_SIZE:
            raise ValidationError(
                f"Column {column!r} must have at least {MIN_SAMPLE_SIZE} numeric values"
            )
        samples.append(values.astype(float).tolist())
    return samples
