"""Command-line entry point: run a t-test and export its report and figure."""

from __future__ import annotations

import argparse
import logging
import sys
import time

from .data_processing import load_samples_csv, parse_sample_text
from .engine import run_t_test, run_t_test_from_summary
from .errors import TTestError, ValidationError
from .models import (
    DEFAULT_SIGNIFICANCE_LEVEL,
    SummaryStatistics,
    TailType,
    TestConfiguration,
    TestType,
)
from .output import save_report_text, save_result_to_csv
from .reporting import format_report

DEFAULT_OUTPUT_DIR = "output"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure root logging to stdout and, optionally, a file."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w"))
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build command-line parser for module execution."""
    parser = argparse.ArgumentParser(
        description="Student t-test calculator (one-sample, two-sample pooled, paired)."
    )
    parser.add_argument(
        "--test-type",
        default=TestType.ONE_SAMPLE.value,
        choices=[t.value for t in TestType],
        help="Test design (default: one-sample).",
    )
    parser.add_argument(
        "--tail",
        default=TailType.TWO_TAILED.value,
        help="two-tailed, left-tailed or right-tailed (short forms two/left/right accepted).",
    )
    parser.add_argument(
        "--alpha",
        type=float,
        default=DEFAULT_SIGNIFICANCE_LEVEL,
        help=f"Significance level (default: {DEFAULT_SIGNIFICANCE_LEVEL}).",
    )
    parser.add_argument(
        "--mu0",
        type=float,
        default=0.0,
        help="Hypothesized mean for the one-sample test (default: 0).",
    )

    raw = parser.add_argument_group("raw samples")
    raw.add_argument("--sample", help='Comma-separated values, e.g. "23, 25, 27".')
    raw.add_argument("--sample2", help="Second sample (two-sample) or after values (paired).")
    raw.add_argument("--csv", help="Read samples from CSV columns instead of text.")
    raw.add_argument("--column", help="CSV column holding the first sample.")
    raw.add_argument("--column2", help="CSV column holding the second sample.")

    summary = parser.add_argument_group(
        "summary statistics", "Alternative to raw samples; cannot be combined with them."
    )
    summary.add_argument("--mean", type=float, help="Mean of sample 1 (or of the differences).")
    summary.add_argument("--sd", type=float, help="Standard deviation of sample 1.")
    summary.add_argument("--n", type=int, help="Size of sample 1.")
    summary.add_argument("--mean2", type=float, help="Mean of sample 2.")
    summary.add_argument("--sd2", type=float, help="Standard deviation of sample 2.")
    summary.add_argument("--n2", type=int, help="Size of sample 2.")

    parser.add_argument(
        "--outdir",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory (default: {DEFAULT_OUTPUT_DIR}).",
    )
    parser.add_argument("--no-plot", action="store_true", help="Skip the distribution figure.")
    parser.add_argument("--no-export", action="store_true", help="Skip CSV/text export.")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO).")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file.")
    return parser


def _summary_from_args(args, second: bool = False) -> SummaryStatistics | None:
    suffix = "2" if second else ""
    values = [getattr(args, f"{name}{suffix}") for name in ("mean", "sd", "n")]
    if all(v is None for v in values):
        return None
    if any(v is None for v in values):
        label = "sample 2" if second else "sample 1"
        raise ValidationError(
            f"Summary statistics for {label} need --mean{suffix}, --sd{suffix} and --n{suffix}."
        )
    mean_value, sd_value, size = values
    return SummaryStatistics(mean=mean_value, standard_deviation=sd_value, size=size)


def _load_raw_samples(args, config: TestConfiguration):
    needs_second = config.test_type is not TestType.ONE_SAMPLE
    if args.csv:
        if not args.column:
            raise ValidationError("--csv requires --column.")
        columns = [args.column]
        if needs_second:
            if not args.column2:
                raise ValidationError(f"A {config.test_type.value} test requires --column2.")
            columns.append(args.column2)
        samples = load_samples_csv(
            args.csv, columns, paired=config.test_type is TestType.PAIRED
        )
        return samples[0], (samples[1] if needs_second else None)

    if args.sample is None:
        raise ValidationError("Provide --sample, --csv or summary statistics (--mean/--sd/--n).")
    sample = parse_sample_text(args.sample, "Sample 1")
    second = None
    if needs_second:
        if args.sample2 is None:
            raise ValidationError(f"A {config.test_type.value} test requires --sample2.")
        second = parse_sample_text(args.sample2, "Sample 2")
    return sample, second


def run(args) -> int:
    """Execute the pipeline for parsed arguments; raise ``TTestError`` on bad input."""
    start_time = time.time()
    config = TestConfiguration(
        test_type=args.test_type,
        tail_type=args.tail,
        significance_level=args.alpha,
        hypothesized_mean=args.mu0,
    )
    logger.info(
        "Configured %s %s test at alpha=%g",
        config.test_type.value,
        config.tail_type.value,
        config.significance_level,
    )

    summary = _summary_from_args(args)
    if summary is not None:
        if any(v is not None for v in (args.sample, args.sample2, args.csv)):
            raise ValidationError(
                "Give either raw samples (--sample/--csv) or summary statistics "
                "(--mean/--sd/--n), not both."
            )
        second_summary = _summary_from_args(args, second=True)
        logger.info("Using summary statistics input (n=%d)", summary.size)
        result = run_t_test_from_summary(summary, config, second_summary)
    else:
        sample, second = _load_raw_samples(args, config)
        logger.info(
            "Parsed raw samples: n1=%d%s",
            len(sample),
            f", n2={len(second)}" if second is not None else "",
        )
        result = run_t_test(sample, config, second)

    logger.info(
        "t=%.4f, df=%g, p=%.4g, reject=%s",
        result.t_statistic,
        result.degrees_of_freedom,
        result.p_value,
        result.reject,
    )
    print(format_report(result, config))

    if not args.no_export:
        step_start = time.time()
        csv_path = save_result_to_csv(result, config, args.outdir)
        txt_path = save_report_text(result, config, args.outdir)
        logger.info("Export completed in %.2f seconds", time.time() - step_start)
        logger.info("  - Result table: %s", csv_path)
        logger.info("  - Text report: %s", txt_path)

    if not args.no_plot:
        from .plotting import plot_t_distribution

        step_start = time.time()
        png_path = plot_t_distribution(result, config, output_dir=args.outdir)
        logger.info("Distribution figure generated in %.2f seconds", time.time() - step_start)
        logger.info("  - Distribution figure: %s", png_path)

    logger.info("Total execution time: %.2f seconds", time.time() - start_time)
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint; returns 2 when the input is rejected."""
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, args.log_file)
    try:
        return run(args)
    except TTestError as exc:
        logger.error("%s", exc)
        return 2

