import os

import pandas as pd

from tcalc.engine import run_t_test
from tcalc.models import TestConfiguration
from tcalc.output import REPORT_TXT_NAME, RESULT_CSV_NAME, save_report_text, save_result_to_csv


def _paired_result():
    config = TestConfiguration("paired", "left-tailed", 0.05)
    return run_t_test([10, 12, 9, 11], config, [12, 13, 10, 14]), config


def test_save_result_to_csv_creates_directory(tmp_path, capsys):
    result, config = _paired_result()
    outdir = tmp_path / "nested" / "out"
    path = save_result_to_csv(result, config, str(outdir))

    assert path == os.path.join(str(outdir), RESULT_CSV_NAME)
    assert os.path.exists(path)
    assert "Saved t-test result table" in capsys.readouterr().out

    table = pd.read_csv(path)
    values = dict(zip(table["Quantity"], table["Value"]))
    assert values["Test type"] == "paired"
    assert values["Tail"] == "left-tailed"
    assert str(values["Number of pairs"]) == "4"
    assert values["Alternative hypothesis (H₁)"] == "μd < 0"


def test_save_report_text(tmp_path):
    result, config = _paired_result()
    path = save_report_text(result, config, str(tmp_path))

    assert os.path.basename(path) == REPORT_TXT_NAME
    with open(path, encoding="utf-8") as fh:
        text = fh.read()
    assert text.startswith("T-Test Results")
    assert text.endswith("\n")
    assert result.interpretation in text
