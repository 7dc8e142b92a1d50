import csv
import json

import pytest

from modfconform.cli import HarnessConfig, main, parse_config
from modfconform.numerics import BASE_EPSILON


def test_parse_config_defaults() -> None:
    assert parse_config([]) == HarnessConfig()
    config = parse_config(["--backend", "torch", "--epsilon", "1e-12", "--json"])
    assert config.backend == "torch"
    assert config.epsilon == 1e-12
    assert config.json


@pytest.mark.parametrize("backend", ["math", "torch"])
def test_main_passes_for_shipped_backends(backend, capsys) -> None:
    assert main(["--backend", backend]) == 0
    out = capsys.readouterr().out
    assert f"[{backend}] 33/33 comparisons passed" in out


def test_main_json_summary(capsys) -> None:
    assert main(["--json"]) == 0
    summary = json.loads(capsys.readouterr().out)
    assert summary["status"] == "pass"
    assert summary["epsilon"] == BASE_EPSILON
    assert summary["run"]["comparisons"] == 33.0
    assert summary["environment"]["terminated"] == 1.0


def test_main_fails_and_exports_with_impossible_epsilon(tmp_path, capsys) -> None:
    out_path = tmp_path / "failures.csv"
    status = main(["--epsilon", "1e-300", "--csv", str(out_path), "--verbose"])
    assert status == 1
    captured = capsys.readouterr()
    assert "FAIL: modf(" in captured.err
    assert "Conformance Failures" in captured.out
    with out_path.open("r", newline="") as handle:
        rows = list(csv.DictReader(handle))
    assert rows


@pytest.mark.parametrize("argv", [["--backend", "libm"], ["--epsilon", "-1"], ["--epsilon", "x"]])
def test_main_rejects_bad_arguments(argv) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2
