import json

import pytest

from arithmetic import Q
from rational_calc import main, run, load_result
from transcendental import sqrt


def test_run_uses_default_accuracy():
    result = run("exp", Q(0))
    assert result.accuracy == 100
    assert result.value == 1
    assert result.num_bits == 1 and result.den_bits == 1


def test_run_unknown_operation():
    with pytest.raises(ValueError):
        run("cbrt", Q(2))


def test_main_prints_result(capsys):
    assert main(["rational_calc.py", "sqrt", "2", "10"]) == 0
    out = capsys.readouterr().out
    assert "Computing sqrt(2)" in out
    assert "1.4142135623" in out


def test_main_saves_json(tmp_path):
    out_file = tmp_path / "sqrt2.json"
    assert main(["rational_calc.py", "sqrt", "2", "10", str(out_file)]) == 0

    with open(out_file) as f:
        summary = json.load(f)
    assert summary["op"] == "sqrt"
    assert summary["x"] == "2"
    assert summary["decimal"].startswith("1.4142135623")

    result = load_result(str(out_file))
    assert result.value == sqrt(Q(2), 10)
    assert result.accuracy == 10


@pytest.mark.parametrize("argv", [
    ["rational_calc.py"],
    ["rational_calc.py", "sqrt"],
    ["rational_calc.py", "cbrt", "2"],
    ["rational_calc.py", "sqrt", "abc"],
    ["rational_calc.py", "sqrt", "2", "ten"],
    ["rational_calc.py", "sqrt", "-4"],
    ["rational_calc.py", "ln", "0"],
    ["rational_calc.py", "sqrt", "2", "0"],
])
def test_main_errors_exit_1(argv, capsys):
    assert main(argv) == 1
    out = capsys.readouterr().out
    assert "Usage" in out or "Error" in out
