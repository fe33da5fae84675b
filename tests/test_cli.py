import pytest

from tour_solver import cli


def test_solve_command_prints_best_route(capsys):
    exit_code = cli.main(["solve", "--point", "0", "0", "--point", "3", "4", "--quiet"])
    output = capsys.readouterr().out

    assert exit_code == 0
    assert "Best route: (0.0, 0.0) -> (3.0, 4.0)" in output
    assert "Distance: 10.0" in output
    assert "Orderings evaluated: 2" in output


def test_solve_command_uses_sample_points(capsys):
    exit_code = cli.main(["solve", "--samples", "4", "--quiet"])
    output = capsys.readouterr().out

    assert exit_code == 0
    assert "Distance: 8.0" in output
    assert "Orderings evaluated: 24" in output


def test_grid_command_reports_configurations(capsys):
    exit_code = cli.main(["grid", "--count", "1", "--lower", "0", "--upper", "0", "--quiet"])
    output = capsys.readouterr().out

    assert exit_code == 0
    assert "(0.0, 0.0) => 0.0" in output
    assert "Configurations solved: 1" in output


def test_invalid_grid_count_returns_error(capsys):
    exit_code = cli.main(["grid", "--count", "0", "--lower", "0", "--upper", "0"])

    captured = capsys.readouterr()
    assert exit_code == 2
    assert "error:" in captured.err
    assert "error:" not in captured.out


def test_zero_sample_count_is_rejected(capsys):
    exit_code = cli.main(["solve", "--samples", "0", "--quiet"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "error:" in captured.err
    assert "Orderings evaluated" not in captured.out


def test_grid_command_single_precision(capsys):
    exit_code = cli.main(["grid", "--count", "1", "--lower", "0", "--upper", "1.401298464324817e-45", "--single", "--quiet"])
    output = capsys.readouterr().out

    assert exit_code == 0
    assert "Configurations solved: 4" in output


def test_log_level_is_case_insensitive(capsys):
    exit_code = cli.main(["--log-level", "warning", "solve", "--point", "1", "1", "--quiet"])

    assert exit_code == 0
    assert "Distance: 0.0" in capsys.readouterr().out


def test_unknown_log_level_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--log-level", "verbose", "solve", "--point", "1", "1"])

    assert excinfo.value.code == 2
    assert "invalid choice" in capsys.readouterr().err
