import json

import pytest

import solve_matrix

FAST_ARGS = ["--initial-temperature", "100", "--cooling-rate", "0.8", "--iterations", "50", "--seed", "1"]


@pytest.fixture
def matrix_file(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text("0,1,2\n1,0,3\n2,3,0\n", encoding="utf-8")
    return path


def test_prints_route_and_length(matrix_file, capsys):
    assert solve_matrix.main([str(matrix_file), *FAST_ARGS]) == 0
    out = capsys.readouterr().out
    assert "Shortest route: " in out
    assert "Route length: 6.0" in out


def test_json_output(matrix_file, capsys):
    assert solve_matrix.main([str(matrix_file), *FAST_ARGS, "--json", "--chains", "2"]) == 0
    record = json.loads(capsys.readouterr().out)
    assert sorted(record["path"]) == [0, 1, 2]
    assert record["cost"] == 6.0
    assert record["num_cities"] == 3
    assert record["chains"] == 2


def test_malformed_matrix_exit_code(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("0,1\n1\n", encoding="utf-8")
    assert solve_matrix.main([str(path), *FAST_ARGS]) == 2
    assert "Row 2" in capsys.readouterr().err


def test_missing_file(tmp_path):
    with pytest.raises(SystemExit):
        solve_matrix.main([str(tmp_path / "absent.txt")])


def test_invalid_schedule_exit_code(matrix_file, capsys):
    assert solve_matrix.main([str(matrix_file), "--cooling-rate", "1.5"]) == 2
    assert "cooling_rate" in capsys.readouterr().err


@pytest.mark.parametrize("chains", ["0", "-2"])
def test_invalid_chains_exit_code(matrix_file, capsys, chains):
    assert solve_matrix.main([str(matrix_file), *FAST_ARGS, "--chains", chains]) == 2
    assert "--chains" in capsys.readouterr().err


def test_infinite_length_is_written_as_null(tmp_path, capsys):
    path = tmp_path / "forbidden.txt"
    path.write_text("0,inf,inf\ninf,0,inf\ninf,inf,0\n", encoding="utf-8")
    assert solve_matrix.main([str(path), *FAST_ARGS, "--json"]) == 0
    out = capsys.readouterr().out

    def reject_constant(token):
        raise ValueError(f"non-standard JSON constant {token}")

    record = json.loads(out, parse_constant=reject_constant)
    assert record["cost"] is None
    assert record["path"] == [0, 1, 2]


def test_time_limit_reports_early_stop(matrix_file, capsys):
    assert solve_matrix.main([str(matrix_file), *FAST_ARGS, "--time-limit", "0"]) == 0
    out = capsys.readouterr().out
    assert "Route length: 6.0" in out
    assert "Run ended early (timeout)" in out
