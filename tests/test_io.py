import math

import pytest

from AnnealTSP import MalformedMatrixError, parse_distance_matrix, read_distance_matrix


def test_parses_rows_with_inf_and_blank_lines():
    matrix = parse_distance_matrix(["0, 1, inf", "", "1,0,3", "  INF ,3, 0  ", "   "])
    assert matrix.shape == (3, 3)
    assert matrix[0, 1] == 1.0
    assert matrix[0, 2] == math.inf
    assert matrix[2, 0] == math.inf
    assert matrix[1, 2] == 3.0


def test_reads_file(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text("0,2.5\n2.5,0\n", encoding="utf-8")
    matrix = read_distance_matrix(path)
    assert matrix.tolist() == [[0.0, 2.5], [2.5, 0.0]]


def test_ragged_row_names_row_number():
    with pytest.raises(MalformedMatrixError, match="Row 2"):
        parse_distance_matrix(["0,1,2", "1,0", "2,3,0"])


@pytest.mark.parametrize("token", ["abc", "-1", "nan", ""])
def test_invalid_weights_rejected(token):
    with pytest.raises(MalformedMatrixError, match="Row 1"):
        parse_distance_matrix([f"0,{token}", "1,0"])


def test_empty_input_rejected():
    with pytest.raises(MalformedMatrixError):
        parse_distance_matrix(["", "  "])
