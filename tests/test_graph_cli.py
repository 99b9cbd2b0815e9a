import io
from unittest import mock

import pytest

from labstructs.graph import InvalidVertexPairError, min_disconnecting_cut, to_dot
from labstructs.graph_cli import (
    EINVALIDINTEGER,
    EINVALIDRANGE,
    EINVALIDVERTEXPAIR,
    EOK,
    InputRangeError,
    main,
    read_edges,
    read_int_in_range,
)


def test_read_int_in_range_accepts_value():
    assert read_int_in_range(iter(["5"]), 1, 10) == 5
    assert read_int_in_range(iter(["1"]), 1, 10) == 1


def test_read_int_in_range_rejects_out_of_range():
    with pytest.raises(InputRangeError) as info:
        read_int_in_range(iter(["11"]), 1, 10)
    assert info.value.value == 11


def test_read_int_in_range_rejects_non_integer():
    with pytest.raises(ValueError) as info:
        read_int_in_range(iter(["abc"]), 1, 10)
    assert not isinstance(info.value, InputRangeError)


def test_read_int_in_range_rejects_end_of_input():
    with pytest.raises(ValueError):
        read_int_in_range(iter([]), 1, 10)


def test_read_edges_builds_symmetric_matrix():
    matrix = read_edges(iter("1 2 2 3 0".split()), 3)
    assert matrix.edges() == [(0, 1), (1, 2)]
    assert matrix.matrix[1][0] == 1
    assert matrix.matrix[2][1] == 1


def test_read_edges_rejects_loop():
    with pytest.raises(InvalidVertexPairError):
        read_edges(iter("2 2 0".split()), 3)


def test_read_edges_rejects_vertex_out_of_range():
    with pytest.raises(InputRangeError):
        read_edges(iter("1 4 0".split()), 3)


def test_main_rejects_zero_vertices(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main([]) == EINVALIDRANGE
    assert "недопустимое" in capsys.readouterr().out


def test_main_rejects_non_integer(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("x\n"))
    assert main([]) == EINVALIDINTEGER


def test_main_rejects_loop(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1 1\n"))
    assert main([]) == EINVALIDVERTEXPAIR
    assert "Путь в себя невозможен!" in capsys.readouterr().out


def test_main_reports_impossible_cut(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n0\n"))
    assert main(["--repeat", "2"]) == EOK
    assert "Невозможно сделать граф несвязным!" in capsys.readouterr().out


def test_main_exports_cut(monkeypatch, tmp_path, capsys):
    monkeypatch.chdir(tmp_path)
    text = "3\n1 2\n2 3\n1 3\n0\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    with mock.patch("subprocess.run") as run:
        assert main(["--repeat", "1", "--viewer", ""]) == EOK
    assert run.call_args_list[0].args[0][0] == "dot"
    matrix = read_edges(iter("1 2 2 3 1 3 0".split()), 3)
    expected = to_dot(matrix, min_disconnecting_cut(matrix))
    written = (tmp_path / "graph.txt").read_text(encoding="utf-8")
    assert written == expected
    assert "[color=red" in written
    assert "Удаленные рёбра" in capsys.readouterr().out