import pytest

from cfdlab.debug.printer import print_feat, print_matrix, print_row, print_vector


class _Mat:
    def __init__(self, n, entries):
        self._n = n
        self._entries = entries

    def n_rows(self):
        return self._n

    def is_in_stencil(self, irow, icol):
        return (irow, icol) in self._entries

    def value(self, irow, icol):
        return self._entries[(irow, icol)]


MAT = _Mat(2, {(0, 0): 1.0, (0, 1): 2.5, (1, 1): -3.0})


def test_print_matrix(capsys):
    print_matrix(MAT)
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "-- SIZE = 2x2"
    assert lines[1].split() == ["1", "2.5"]
    assert lines[2].split() == ["*", "-3"]
    assert all(len(line) == 2 * 7 for line in lines[1:])


def test_print_row_only_stencil(capsys):
    print_row(1, MAT)
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "-- ROW = 1"
    assert len(lines) == 2
    assert lines[1].split() == ["[", "1]", "-3"]


def test_print_vector(capsys):
    print_vector([0.5, -2.0, 3.25])
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["-- SIZE = 3", "0.5", "-2", "3.25"]


def test_print_feat(capsys):
    print_feat([-3.0, 1.0, 2.0])
    lines = capsys.readouterr().out.splitlines()
    values = dict(line.split(":", 1) for line in lines)
    values = {k: v.strip() for k, v in values.items()}
    assert values["SIZE"] == "3"
    assert values["MIN"] == "-3"
    assert values["MAX"] == "2"
    assert values["ABS_MIN"] == "1"
    assert values["SUM"] == "0"
    assert values["ABS_SUM"] == "6"


def test_print_feat_empty():
    with pytest.raises(ValueError):
        print_feat([])