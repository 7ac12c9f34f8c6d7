"""Debug printing of sparse matrices and dense vectors to standard output."""

from __future__ import annotations

from typing import Protocol, Sequence


class SparseMatrixLike(Protocol):
    def n_rows(self) -> int: ...

    def is_in_stencil(self, irow: int, icol: int) -> bool: ...

    def value(self, irow: int, icol: int) -> float: ...


def _fmt(v: float) -> str:
    return format(float(v), "g")


def print_matrix(mat: SparseMatrixLike) -> None:
    """Print a square sparse matrix; entries outside the stencil show as '*'."""
    n = mat.n_rows()
    print(f"-- SIZE = {n}x{n}")
    for irow in range(n):
        cells = (
            _fmt(mat.value(irow, icol)) if mat.is_in_stencil(irow, icol) else "*"
            for icol in range(n)
        )
        print("".join(f"{cell:>6} " for cell in cells))


def print_row(irow: int, mat: SparseMatrixLike) -> None:
    """Print the stencil entries of one matrix row."""
    print(f"-- ROW = {irow}")
    for icol in range(mat.n_rows()):
        if mat.is_in_stencil(irow, icol):
            print(f"   [{icol:>4}] {_fmt(mat.value(irow, icol))}")


def print_vector(vec: Sequence[float]) -> None:
    """Print a dense vector, one value per line."""
    print(f"-- SIZE = {len(vec)}")
    for v in vec:
        print(_fmt(v))


def print_feat(vec: Sequence[float]) -> None:
    """Print size, extrema and sums of a vector."""
    if not vec:
        raise ValueError("cannot describe an empty vector")
    abs_values = [abs(v) for v in vec]
    print(f"SIZE:    {len(vec)}")
    print(f"MIN:     {_fmt(min(vec))}")
    print(f"MAX:     {_fmt(max(vec))}")
    print(f"ABS_MIN: {_fmt(min(abs_values))}")
    print(f"SUM:     {_fmt(sum(vec))}")
    print(f"ABS_SUM: {_fmt(sum(abs_values))}")