# cfdlab

Building blocks for finite element solvers, written in pure Python with no
runtime dependencies: points and vectors, Jacobi matrices, element geometries,
basis functions on segments, triangles and quadrangles, element integrals
computed by quadrature, and a few debugging helpers.

## What is inside

- `cfdlab.core`: `ping()`, which returns 1.
- `cfdlab.geom.point`: `Point` (also available as `Vector`), a mutable 3D
  point with `x`, `y`, `z` attributes, indexing, iteration and arithmetic;
  the functions `dot_product`, `cross_product`, `cross_product_2d`,
  `vector_abs` and `vector_meas` (squared length).
- `cfdlab.geom.jacobi`: the `JacobiMatrix` dataclass (identity by default,
  with its determinant in `modj`), `fill_jacobi_modj` / `_1d` / `_2d`, and
  `gradient_to_parametric` / `gradient_to_physical` with their `_1d` and
  `_2d` variants.
- `cfdlab.geom.simplex`: `triangle_area`, the signed area in the xy plane.
- `cfdlab.geom.searcher`: `PointSearcher(points=None, dim=3)` with
  `add_points` and `nearest(p, n)`, which returns indices nearest first.
  Only the first `dim` coordinates count; each `add_points` call numbers its
  points from zero.
- `cfdlab.fem.element`: the interfaces `IElementGeometry`, `IElementBasis`
  and `IElementIntegrals`, the `BasisType` enum (`CUSTOM`, `NODAL`, `DX`,
  `DY`, `DZ`) and the frozen `FemElement` record (`geometry`, `basis`,
  optional `integrals`). Methods an implementation does not provide raise
  `NotImplementedError`.
- `cfdlab.fem.elem1d`:
  - `segment_linear`: `SegmentLinearGeometry`, `SegmentLinearBasis` and
    `SegmentLinearIntegrals` (exact mass, load and stiffness);
  - `segment_quadratic`: `SegmentQuadraticBasis`;
  - `segment_cubic`: `SegmentCubicBasis` and `SegmentHermiteBasis`.
- `cfdlab.fem.elem2d`:
  - `quadrangle_linear`: `QuadrangleLinearGeometry`, `QuadrangleLinearBasis`;
  - `quadrangle_quadratic`: `QuadrangleQuadraticBasis` (9 nodes) and
    `QuadrangleQuadratic8Basis` (8 nodes);
  - `triangle_linear`: `TriangleLinearGeometry`, `TriangleLinearBasis` and
    `TriangleLinearIntegrals` (exact mass, load and stiffness);
  - `triangle_quadratic`: `TriangleQuadraticBasis`;
  - `triangle_cubic`: `TriangleCubicBasis` (10 nodes), `TriangleCubic9Basis`,
    `TriangleCubicNo11Basis` (gradients only; `value` returns an empty list)
    and `TriangleHermiteBasis`.
- `cfdlab.fem.numeric_integrals`: `NumericElementIntegrals(quad, geom, basis)`,
  which computes mass, load, stiffness, transport, divergence, `dx`/`dy`/`dz`
  and SUPG matrices by quadrature. `stiff_matrix_stab_supg` returns a zero
  matrix.
- `cfdlab.fem.sorted_cell_info`: `PolygonElementInfo(grid, icell)`, which
  orders the faces of a 2D polygon cell along its points and records which
  faces run backwards. It raises `ValueError` if a face is not a segment or
  the faces do not close the contour.
- `cfdlab.debug.tictoc`: the `TicToc` timer and the global named timers
  `tic`, `tic1`, `toc`, `report` and `fin_report`. Remaining timers are
  reported when the interpreter exits.
- `cfdlab.debug.printer`: `print_matrix`, `print_row`, `print_vector` and
  `print_feat`, which print to standard output.

Local matrices are returned as flat lists in row-major order.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from cfdlab.geom.point import Point
from cfdlab.fem.elem2d.triangle_linear import (
    TriangleLinearGeometry,
    TriangleLinearBasis,
    TriangleLinearIntegrals,
)

geom = TriangleLinearGeometry(Point(0, 0), Point(1, 0), Point(0, 1))
basis = TriangleLinearBasis()
integrals = TriangleLinearIntegrals(geom.jacobi(Point(0, 0)))

print(basis.value(Point(0.25, 0.25)))   # [0.5, 0.25, 0.25]
print(integrals.mass_matrix())          # 3x3 matrix, flattened row by row
print(integrals.stiff_matrix())
```

## Integrals by quadrature

`NumericElementIntegrals` takes any object with `size()`, `points()` and
`integrate(values)`, where `values` holds one list per quadrature point:

```python
from cfdlab.fem.numeric_integrals import NumericElementIntegrals


class Rule:
    def __init__(self, points, weights):
        self._points = points
        self._weights = weights

    def size(self):
        return len(self._points)

    def points(self):
        return self._points

    def integrate(self, values):
        return [sum(w * v for w, v in zip(self._weights, column)) for column in zip(*values)]


centroid = Rule([Point(1 / 3, 1 / 3)], [0.5])
numeric = NumericElementIntegrals(centroid, geom, basis)
print(numeric.load_vector())   # about [1/6, 1/6, 1/6]
```

## Timing code

```python
from cfdlab.debug import tictoc

tictoc.tic("assembly")
# ... work ...
tictoc.toc("assembly")
tictoc.fin_report()
```

## What the package does not do

It has no grids or mesh readers, no sparse matrix types or linear solvers,
no quadrature rules of its own, no global assembly and no VTK output.
`PolygonElementInfo` and the `printer` functions work with any object that
has the few methods they call, and `NumericElementIntegrals` needs a
quadrature rule supplied by the caller. There is no command-line program.