"""Points, Jacobi matrices, triangle area and nearest-point search."""