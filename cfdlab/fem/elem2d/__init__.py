"""Triangle and quadrangle elements of linear, quadratic and cubic order."""