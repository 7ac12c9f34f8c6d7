"""Finite element interfaces, elements, numeric integrals and polygon cell info."""