"""Finite element building blocks: geometry, element bases, integrals and debug helpers."""

__version__ = "0.1.0"