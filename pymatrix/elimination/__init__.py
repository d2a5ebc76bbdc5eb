"""
Gaussian elimination module.

Row-echelon reduction with partial pivoting and the quantities derived
from it.

Public API:
    gaussian_elimination(m)  - Echelon form, swap count, pivot columns
    determinant(m)           - Determinant of a square matrix
    slogdet(m)               - (sign, log|det|) of a square matrix
    rank(m)                  - Number of pivots
"""

from pymatrix.elimination.design import EliminationDesign
from pymatrix.elimination.solution import EliminationParams, EliminationSolution
from pymatrix.elimination.solvers import (
    gaussian_elimination,
    determinant,
    slogdet,
    rank,
)

__all__ = [
    "gaussian_elimination",
    "determinant",
    "slogdet",
    "rank",
    "EliminationDesign",
    "EliminationParams",
    "EliminationSolution",
]
