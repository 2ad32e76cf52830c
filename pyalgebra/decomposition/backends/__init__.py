"""
LU backends.

Available backends:
    GenericLUBackend: Doolittle elimination over any FieldElement type
    LapackLUBackend: scipy/LAPACK getrf for finite Float64 matrices
"""

from pyalgebra.decomposition.backends.generic import GenericLUBackend
from pyalgebra.decomposition.backends.float64 import LapackLUBackend

__all__ = [
    "GenericLUBackend",
    "LapackLUBackend",
]
