"""
Capability string constants for pyalgebra.

This module is the SINGLE SOURCE OF TRUTH for capability strings.
Import from here, never use raw strings.

Usage:
    from pyalgebra.core.capabilities import CAPABILITY_FLOAT64_NATIVE

    if design.supports(CAPABILITY_FLOAT64_NATIVE):
        backend = LapackLUBackend()
"""

# Every element is a finite Float64, so a LAPACK kernel can factor the data
CAPABILITY_FLOAT64_NATIVE = 'float64_native'

# Elements are built-in numbers, known to multiply commutatively
CAPABILITY_COMMUTATIVE = 'commutative'

__all__ = [
    'CAPABILITY_FLOAT64_NATIVE',
    'CAPABILITY_COMMUTATIVE',
]
