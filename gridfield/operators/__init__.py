"""
Finite-difference operators for fields on regular grids.

Submodules
----------
differential  : gradient, divergence, laplacian (central differences)
interpolation : get_at (multilinear, clamped), sample_positions (batched)
advection     : advect (semi-Lagrangian backtrace)
sweep         : apply_operator / advect_field over every cell
"""

from gridfield.operators._registry import MethodRegistry
from gridfield.operators.differential import gradient, divergence, laplacian
from gridfield.operators.interpolation import get_at, sample_positions
from gridfield.operators.advection import advect, backtrace
from gridfield.operators.sweep import field_operators, apply_operator, advect_field

__all__ = [
    'MethodRegistry',
    'gradient', 'divergence', 'laplacian',
    'get_at', 'sample_positions',
    'advect', 'backtrace',
    'field_operators', 'apply_operator', 'advect_field',
]
