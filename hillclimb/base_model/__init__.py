"""
Example problem states implementing the local search contract.
"""

from hillclimb.base_model.quadratic import Quadratic
from hillclimb.base_model.n_queens import NQueensBoard

__all__ = [
    'Quadratic',
    'NQueensBoard',
]
