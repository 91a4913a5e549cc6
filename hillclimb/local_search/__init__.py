"""
Local search module.
Includes the problem state contract and hill climbing search.
"""

from hillclimb.local_search.problem import LocalOptimizationProblem, SupportsGreaterThan, T
from hillclimb.local_search.hill_climbing import hill_climbing_search, run_local_search, DEFAULT_MAX_ITERATIONS

__all__ = [
    'LocalOptimizationProblem',
    'SupportsGreaterThan',
    'T',
    'hill_climbing_search',
    'run_local_search',
    'DEFAULT_MAX_ITERATIONS',
]
