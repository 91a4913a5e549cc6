"""
Generic greedy local search.
Problem states plug in by implementing successors() and evaluate().
"""

from hillclimb.local_search import LocalOptimizationProblem, hill_climbing_search, run_local_search

__all__ = [
    'LocalOptimizationProblem',
    'hill_climbing_search',
    'run_local_search',
]
