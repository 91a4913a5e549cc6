from typing import Optional

from hillclimb.local_search.problem import T
from hillclimb.util.search_logger import HillClimbingLogger, DEAD_END, LOCAL_OPTIMUM, BUDGET_EXHAUSTED

DEFAULT_MAX_ITERATIONS = 1000


def _find_best_successor(successors: list):
    """
    Evaluate every successor once and return (best_score, best_successor).

    max() keeps the first of several equally scored successors, but callers
    should treat the choice among ties as unspecified.

    With partially ordered scores max() only moves on when a later score is
    strictly greater, so an earlier incomparable successor can be kept over a
    later one that beats the current state. The search then stops even though
    an improving successor exists.
    """
    scored = [(successor.evaluate(), successor) for successor in successors]
    return max(scored, key=lambda pair: pair[0])


def hill_climbing_search(max_iterations: int, initial_state: T,
                         logger: Optional[HillClimbingLogger] = None,
                         verbose: bool = False) -> T:
    """
    Greedy ascent: move to the best successor for as long as it strictly improves the score.

    Stops when the current state has no successors, when no successor scores
    strictly higher than the current state, or after max_iterations iterations.
    Exceptions raised by the state's successors() or evaluate() propagate unchanged.

    Args:
        max_iterations: Iteration budget, must be non-negative
        initial_state: Starting state, implementing successors() and evaluate()
        logger: Optional HillClimbingLogger that records every iteration
        verbose: Print progress to stdout

    Returns:
        The initial state or the last accepted successor

    Raises:
        ValueError: If max_iterations is negative
    """
    if max_iterations < 0:
        raise ValueError(f"max_iterations must be non-negative, got {max_iterations}")

    def log_output(message):
        if verbose:
            print(message)

    current = initial_state

    for iteration in range(max_iterations):
        successors = list(current.successors())

        if not successors:
            if logger is not None:
                logger.log_state(iteration, current.evaluate(), 0, None, False, event_type=DEAD_END)
            log_output(f"Iteration: {iteration + 1}/{max_iterations}, no successors. Stopping at dead end")
            return current

        best_score, best_successor = _find_best_successor(successors)
        current_score = current.evaluate()
        is_accepted = best_score > current_score

        if logger is not None:
            logger.log_state(iteration, current_score, len(successors), best_score, is_accepted,
                             event_type=None if is_accepted else LOCAL_OPTIMUM)

        if not is_accepted:
            log_output(f"Iteration: {iteration + 1}/{max_iterations}, Score: {current_score}, "
                       f"Best successor: {best_score}. Stopping at local optimum")
            return current

        log_output(f"Iteration: {iteration + 1}/{max_iterations}, Score: {current_score} -> {best_score}, "
                   f"Successors: {len(successors)}")
        current = best_successor

    if logger is not None:
        logger.termination = BUDGET_EXHAUSTED
    log_output(f"Iteration budget of {max_iterations} exhausted")

    return current


def run_local_search(initial_state: T, max_iterations: int = DEFAULT_MAX_ITERATIONS,
                     verbose: bool = False) -> tuple[T, HillClimbingLogger]:
    """Run hill climbing with default settings and return the result together with its trace."""
    logger = HillClimbingLogger()

    final_state = hill_climbing_search(max_iterations, initial_state, logger=logger, verbose=verbose)

    return final_state, logger
