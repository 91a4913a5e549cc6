import numpy as np
from typing import Any, List, Optional
from dataclasses import dataclass, asdict
import json

DEAD_END = 'dead_end'
LOCAL_OPTIMUM = 'local_optimum'
BUDGET_EXHAUSTED = 'budget_exhausted'


def _restore_score(value):
    # JSON has no tuples, lexicographic scores come back as lists
    if isinstance(value, list):
        return tuple(_restore_score(v) for v in value)
    return value


@dataclass
class SearchState:
    """One iteration of a hill climbing search"""
    iteration: int
    score: Any  # score of the current state at the start of the iteration
    n_successors: int
    best_successor_score: Any
    is_accepted: bool
    event_type: Optional[str] = None  # 'dead_end' or 'local_optimum' on the final iteration


class HillClimbingLogger:
    """Logger for capturing search states during hill climbing"""

    def __init__(self):
        self.states: List[SearchState] = []
        self.termination: Optional[str] = None

    def log_state(self,
                  iteration: int,
                  score,
                  n_successors: int,
                  best_successor_score,
                  is_accepted: bool,
                  event_type: Optional[str] = None):
        """Log a search state. An event type marks the iteration the search stopped in"""
        self.states.append(SearchState(
            iteration=iteration,
            score=score,
            n_successors=n_successors,
            best_successor_score=best_successor_score,
            is_accepted=is_accepted,
            event_type=event_type
        ))

        if event_type is not None:
            self.termination = event_type

    @property
    def accepted_moves(self) -> int:
        return sum(1 for state in self.states if state.is_accepted)

    def scores(self) -> np.ndarray:
        """
        Score trajectory of the search: the score at the start of every logged
        iteration, followed by the score of the final accepted successor if the
        budget ran out.
        """
        trajectory = [state.score for state in self.states]
        if self.states and self.states[-1].is_accepted:
            trajectory.append(self.states[-1].best_successor_score)
        return np.array(trajectory)

    def create_visualization(self, output_path: str = None):
        """Plot the score trajectory, saving it to output_path if given"""
        from hillclimb.util.score_visualizer import plot_score_trajectory

        if not self.states:
            raise ValueError("No states logged")

        return plot_score_trajectory(self, output_path)

    def save_log(self, filepath: str):
        """
        Save the log data to a JSON file.

        Scores must be JSON serializable. Tuple scores are written as JSON
        arrays and turned back into tuples by load_log.
        """
        data = {
            'termination': self.termination,
            'states': [asdict(state) for state in self.states]
        }

        with open(filepath, 'w') as f:
            json.dump(data, f, indent=2)

    @staticmethod
    def load_log(filepath: str) -> 'HillClimbingLogger':
        """Load log data from a JSON file"""
        logger = HillClimbingLogger()

        with open(filepath, 'r') as f:
            data = json.load(f)

        logger.termination = data.get('termination')
        for item in data['states']:
            logger.states.append(SearchState(
                iteration=item['iteration'],
                score=_restore_score(item['score']),
                n_successors=item['n_successors'],
                best_successor_score=_restore_score(item['best_successor_score']),
                is_accepted=item['is_accepted'],
                event_type=item.get('event_type')
            ))

        return logger
