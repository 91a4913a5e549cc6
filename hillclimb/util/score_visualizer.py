import numpy as np
import matplotlib.pyplot as plt

from hillclimb.util.search_logger import HillClimbingLogger


def plot_score_trajectory(logger: HillClimbingLogger, output_path: str = None):
    """
    Plot the score of the current state per iteration of a logged search.

    Accepted moves are drawn as a line, the final iteration is marked with
    the reason the search stopped. Scores must be numeric.

    Args:
        logger: HillClimbingLogger filled by hill_climbing_search
        output_path: Where to save the figure. Not saved if None

    Returns:
        The matplotlib Figure
    """
    scores = logger.scores()
    if scores.size == 0:
        raise ValueError("Cannot plot an empty score trajectory")

    iterations = np.arange(len(scores))

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(iterations, scores, 'b-o', linewidth=2, markersize=4, label='Current score')

    final_state = logger.states[-1]
    if final_state.best_successor_score is not None and not final_state.is_accepted:
        ax.scatter([iterations[-1]], [final_state.best_successor_score], color='red', s=60, zorder=3,
                   label='Best rejected successor')

    ax.set_xlabel('Iteration', fontsize=14)
    ax.set_ylabel('Score', fontsize=14)
    ax.set_title(f'Hill climbing ({logger.accepted_moves} accepted moves, {logger.termination})', fontsize=16)
    ax.legend(loc='lower right')
    ax.grid(True, alpha=0.3)
    fig.tight_layout()

    if output_path:
        fig.savefig(output_path)
        print(f"Score trajectory saved to {output_path}")

    plt.close(fig)
    return fig
