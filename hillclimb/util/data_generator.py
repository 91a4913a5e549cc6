import random

from hillclimb.base_model.n_queens import NQueensBoard

DEFAULT_SEED = 13062025


def generate_random_board(n: int, seed: int = DEFAULT_SEED) -> NQueensBoard:
    """Generate a random complete N-Queens board, one queen per column on a random row."""
    if n < 1:
        raise ValueError(f"Board size must be at least 1, got {n}")

    gen = random.Random(seed)  # Fixed seed for reproducibility
    return NQueensBoard(tuple(gen.randrange(n) for _ in range(n)))


def generate_board_set(n: int, count: int, seed: int = DEFAULT_SEED) -> list[NQueensBoard]:
    """Generate count random boards of size n, each with its own seed derived from seed."""
    gen = random.Random(seed)
    return [generate_random_board(n, seed=gen.randrange(2**32)) for _ in range(count)]
