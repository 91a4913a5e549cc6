import numpy as np
from dataclasses import dataclass


@dataclass(frozen=True)
class NQueensBoard:
    """
    Complete-state N-Queens board with one queen per column.

    rows[c] is the row of the queen in column c. The score is the negated
    number of attacking queen pairs, so a solved board scores 0.
    """
    rows: tuple[int, ...]

    def __post_init__(self):
        # Accept any sequence but store a hashable tuple
        object.__setattr__(self, 'rows', tuple(int(r) for r in self.rows))
        n = len(self.rows)
        for column, row in enumerate(self.rows):
            if not 0 <= row < n:
                raise ValueError(f"Queen in column {column} is on row {row}, outside a {n}x{n} board")

    @property
    def n(self) -> int:
        return len(self.rows)

    def successors(self) -> list['NQueensBoard']:
        """Every board obtained by moving a single queen to another row in its column"""
        successors = []
        for column, current_row in enumerate(self.rows):
            for row in range(self.n):
                if row == current_row:
                    continue
                new_rows = list(self.rows)
                new_rows[column] = row
                successors.append(NQueensBoard(tuple(new_rows)))
        return successors

    def attacking_pairs(self) -> int:
        """Number of unordered queen pairs sharing a row or a diagonal"""
        rows = np.array(self.rows)
        columns = np.arange(self.n)

        row_distance = np.abs(rows[:, None] - rows[None, :])
        column_distance = np.abs(columns[:, None] - columns[None, :])
        conflicts = (row_distance == 0) | (row_distance == column_distance)

        # Upper triangle only, so each pair counts once and a queen never attacks itself
        return int(np.triu(conflicts, k=1).sum())

    def evaluate(self) -> int:
        return -self.attacking_pairs()

    def is_solution(self) -> bool:
        return self.attacking_pairs() == 0

    def __str__(self):
        lines = []
        border = "+" + "+".join(["---"] * self.n) + "+"
        lines.append(border)
        for row in range(self.n):
            cells = [" Q " if self.rows[column] == row else "   " for column in range(self.n)]
            lines.append("|" + "|".join(cells) + "|")
            lines.append(border)
        return "\n".join(lines)
