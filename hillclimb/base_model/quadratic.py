from dataclasses import dataclass


@dataclass(frozen=True)
class Quadratic:
    """Integer state on the downward parabola -x(x-2)+1, which peaks at x=1 with score 2"""
    x: int

    def successors(self) -> list['Quadratic']:
        return [Quadratic(self.x - 1), Quadratic(self.x + 1)]

    def evaluate(self) -> int:
        return -self.x * (self.x - 2) + 1
