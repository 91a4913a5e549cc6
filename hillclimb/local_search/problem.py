from typing import Any, Protocol, Sequence, TypeVar


class SupportsGreaterThan(Protocol):
    """A score. The search only ever compares two scores with `>`"""

    def __gt__(self, other: Any) -> bool: ...


class LocalOptimizationProblem(Protocol):
    """
    Capabilities a problem state needs to take part in a local search.

    Any class with these two methods conforms, there is nothing to inherit from.
    States are treated as immutable values: the search holds, compares and
    replaces whole states but never changes one in place.
    """

    def successors(self) -> Sequence['LocalOptimizationProblem']:
        """
        Return the states reachable from this one in a single move.

        The sequence must be finite and may be empty, which marks a dead end.
        Must not mutate the receiver.
        """
        ...

    def evaluate(self) -> SupportsGreaterThan:
        """
        Score this state, higher is better.

        Must be deterministic: the search evaluates the same state more than once.
        """
        ...


T = TypeVar('T', bound=LocalOptimizationProblem)
