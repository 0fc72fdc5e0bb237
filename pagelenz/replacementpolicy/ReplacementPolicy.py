import logging
import numbers
import operator
from abc import ABC, abstractmethod
from typing import Iterator, List, Sequence

logger = logging.getLogger("pagelenz.replacementpolicy")


def check_capacity(capacity: int) -> int:
    """Return ``capacity`` as a plain int, rejecting non-integers and negatives.

    Any integral type is accepted (numpy integers included); bools are not.
    """
    if isinstance(capacity, bool) or not isinstance(capacity, numbers.Integral):
        raise TypeError(
            f"capacity must be an integer, got {type(capacity).__name__}"
        )
    if capacity < 0:
        raise ValueError(f"capacity must be non-negative, got {capacity}")
    return operator.index(capacity)


class ReplacementPolicy(ABC):
    """
    Abstract interface for page replacement policy evaluators.

    An evaluator replays a workload (ordered page ids, index = logical time)
    against a cache of ``capacity`` pages and reports which accesses hit.
    All resident-set state lives inside a single ``simulate`` call, so one
    instance can be shared between threads and reused across workloads.
    """

    name = "abstract"

    @abstractmethod
    def simulate(self, workload: Sequence[int], capacity: int) -> Iterator[bool]:
        """
        Replay the workload.

        Args:
            workload (Sequence[int]): Page accesses in temporal order.
            capacity (int): Maximum number of resident pages, already validated.

        Yields:
            bool: True if the access at that position was a hit.
        """
        pass

    def hits(self, workload: Sequence[int], capacity: int) -> List[bool]:
        """Return the hit/miss flag of every access."""
        capacity = check_capacity(capacity)
        return list(self.simulate(workload, capacity))

    def evaluate(self, workload: Sequence[int], capacity: int) -> int:
        """Return the number of accesses that found their page resident."""
        capacity = check_capacity(capacity)
        hit_count = sum(1 for hit in self.simulate(workload, capacity) if hit)
        logger.debug(
            f"{self.name}: {hit_count} hits over {len(workload)} accesses "
            f"(capacity={capacity})"
        )
        return hit_count

    def __repr__(self):
        return f"{type(self).__name__}()"
