import logging
import math
from typing import Dict, Iterator, List, Sequence

from pagelenz.replacementpolicy.ReplacementPolicy import ReplacementPolicy

logger = logging.getLogger("pagelenz.replacementpolicy.optimal")

NEVER = math.inf


def next_use_indices(workload: Sequence[int]) -> List[float]:
    """
    For every position i, the index of the next access to workload[i]
    after i, or NEVER if the page is not accessed again.

    Built with a single backward pass over the workload.
    """
    next_use: List[float] = [NEVER] * len(workload)
    upcoming: Dict[int, int] = {}
    for i in range(len(workload) - 1, -1, -1):
        page = workload[i]
        next_use[i] = upcoming.get(page, NEVER)
        upcoming[page] = i
    return next_use


class OptimalReplacementPolicy(ReplacementPolicy):
    """
    Belady's optimal (MIN) replacement policy.

    On a miss with a full cache, evicts the resident page whose next access
    lies furthest in the future; pages never accessed again are evicted
    first. Among equally distant pages the lowest page id goes.
    """

    name = "optimal"

    def simulate(self, workload: Sequence[int], capacity: int) -> Iterator[bool]:
        next_use = next_use_indices(workload)
        # resident page -> index of its next access, refreshed on every access
        resident: Dict[int, float] = {}

        for i, page in enumerate(workload):
            if page in resident:
                resident[page] = next_use[i]
                yield True
                continue

            if capacity == 0:
                yield False
                continue

            if len(resident) >= capacity:
                victim = min(resident, key=lambda p: (-resident[p], p))
                logger.debug(
                    f"OPT evict {victim} (next use {resident[victim]}) at t={i}"
                )
                del resident[victim]

            resident[page] = next_use[i]
            yield False
