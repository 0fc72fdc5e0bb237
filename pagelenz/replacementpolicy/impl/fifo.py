import logging
from typing import Iterator, List, Optional, Sequence

from pagelenz.replacementpolicy.ReplacementPolicy import ReplacementPolicy

logger = logging.getLogger("pagelenz.replacementpolicy.fifo")


class FIFOReplacementPolicy(ReplacementPolicy):
    """
    FIFO (First-In-First-Out) replacement policy.
    Evicts the oldest inserted page regardless of access frequency.
    """

    name = "fifo"

    def simulate(self, workload: Sequence[int], capacity: int) -> Iterator[bool]:
        if capacity == 0:
            # No slots: nothing is ever resident and the head never moves
            for _ in workload:
                yield False
            return

        slots: List[Optional[int]] = [None] * capacity  # None marks an empty slot
        in_cache = set()  # quick membership lookup
        head = 0

        for page in workload:
            if page in in_cache:
                # FIFO ignores touches; order is defined only by insertions
                yield True
                continue

            victim = slots[head]
            if victim is not None:
                in_cache.discard(victim)
                logger.debug(f"FIFO evict {victim} from slot {head} for {page}")
            slots[head] = page
            in_cache.add(page)
            head = (head + 1) % capacity
            yield False
