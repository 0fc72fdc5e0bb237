import logging
import random
from typing import Dict, Iterator, List, Optional, Sequence

from pagelenz.replacementpolicy.ReplacementPolicy import ReplacementPolicy

logger = logging.getLogger("pagelenz.replacementpolicy.random")


class RandomReplacementPolicy(ReplacementPolicy):
    """
    Random replacement policy.

    Evicts a uniformly chosen resident page. Every ``simulate`` call builds
    its own ``random.Random`` from ``seed``, so runs with the same seed
    replay exactly and concurrent calls never share generator state.
    ``seed=None`` seeds each call from OS entropy.
    """

    name = "random"

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed

    def simulate(self, workload: Sequence[int], capacity: int) -> Iterator[bool]:
        rng = random.Random(self.seed)
        pages: List[int] = []
        slot_of: Dict[int, int] = {}  # page -> index in pages

        for page in workload:
            if page in slot_of:
                yield True
                continue

            if len(pages) < capacity:
                slot_of[page] = len(pages)
                pages.append(page)
            elif capacity > 0:
                index = rng.randrange(capacity)
                victim = pages[index]
                logger.debug(f"RAND evict {victim} from slot {index} for {page}")
                del slot_of[victim]
                pages[index] = page
                slot_of[page] = index
            yield False

    def __repr__(self):
        return f"{type(self).__name__}(seed={self.seed!r})"
