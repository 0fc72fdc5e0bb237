import logging
from typing import Dict, Iterator, Sequence

from pagelenz.replacementpolicy.ReplacementPolicy import ReplacementPolicy

logger = logging.getLogger("pagelenz.replacementpolicy.lru")


class LruReplacementPolicy(ReplacementPolicy):
    """
    Least-Recently-Used replacement policy.

    Keeps the logical time of each resident page's last access and, when an
    insertion overflows the cache, drops the page with the oldest time.
    """

    name = "lru"

    def simulate(self, workload: Sequence[int], capacity: int) -> Iterator[bool]:
        last_access: Dict[int, int] = {}

        for time, page in enumerate(workload):
            if page in last_access:
                last_access[page] = time
                yield True
                continue

            last_access[page] = time
            # Only ever loops once while the size invariant holds
            while len(last_access) > capacity:
                # Timestamps are unique, min() scans in insertion order
                victim = min(last_access, key=last_access.__getitem__)
                logger.debug(
                    f"LRU evict {victim} (last used t={last_access[victim]}) at t={time}"
                )
                del last_access[victim]
            yield False
