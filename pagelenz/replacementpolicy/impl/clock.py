import logging
from typing import Dict, Iterator, List, Sequence

from pagelenz.replacementpolicy.ReplacementPolicy import ReplacementPolicy

logger = logging.getLogger("pagelenz.replacementpolicy.clock")


class ClockEntry:
    """A resident page and its use bit."""

    __slots__ = ("page", "used")

    def __init__(self, page: int, used: bool = True):
        self.page = page
        self.used = used

    def __repr__(self):
        return f"ClockEntry(page={self.page}, used={self.used})"


class ClockReplacementPolicy(ReplacementPolicy):
    """
    Clock (second-chance) replacement policy.

    Resident pages sit on a circular buffer. A hit sets the page's use bit.
    On a miss with a full buffer the hand sweeps forward, clearing set use
    bits, and replaces the first page whose bit is already clear. The hand
    then rests on the slot after the victim.
    """

    name = "clock"

    def simulate(self, workload: Sequence[int], capacity: int) -> Iterator[bool]:
        entries: List[ClockEntry] = []
        slot_of: Dict[int, int] = {}  # page -> position on the clock
        hand = 0

        for page in workload:
            slot = slot_of.get(page)
            if slot is not None:
                entries[slot].used = True
                yield True
                continue

            if len(entries) < capacity:
                slot_of[page] = len(entries)
                entries.append(ClockEntry(page))
                yield False
                continue

            if capacity == 0:
                yield False
                continue

            # One full turn clears every bit, so the second visit to the
            # starting slot always finds it clear.
            while entries[hand].used:
                entries[hand].used = False
                hand = (hand + 1) % capacity

            victim = entries[hand]
            logger.debug(f"CLOCK evict {victim.page} from slot {hand} for {page}")
            del slot_of[victim.page]
            victim.page = page
            victim.used = True
            slot_of[page] = hand
            hand = (hand + 1) % capacity
            yield False
