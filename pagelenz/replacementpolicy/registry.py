"""
Policy registry: maps policy names to evaluator classes and exposes the
single ``evaluate(policy, workload, capacity)`` entry point used by drivers.
"""

import logging
from enum import Enum
from typing import Dict, Optional, Sequence, Type, Union

from pagelenz.replacementpolicy.ReplacementPolicy import ReplacementPolicy
from pagelenz.replacementpolicy.impl.clock import ClockReplacementPolicy
from pagelenz.replacementpolicy.impl.fifo import FIFOReplacementPolicy
from pagelenz.replacementpolicy.impl.lru import LruReplacementPolicy
from pagelenz.replacementpolicy.impl.optimal import OptimalReplacementPolicy
from pagelenz.replacementpolicy.impl.randomized import RandomReplacementPolicy

logger = logging.getLogger("pagelenz.replacementpolicy.registry")


class Policy(Enum):
    FIFO = "fifo"
    OPTIMAL = "optimal"
    RANDOM = "random"
    LRU = "lru"
    CLOCK = "clock"

    @classmethod
    def from_name(cls, name: Union[str, "Policy"]) -> "Policy":
        """Resolve a policy from its name or one of its aliases."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        key = ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            available = ", ".join(p.value for p in cls)
            raise ValueError(
                f"Unknown policy: {name}\nAvailable policies: {available}"
            ) from None


ALIASES = {
    "opt": "optimal",
    "belady": "optimal",
    "min": "optimal",
    "rand": "random",
    "second_chance": "clock",
    "second-chance": "clock",
}

POLICIES: Dict[Policy, Type[ReplacementPolicy]] = {
    Policy.FIFO: FIFOReplacementPolicy,
    Policy.OPTIMAL: OptimalReplacementPolicy,
    Policy.RANDOM: RandomReplacementPolicy,
    Policy.LRU: LruReplacementPolicy,
    Policy.CLOCK: ClockReplacementPolicy,
}


def create_policy(
    policy: Union[str, Policy], seed: Optional[int] = None
) -> ReplacementPolicy:
    """Instantiate the evaluator for ``policy``; ``seed`` only affects RANDOM."""
    policy = Policy.from_name(policy)
    policy_cls = POLICIES[policy]
    if policy is Policy.RANDOM:
        return policy_cls(seed=seed)
    return policy_cls()


def evaluate(
    policy: Union[str, Policy],
    workload: Sequence[int],
    capacity: int,
    seed: Optional[int] = None,
) -> int:
    """
    Count the hits ``policy`` achieves on ``workload`` with ``capacity`` pages.

    Args:
        policy: A Policy member or its (case-insensitive) name.
        workload: Page ids in access order. Not modified.
        capacity: Number of resident pages, zero meaning no cache.
        seed: Seed for the RANDOM policy, ignored by the others.

    Returns:
        int: Hit count in ``[0, len(workload)]``.

    Raises:
        ValueError: Unknown policy or negative capacity.
        TypeError: Non-integer capacity.
    """
    return create_policy(policy, seed=seed).evaluate(workload, capacity)
