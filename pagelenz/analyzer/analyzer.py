import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Union

from pagelenz.dataloader.dataloader import WorkloadLoader
from pagelenz.replacementpolicy.ReplacementPolicy import ReplacementPolicy
from pagelenz.replacementpolicy.registry import Policy, create_policy

logger = logging.getLogger("pagelenz.analysis")


@dataclass
class PolicyResult:
    """Hit statistics of one policy at one capacity."""

    policy: str
    capacity: int
    accesses: int
    hits: int

    @property
    def misses(self) -> int:
        return self.accesses - self.hits

    @property
    def hit_ratio(self) -> float:
        if self.accesses == 0:
            return 0.0
        return self.hits / self.accesses


class Analyzer:
    """
    Replays a workload through several replacement policies and tallies hits.

    Every (policy, capacity) pair is evaluated independently on the same
    workload.
    """

    def __init__(
        self,
        policies: Union[Iterable[Union[str, Policy]], Mapping[str, ReplacementPolicy]],
        dataloader: WorkloadLoader,
        capacities: Union[int, Iterable[int]],
        seed: Optional[int] = None,
    ):
        """
        Args:
            policies: Policy names/members, or a mapping of label to evaluator.
            dataloader (WorkloadLoader): Source of the page access stream.
            capacities: One capacity or several to sweep.
            seed: Seed handed to the RANDOM policy when built from a name.
        """
        if isinstance(policies, Mapping):
            self.policies: Dict[str, ReplacementPolicy] = dict(policies)
        else:
            self.policies = {}
            for p in policies:
                policy = Policy.from_name(p)
                self.policies[policy.value] = create_policy(policy, seed=seed)
        if isinstance(capacities, int):
            capacities = [capacities]
        self.capacities = list(capacities)
        self.dataloader = dataloader

    def run(self) -> List[PolicyResult]:
        """Execute the simulation and return one result per policy and capacity."""
        workload = self.dataloader.load()
        logger.info(
            f"Starting analysis on {len(workload)} accesses, "
            f"policies={list(self.policies)}, capacities={self.capacities}"
        )

        results = []
        for capacity in self.capacities:
            for name, policy in self.policies.items():
                hits = policy.evaluate(workload, capacity)
                result = PolicyResult(name, capacity, len(workload), hits)
                logger.info(
                    f"{name:>8} capacity={capacity}: hits={result.hits} "
                    f"misses={result.misses} ratio={result.hit_ratio:.3f}"
                )
                results.append(result)
        return results


def format_results(results: List[PolicyResult]) -> str:
    """Render results as a plain text table."""
    header = f"{'policy':<10}{'capacity':>10}{'accesses':>10}{'hits':>10}{'misses':>10}{'ratio':>9}"
    lines = [header, "-" * len(header)]
    for r in results:
        lines.append(
            f"{r.policy:<10}{r.capacity:>10}{r.accesses:>10}{r.hits:>10}"
            f"{r.misses:>10}{r.hit_ratio:>9.3f}"
        )
    return "\n".join(lines)
