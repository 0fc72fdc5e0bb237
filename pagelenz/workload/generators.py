"""
Synthetic page-access workloads.

Three shapes are provided:
 - nonlocal: page ids drawn uniformly from a wide range, no locality
 - 80-20: most accesses fall on a small hot set of pages
 - looping: an ascending run of page ids replayed several times

Each stochastic generator owns a ``numpy.random.Generator`` built from its
``seed`` argument, so the same seed always produces the same workload.
"""

import logging
from typing import Callable, Dict, List, Optional

import numpy as np

logger = logging.getLogger("pagelenz.workload")


def _check_length(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def nonlocal_workload(
    length: int = 10000, num_pages: int = 1000, seed: Optional[int] = None
) -> List[int]:
    """Uniformly random page ids in ``[0, num_pages)``."""
    _check_length("length", length)
    if num_pages <= 0:
        raise ValueError(f"num_pages must be positive, got {num_pages}")
    rng = np.random.default_rng(seed)
    workload = rng.integers(0, num_pages, size=length).tolist()
    logger.debug(f"nonlocal workload: {length} accesses over {num_pages} pages")
    return workload


def eighty_twenty_workload(
    length: int = 10000,
    num_pages: int = 100,
    hot_pages: int = 20,
    hot_fraction: float = 0.8,
    seed: Optional[int] = None,
) -> List[int]:
    """
    Hot-set workload following the 80-20 rule.

    With probability ``hot_fraction`` an access goes to one of the
    ``hot_pages`` pages ``[0, hot_pages)``; otherwise it goes to one of the
    cold pages ``[hot_pages, num_pages)``.
    """
    _check_length("length", length)
    if not 0 < hot_pages < num_pages:
        raise ValueError(
            f"hot_pages must lie strictly between 0 and num_pages ({num_pages}), "
            f"got {hot_pages}"
        )
    if not 0.0 <= hot_fraction <= 1.0:
        raise ValueError(f"hot_fraction must be within [0, 1], got {hot_fraction}")

    rng = np.random.default_rng(seed)
    is_hot = rng.random(length) < hot_fraction
    hot = rng.integers(0, hot_pages, size=length)
    cold = rng.integers(hot_pages, num_pages, size=length)
    workload = np.where(is_hot, hot, cold).tolist()
    logger.debug(
        f"80-20 workload: {length} accesses, {int(is_hot.sum())} to the hot set"
    )
    return workload


def looping_workload(
    loop_length: int = 50, repeats: int = 2, seed: Optional[int] = None
) -> List[int]:
    """Pages ``0..loop_length-1`` accessed in order, ``repeats`` times over.

    ``seed`` is accepted for a uniform generator signature and ignored.
    """
    _check_length("loop_length", loop_length)
    _check_length("repeats", repeats)
    return list(range(loop_length)) * repeats


WORKLOADS: Dict[str, Callable[..., List[int]]] = {
    "nonlocal": nonlocal_workload,
    "80-20": eighty_twenty_workload,
    "looping": looping_workload,
}

ALIASES = {
    "random": "nonlocal",
    "80_20": "80-20",
    "eighty_twenty": "80-20",
    "hotset": "80-20",
    "loop": "looping",
    "scan": "looping",
}


def generate_workload(name: str, **kwargs) -> List[int]:
    """Build a workload by shape name, forwarding ``kwargs`` to its generator."""
    key = ALIASES.get(name.lower(), name.lower())
    if key not in WORKLOADS:
        available = ", ".join(sorted(WORKLOADS))
        raise ValueError(f"Unknown workload: {name}\nAvailable workloads: {available}")
    logger.info(f"Generating {key} workload with {kwargs}")
    return WORKLOADS[key](**kwargs)
