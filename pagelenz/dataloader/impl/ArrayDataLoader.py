import logging
from typing import List, Sequence

from pagelenz.dataloader.dataloader import WorkloadLoader

logger = logging.getLogger("pagelenz.dataloader.impl")


class ArrayLoader(WorkloadLoader):
    """Loads page ids from a Python sequence."""

    def __init__(self, data: Sequence[int]):
        """
        Args:
            data (Sequence[int]): Pre-collected page id sequence.
        """
        self.data = list(data)

    def load(self) -> List[int]:
        """Return the array of page ids."""
        logger.debug(f"ArrayLoader loading {len(self.data)} page ids")
        return self.data
