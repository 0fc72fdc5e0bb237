import logging
from abc import ABC, abstractmethod
from typing import Iterator, List

logger = logging.getLogger("pagelenz.dataloader")


class WorkloadLoader(ABC):
    """Interface for loaders that supply page-access workloads."""

    data: List[int]

    @abstractmethod
    def load(self) -> List[int]:
        """Return the sequence of page ids, in access order."""
        pass

    def __len__(self):
        return len(self.data)

    def __getitem__(self, item) -> int:
        return self.data[item]

    def __iter__(self) -> Iterator[int]:
        return iter(self.data)
