import logging
from pathlib import Path
from typing import List, Union

from pagelenz.dataloader.dataloader import WorkloadLoader

logger = logging.getLogger("pagelenz.dataloader.impl")


def _parse_page(token: str) -> int:
    if token.lower().startswith("0x"):
        return int(token, 16)
    return int(token)


class TraceFileLoader(WorkloadLoader):
    """
    Loads page ids from a text trace.

    Ids may be separated by whitespace or commas, one or many per line.
    Anything after a ``#`` is a comment.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.data: List[int] = []

    def load(self) -> List[int]:
        if not self.path.exists():
            raise FileNotFoundError(f"Trace file not found: {self.path}")

        data = []
        with open(self.path, "r") as f:
            for lineno, line in enumerate(f, 1):
                line = line.split("#", 1)[0]
                for token in line.replace(",", " ").split():
                    try:
                        data.append(_parse_page(token))
                    except ValueError:
                        raise ValueError(
                            f"{self.path}:{lineno}: invalid page id {token!r}"
                        ) from None

        self.data = data
        logger.info(f"Loaded {len(data)} page ids from {self.path}")
        return self.data
