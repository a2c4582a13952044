# dogapi/fetcher.py
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional


class BreedNotFound(Exception):
    """Raised when a breed is unknown or its sub-breeds could not be determined."""

    def __init__(self, breed: str, reason: Optional[str] = None):
        self.breed = breed
        self.reason = reason
        msg = f"breed not found: {breed}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


@dataclass(frozen=True)
class FetchResult:
    breed: str
    sub_breeds: Optional[List[str]] = None
    error: Optional[BreedNotFound] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> List[str]:
        if self.error is not None:
            raise self.error
        return self.sub_breeds


class BreedFetcher(ABC):
    """Source of sub-breed lists for a given breed."""

    @abstractmethod
    def fetch_sub_breeds(self, breed: str) -> List[str]:
        """Return the sub-breeds of `breed`, or raise BreedNotFound."""

    def lookup(self, breed: str) -> FetchResult:
        try:
            return FetchResult(breed=breed, sub_breeds=self.fetch_sub_breeds(breed))
        except BreedNotFound as e:
            return FetchResult(breed=breed, error=e)

    def close(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


class StaticBreedFetcher(BreedFetcher):
    # Local lookup table, used for offline runs and tests
    def __init__(self, table: Dict[str, List[str]]):
        self.table = {k: list(v) for k, v in table.items()}

    def fetch_sub_breeds(self, breed: str) -> List[str]:
        if breed not in self.table:
            raise BreedNotFound(breed, "not in local table")
        return list(self.table[breed])
