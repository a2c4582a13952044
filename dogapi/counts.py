# dogapi/counts.py
import logging
from typing import Iterable

import pandas as pd

from .fetcher import BreedFetcher, BreedNotFound

logger = logging.getLogger(__name__)

# Reported for a breed whose lookup failed
NOT_FOUND_COUNT = 0

REPORT_COLUMNS = ["breed", "found", "sub_breed_count", "sub_breeds", "error"]

def number_of_sub_breeds(breed: str, fetcher: BreedFetcher, not_found: int = NOT_FOUND_COUNT) -> int:
    """Return how many sub-breeds `breed` has, or `not_found` if the lookup fails."""
    try:
        sub_breeds = fetcher.fetch_sub_breeds(breed)
    except BreedNotFound as e:
        logger.warning("%s, reporting %d", e, not_found)
        return not_found
    return len(sub_breeds)

def build_sub_breed_report(breeds: Iterable[str], fetcher: BreedFetcher, not_found: int = NOT_FOUND_COUNT) -> pd.DataFrame:
    rows = []
    for breed in breeds:
        result = fetcher.lookup(breed)
        if result.ok:
            rows.append((breed, True, len(result.sub_breeds), ",".join(result.sub_breeds), None))
        else:
            logger.warning("%s, reporting %d", result.error, not_found)
            rows.append((breed, False, not_found, "", result.error.reason))
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)
