"""
Entrypoint for the sub-breed demo: builds a caching fetcher over the source named
in demo_config.json (local table from breeds_local.json, or the dog.ceo API),
prints the sub-breed count of each breed and writes outputs/sub_breed_counts.csv.

Usage: python -m dogapi.run_demo [breed ...]
"""
from pathlib import Path
import logging
import sys

from dogapi.cache import CachingBreedFetcher
from dogapi.counts import NOT_FOUND_COUNT, build_sub_breed_report, number_of_sub_breeds
from dogapi.dog_api import API_BASE_URL, DogApiBreedFetcher
from dogapi.fetcher import StaticBreedFetcher
from dogapi.helpers import load_json

ROOT = Path(__file__).resolve().parents[1]
LOG = ROOT / "logs" / "dogapi.log"
OUT = ROOT / "outputs"

logger = logging.getLogger(__name__)


def build_fetcher(config: dict, root: Path = ROOT) -> CachingBreedFetcher:
    source = config.get("source", "local")
    if source == "local":
        inner = StaticBreedFetcher(load_json(root / config.get("local_table", "breeds_local.json")))
    elif source == "api":
        inner = DogApiBreedFetcher(
            base_url=config.get("base_url", API_BASE_URL),
            timeout=config.get("timeout", 10.0),
            max_tries=config.get("max_tries", 3),
        )
    else:
        raise ValueError(f"unknown source in config: {source!r}")
    return CachingBreedFetcher(inner)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    LOG.parent.mkdir(exist_ok=True)
    OUT.mkdir(exist_ok=True)
    logging.basicConfig(level=logging.INFO, filename=LOG, filemode="w",
                        format="%(asctime)s %(levelname)s %(message)s")
    print("Logging to", LOG)

    config = load_json(ROOT / "demo_config.json")
    not_found = config.get("not_found_count", NOT_FOUND_COUNT)
    breeds = argv or config.get("breeds", [])
    with build_fetcher(config, ROOT) as fetcher:
        for breed in breeds:
            result = number_of_sub_breeds(breed, fetcher, not_found=not_found)
            print(f"{breed} has {result} sub breeds")

        # second pass is served from the cache for every breed that was found
        report = build_sub_breed_report(breeds, fetcher, not_found=not_found)
        calls_made = fetcher.calls_made

    report.to_csv(OUT / "sub_breed_counts.csv", index=False)
    print(f"Wrote {OUT / 'sub_breed_counts.csv'}")

    logger.info("demo complete: %d breeds, %d underlying calls", len(breeds), calls_made)
    print("Underlying calls made:", calls_made)


if __name__ == "__main__":
    main()
