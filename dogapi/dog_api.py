# dogapi/dog_api.py
import logging
from typing import List, Optional

import requests

from .fetcher import BreedFetcher, BreedNotFound
from .helpers import clean_breed, is_valid_breed, parse_breed_response, simple_retry

logger = logging.getLogger(__name__)

API_BASE_URL = "https://dog.ceo/api/breed"
TRANSIENT_ERRORS = (requests.ConnectionError, requests.Timeout)


class DogApiBreedFetcher(BreedFetcher):
    """Fetches sub-breeds from the dog.ceo API.

    Every failure (bad status, error payload, malformed JSON, network error
    after retries) is reported as BreedNotFound.
    """

    def __init__(self, base_url: str = API_BASE_URL, timeout: float = 10.0,
                 max_tries: int = 3, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self._get = simple_retry(TRANSIENT_ERRORS, max_tries=max_tries)(self._request)

    def close(self):
        self.session.close()

    def url_for(self, breed: str) -> str:
        return f"{self.base_url}/{clean_breed(breed)}/list"

    def _request(self, url: str) -> requests.Response:
        return self.session.get(url, timeout=self.timeout)

    def fetch_sub_breeds(self, breed: str) -> List[str]:
        if not is_valid_breed(breed):
            raise BreedNotFound(breed, "invalid breed name")

        url = self.url_for(breed)
        logger.info("GET %s", url)
        try:
            resp = self._get(url)
        except requests.RequestException as e:
            raise BreedNotFound(breed, f"network error: {e}") from e

        if not resp.ok:
            raise BreedNotFound(breed, f"API call failed with code {resp.status_code}")

        try:
            payload = resp.json()
        except ValueError as e:
            raise BreedNotFound(breed, f"invalid JSON: {e}") from e

        return parse_breed_response(breed, payload)
