# dogapi/helpers.py
import re
import json
from pathlib import Path
from typing import Optional
import backoff

from .fetcher import BreedNotFound

BREED_RE = re.compile(r"^[a-z][a-z-]*$")

def clean_breed(breed: str) -> Optional[str]:
    if not breed or not isinstance(breed, str):
        return None
    return breed.strip().lower()

def is_valid_breed(breed: str) -> bool:
    cleaned = clean_breed(breed)
    if not cleaned:
        return False
    return BREED_RE.match(cleaned) is not None

def parse_breed_response(breed: str, payload) -> list:
    # dog.ceo shape: {"status": "success"|"error", "message": [...] or "text"}
    if not isinstance(payload, dict):
        raise BreedNotFound(breed, "unexpected response")
    status = payload.get("status")
    message = payload.get("message")
    if status == "error":
        raise BreedNotFound(breed, f"API message: {message}")
    if status == "success":
        if not isinstance(message, list) or not all(isinstance(m, str) for m in message):
            raise BreedNotFound(breed, "malformed sub-breed list")
        return list(message)
    raise BreedNotFound(breed, "unexpected response")

def load_json(path: Path) -> dict:
    with open(path) as f:
        return json.load(f)

# Simple retry wrapper using backoff
def simple_retry(exceptions=Exception, max_tries=3):
    def decorate(fn):
        @backoff.on_exception(backoff.expo, exceptions, max_tries=max_tries)
        def wrapped(*args, **kwargs):
            return fn(*args, **kwargs)
        return wrapped
    return decorate
