from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Any, Iterable, List, Optional

import requests

from .config import BUNDLED_SEED, DEFAULT_HTTP_TIMEOUT_S
from .heap import PriorityHeap
from .models import Entry
from .parsing import entry_from_mapping

logger = logging.getLogger(__name__)

_RETRY_STATUSES = (429, 500, 502, 503, 504)


def entries_from_json(data: Any) -> List[Entry]:
    """Accept either a list of records or ``{"players": [...]}``."""
    records = data.get("players") if isinstance(data, dict) else data
    if not isinstance(records, list):
        raise ValueError("Seed data must be a list of players or an object with a 'players' list")
    return [entry_from_mapping(r) for r in records]


def fetch_seed_json(
    url: str,
    timeout_s: float = DEFAULT_HTTP_TIMEOUT_S,
    retries: int = 3,
    backoff_s: float = 0.6,
) -> Any:
    """GET seed JSON, retrying transport errors and 429/5xx only.

    Other 4xx responses raise ``requests.HTTPError`` on the first attempt.
    """
    last_err: Optional[Exception] = None
    for attempt in range(retries):
        try:
            resp = requests.get(url, timeout=timeout_s, headers={"accept": "application/json"})
        except requests.RequestException as exc:
            last_err = exc
            logger.warning(f"Seed fetch attempt {attempt + 1} failed: {exc}")
        else:
            if resp.status_code not in _RETRY_STATUSES:
                resp.raise_for_status()
                return resp.json()
            last_err = RuntimeError(f"HTTP {resp.status_code} from {url}")
            logger.warning(f"Seed fetch attempt {attempt + 1} got HTTP {resp.status_code}")

        if attempt < retries - 1:
            time.sleep(backoff_s * (attempt + 1))

    raise RuntimeError(f"Failed to fetch seed after {retries} attempts. Last error: {last_err}")


def load_seed(source: Optional[str] = None, timeout_s: float = DEFAULT_HTTP_TIMEOUT_S) -> List[Entry]:
    """Load seed entries from a path, an http(s) URL, or the bundled sample."""
    if source and source.startswith(("http://", "https://")):
        logger.info(f"Fetching seed players from {source}")
        data = fetch_seed_json(source, timeout_s=timeout_s)
    else:
        path = Path(source) if source else BUNDLED_SEED
        logger.info(f"Loading seed players from {path}")
        data = json.loads(path.read_text(encoding="utf-8"))

    entries = entries_from_json(data)
    logger.info(f"Loaded {len(entries)} seed players")
    return entries


def seed_heap(heap: PriorityHeap[Entry], entries: Iterable[Entry]) -> int:
    count = 0
    for entry in entries:
        heap.insert(entry)
        count += 1
    return count
