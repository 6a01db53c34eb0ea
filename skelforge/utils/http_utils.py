"""HTTP helpers for fetching markup to build static skeletons from."""

import logging
import time
from typing import Dict, Optional

import requests

logger = logging.getLogger(__name__)


def get_with_retries(
    url: str,
    *,
    headers: Optional[Dict[str, str]] = None,
    timeout: int = 30,
    max_attempts: int = 3,
    backoff: float = 0.6,
) -> requests.Response:
    """Get with simple exponential backoff for transient failures."""

    attempt = 0
    while True:
        try:
            response = requests.get(url, headers=headers, timeout=timeout)
            response.raise_for_status()
            return response
        except requests.RequestException as exc:
            attempt += 1
            if attempt >= max_attempts:
                raise
            sleep_time = backoff * (2 ** (attempt - 1))
            logger.warning("GET %s failed (%s), retrying in %.1fs", url, exc, sleep_time)
            time.sleep(sleep_time)


def fetch_html(url: str, **kwargs) -> str:
    response = get_with_retries(url, **kwargs)
    return response.text
