"""GitHub API utilities."""

from __future__ import annotations

import logging
import time
from typing import Optional

import requests

DEFAULT_BASE_URL = "https://api.github.com"
ISSUE_ENDPOINT = "/repos/{repository}/issues/{number}"
DEFAULT_TIMEOUT = 5
MAX_RETRIES = 3

logger = logging.getLogger(__name__)


class GitHubAPIError(RuntimeError):
    """Represents a non-success response from the GitHub API."""


class GitHubClient:
    """Thin client for the issue lookups used to decorate items."""

    def __init__(
        self,
        token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = "gh-shorthand/0.1",
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"token {token}",
                "Accept": "application/vnd.github.v3+json",
                "User-Agent": user_agent,
            }
        )

    def issue_title(self, repository: str, number: str | int) -> Optional[str]:
        """Return the title of an issue or pull request, or None if it does not exist."""
        endpoint = ISSUE_ENDPOINT.format(repository=repository, number=number)
        payload = self._request_with_retry(endpoint)
        if payload is None:
            return None
        return payload.get("title")

    def _request_with_retry(self, endpoint: str) -> Optional[dict]:
        for attempt in range(1, MAX_RETRIES + 1):
            response = self.session.get(
                f"{self.base_url}{endpoint}",
                timeout=DEFAULT_TIMEOUT,
            )
            if response.status_code == 200:
                return response.json()
            if response.status_code == 404:
                return None
            if response.status_code == 403 and _is_rate_limited(response):
                wait_seconds = _retry_after(response, attempt)
                logger.warning("rate limited by GitHub, retrying in %.0fs", wait_seconds)
                time.sleep(wait_seconds)
                continue
            if response.status_code == 401:
                raise GitHubAPIError("GitHub rejected the token (401 Unauthorized)")
            message = _extract_error_message(response)
            raise GitHubAPIError(
                f"GitHub API error {response.status_code}: {message}"
            )
        raise GitHubAPIError("Retry limit exceeded while calling GitHub API")


def _is_rate_limited(response: requests.Response) -> bool:
    if "rate limit" in response.text.lower():
        return True
    remaining = response.headers.get("X-RateLimit-Remaining")
    return remaining == "0"


def _retry_after(response: requests.Response, attempt: int) -> float:
    reset_header = response.headers.get("X-RateLimit-Reset")
    if reset_header:
        try:
            reset_time = int(reset_header)
            return min(max(reset_time - time.time(), 1), 60.0)
        except ValueError:
            pass
    return min(2 ** attempt, 60.0)


def _extract_error_message(response: requests.Response) -> str:
    try:
        payload = response.json()
        return payload.get("message", response.text)
    except ValueError:
        return response.text
