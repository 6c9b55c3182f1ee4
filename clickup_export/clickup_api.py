#!/usr/bin/env python3
"""
ClickUp API client for the docs exporter.

Provides the read-only calls needed to export Docs and Wikis:
- Paced requests (fixed delay before every call)
- Exponential backoff on rate limits (429) and server errors (5xx)
- Typed failures via ClickUpAPIError
- Normalization of the varying response shapes

Usage:
    from clickup_export.clickup_api import ClickUpAPI

    api = ClickUpAPI(token="pk_...", delay=0.1)
    docs = api.get_docs("9012345")
"""

import logging
import time
from typing import Any, Optional

import requests

from clickup_export.errors import ClickUpAPIError, ErrorKind

BASE_URL = "https://api.clickup.com/api/v3"
LEGACY_BASE_URL = "https://api.clickup.com/api/v2"

RATE_LIMIT_BACKOFF = 1.0
RATE_LIMIT_BACKOFF_MAX = 60.0
SERVER_ERROR_BACKOFF = 1.0
SERVER_ERROR_BACKOFF_MAX = 30.0
# Any cap is reached long before this; larger exponents overflow a float
MAX_BACKOFF_EXPONENT = 32

DOCS_PAGE_LIMIT = 100


def backoff_delay(attempt: int, base: float, cap: float) -> float:
    """Delay before retry number ``attempt`` (1-based): base, 2*base, 4*base, ... up to cap."""
    exponent = min(attempt - 1, MAX_BACKOFF_EXPONENT)
    return min(base * 2 ** exponent, cap)


def _list_field(data: Any, key: str) -> list:
    """Return data[key] when it is a list, else an empty list."""
    if isinstance(data, dict) and isinstance(data.get(key), list):
        return data[key]
    return []


class ClickUpAPI:
    """ClickUp REST API client with pacing and retries."""

    def __init__(
        self,
        token: str,
        base_url: str = BASE_URL,
        legacy_base_url: str = LEGACY_BASE_URL,
        delay: float = 0.1,
        timeout: float = 30.0,
        max_server_retries: int = 3,
        user_agent: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the ClickUp API client.

        Args:
            token: API token, sent as-is in the Authorization header
            base_url: Current API root (v3)
            legacy_base_url: Older API root (v2), used as a workspace fallback
            delay: Seconds to wait before every request (be polite)
            timeout: Request timeout in seconds
            max_server_retries: Retry attempts for 5xx responses
            user_agent: Custom user agent string
            logger: Logger instance (creates one if not provided)
        """
        self.base_url = base_url.rstrip("/")
        self.legacy_base_url = legacy_base_url.rstrip("/")
        self.delay = delay
        self.timeout = timeout
        self.max_server_retries = max_server_retries

        self.logger = logger or logging.getLogger("clickup_export.api")

        self.session = requests.Session()
        self.session.headers.update({
            "Authorization": token,
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": user_agent or "clickup-docs-exporter/1.0",
        })

    def request(
        self,
        path: str,
        params: Optional[dict] = None,
        description: str = "API request",
        base_url: Optional[str] = None,
    ) -> Any:
        """
        Make a GET request with pacing and retries.

        Rate-limited requests are retried until they succeed. Server errors
        are retried max_server_retries times. Anything else fails at once.

        Args:
            path: Endpoint path relative to the API root (e.g., "/workspaces")
            params: Query parameters
            description: Human-readable description for logging
            base_url: API root override (defaults to the v3 root)

        Returns:
            Decoded JSON body

        Raises:
            ClickUpAPIError: On network failure, non-retryable HTTP errors,
                exhausted server-error retries or a non-JSON body
        """
        url = f"{base_url or self.base_url}{path}"
        rate_limit_attempts = 0
        server_attempts = 0

        while True:
            time.sleep(self.delay)  # Rate limiting
            try:
                response = self.session.get(url, params=params, timeout=self.timeout)
            except requests.RequestException as e:
                self.logger.debug(f"Request failed for {description}: {e}")
                raise ClickUpAPIError(str(e) or "ClickUp API error") from e

            status = response.status_code

            if status == 429:
                rate_limit_attempts += 1
                wait = backoff_delay(rate_limit_attempts, RATE_LIMIT_BACKOFF, RATE_LIMIT_BACKOFF_MAX)
                self.logger.debug(
                    f"Rate limited on {description}, retrying in {wait:g}s "
                    f"(attempt {rate_limit_attempts})"
                )
                time.sleep(wait)
                continue

            if status >= 500 and server_attempts < self.max_server_retries:
                server_attempts += 1
                wait = backoff_delay(server_attempts, SERVER_ERROR_BACKOFF, SERVER_ERROR_BACKOFF_MAX)
                self.logger.warning(
                    f"Server error {status} on {description}, retrying in {wait:g}s "
                    f"(retry {server_attempts}/{self.max_server_retries})"
                )
                time.sleep(wait)
                continue

            if status >= 400:
                raise self._error_from_response(response)

            try:
                return response.json()
            except ValueError as e:
                raise ClickUpAPIError(
                    f"Invalid JSON in response for {description}",
                    status_code=status,
                ) from e

    def _error_from_response(self, response: requests.Response) -> ClickUpAPIError:
        """Build an error using the most specific message available."""
        status = response.status_code
        body = None
        try:
            body = response.json()
        except ValueError:
            pass

        message = None
        if isinstance(body, dict):
            message = body.get("err") or body.get("error")
        if not message:
            message = f"Request failed with status code {status}"

        return ClickUpAPIError(
            str(message),
            kind=ErrorKind.from_status(status),
            status_code=status,
        )

    def get_workspaces(self) -> list[dict]:
        """
        Fetch the workspaces the token can access.

        Falls back to the legacy team listing when the v3 endpoint fails.

        Returns:
            List of workspace dicts with 'id' and 'name' keys
        """
        try:
            data = self.request("/workspaces", description="fetching workspaces")
            return _list_field(data, "workspaces")
        except ClickUpAPIError as e:
            self.logger.debug(f"Workspace listing failed ({e}); trying legacy endpoint")

        data = self.request(
            "/team",
            description="fetching teams (legacy)",
            base_url=self.legacy_base_url,
        )
        return _list_field(data, "teams")

    def get_docs(self, workspace_id: str) -> list[dict]:
        """
        Fetch the active docs of a workspace.

        Only the first page of results is requested, so at most
        DOCS_PAGE_LIMIT docs are returned.

        Args:
            workspace_id: Workspace ID

        Returns:
            List of doc dicts
        """
        params = {
            "deleted": "false",
            "archived": "false",
            "limit": str(DOCS_PAGE_LIMIT),
        }
        data = self.request(
            f"/workspaces/{workspace_id}/docs",
            params=params,
            description=f"listing docs (workspace={workspace_id})",
        )
        docs = _list_field(data, "docs")
        self.logger.debug(f"Retrieved {len(docs)} docs")
        return docs

    def get_doc(self, workspace_id: str, doc_id: str) -> dict:
        """Fetch a single doc by ID."""
        data = self.request(
            f"/workspaces/{workspace_id}/docs/{doc_id}",
            description=f"fetching doc {doc_id}",
        )
        if isinstance(data, dict) and data.get("doc"):
            return data["doc"]
        return data

    def get_page_listing(self, workspace_id: str, doc_id: str) -> list[dict]:
        """
        Fetch the full page hierarchy of a doc.

        Args:
            workspace_id: Workspace ID
            doc_id: Doc ID

        Returns:
            Top-level page nodes; nested pages hang off each node
        """
        data = self.request(
            f"/workspaces/{workspace_id}/docs/{doc_id}/page_listing",
            params={"max_page_depth": "-1"},  # Unlimited depth
            description=f"fetching page listing for doc {doc_id}",
        )

        if isinstance(data, list):
            return data
        return _list_field(data, "pages") or _list_field(data, "children")

    def get_page_content(self, workspace_id: str, doc_id: str, page_id: str) -> dict:
        """Fetch one page with its content rendered as markdown."""
        return self.request(
            f"/workspaces/{workspace_id}/docs/{doc_id}/pages/{page_id}",
            params={"content_format": "text/md"},
            description=f"fetching page {page_id}",
        )
