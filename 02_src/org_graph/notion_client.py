"""Async client for the Notion database query API."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from .config import Settings
from .errors import SourceUnavailable

logger = logging.getLogger(__name__)

PAGE_SIZE = 100


class NotionClient:
    """
    Reads whole collections (Notion databases) as lists of raw page records.

    GUARANTEES:
    ===========
    1. A collection is returned complete or not at all
    2. Every non-success response surfaces as SourceUnavailable
    3. No retries; timeouts are the transport's concern
    """

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._settings = settings
        self._client = httpx.AsyncClient(
            base_url=settings.notion_api_url,
            headers=self._headers(),
            timeout=settings.timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "NotionClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def database_id(self, collection: str) -> str:
        try:
            return self._settings.database_ids[collection]
        except KeyError:
            raise ValueError(f"Unknown collection: {collection!r}") from None

    async def fetch_collection(self, collection: str) -> List[Dict[str, Any]]:
        """Query every page of ``collection``, following pagination cursors."""
        database_id = self.database_id(collection)
        records: List[Dict[str, Any]] = []
        cursor: Optional[str] = None

        while True:
            body: Dict[str, Any] = {"page_size": PAGE_SIZE}
            if cursor:
                body["start_cursor"] = cursor
            payload = await self._request("POST", f"/databases/{database_id}/query", json=body)
            records.extend(payload.get("results") or [])
            cursor = payload.get("next_cursor")
            if not payload.get("has_more") or not cursor:
                break

        logger.debug("Fetched %d records from %s", len(records), collection)
        return records

    async def check_health(self) -> bool:
        """Issue one lightweight read against the circles database."""
        database_id = self.database_id("circles")
        try:
            response = await self._client.get(f"/databases/{database_id}")
        except httpx.HTTPError as exc:
            raise SourceUnavailable(None, str(exc) or type(exc).__name__) from exc
        return response.is_success

    async def _request(self, method: str, path: str, **kwargs: Any) -> Dict[str, Any]:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("Notion request %s %s failed: %s", method, path, exc)
            raise SourceUnavailable(None, str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            logger.warning("Notion request %s %s returned %s", method, path, response.status_code)
            raise SourceUnavailable(response.status_code, response.text)

        try:
            payload = response.json()
        except ValueError as exc:
            logger.warning("Notion request %s %s returned a non-JSON body", method, path)
            raise SourceUnavailable(response.status_code, f"Invalid JSON response: {exc}") from exc
        if not isinstance(payload, dict):
            raise SourceUnavailable(
                response.status_code, f"Unexpected response payload: {type(payload).__name__}"
            )
        return payload

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._settings.notion_api_key}",
            "Notion-Version": self._settings.notion_version,
            "Content-Type": "application/json",
        }
