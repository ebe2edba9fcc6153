"""HTTP client for the Supabase REST (PostgREST) API."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

import httpx

from flouss.domain.analytics import AnalyticsDataUnavailableError

logger = logging.getLogger(__name__)

TRANSACTIONS_SELECT = "*,category:categories(*)"


class SupabaseClient:
    """HTTP client wrapper for the Supabase REST endpoint.

    Transport and HTTP errors are logged and re-raised as
    AnalyticsDataUnavailableError so callers can fall back.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        timeout: float = 10.0,
    ):
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._api_key:
            headers["apikey"] = self._api_key
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                headers=self._headers(),
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def fetch_transactions(
        self,
        user_id: str,
        since: date,
    ) -> list[dict[str, Any]]:
        """Transactions of a user since `since`, oldest first, category joined."""
        params = {
            "select": TRANSACTIONS_SELECT,
            "user_id": f"eq.{user_id}",
            "transaction_date": f"gte.{since.isoformat()}",
            "order": "transaction_date.asc",
        }
        details = {"user_id": user_id, "since": since.isoformat()}

        try:
            client = await self._get_client()
            response = await client.get("/transactions", params=params)
            response.raise_for_status()
            rows = response.json()
        except httpx.ConnectError as e:
            logger.warning("Supabase connection failed: %s", e)
            raise AnalyticsDataUnavailableError(details=details) from e
        except httpx.TimeoutException as e:
            logger.warning("Supabase timeout: %s", e)
            raise AnalyticsDataUnavailableError(details=details) from e
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Supabase returned error %d: %s",
                e.response.status_code,
                e.response.text[:200] if e.response.text else "no body",
            )
            raise AnalyticsDataUnavailableError(details=details) from e
        except httpx.HTTPError as e:
            logger.warning("Supabase request failed (%s): %s", type(e).__name__, e)
            raise AnalyticsDataUnavailableError(details=details) from e
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError, e.g. an HTML error page
            logger.warning("Supabase returned a non-JSON body: %s", e)
            raise AnalyticsDataUnavailableError(
                "Unexpected response from analytics data source",
                details=details,
            ) from e

        if not isinstance(rows, list):
            logger.warning("Unexpected Supabase payload type: %s", type(rows).__name__)
            raise AnalyticsDataUnavailableError(
                "Unexpected response from analytics data source",
                details=details,
            )
        return rows
