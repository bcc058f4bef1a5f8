"""
supabase_rest.py — HTTP-based database client using Supabase's PostgREST API.
Talks to /rest/v1 with the service role key, so row-level policies are bypassed.
Uses only httpx.
"""
import logging

import httpx

from clientflow import config

logger = logging.getLogger(__name__)


class SupabaseRest:
    """Thin PostgREST wrapper. Every call opens a short-lived httpx client."""

    def __init__(self, url: str, service_key: str, timeout: float = 10, transport: httpx.BaseTransport = None):
        self.url = url.rstrip("/")
        self.service_key = service_key
        self.timeout = timeout
        self.transport = transport

    def _headers(self, prefer: str = "return=representation") -> dict:
        return {
            "apikey": self.service_key,
            "Authorization": f"Bearer {self.service_key}",
            "Content-Type": "application/json",
            "Prefer": prefer,
        }

    def _client(self) -> httpx.Client:
        return httpx.Client(timeout=self.timeout, transport=self.transport)

    def _table_url(self, table: str) -> str:
        return f"{self.url}/rest/v1/{table}"

    def select(
        self,
        table: str,
        filters: dict = None,
        columns: str = "*",
        where: list[tuple[str, str]] = None,
        limit: int = None,
    ) -> list:
        """
        Select rows from a table.

        `filters` are equality filters; `where` takes raw PostgREST operator
        pairs such as ("deleted_at", "is.null") or ("end_date", "gte.2024-01-01").
        """
        params = [("select", columns)]
        for key, value in (filters or {}).items():
            params.append((key, f"eq.{value}"))
        params.extend(where or [])
        if limit is not None:
            params.append(("limit", str(limit)))

        with self._client() as client:
            resp = client.get(self._table_url(table), params=params, headers=self._headers())
            resp.raise_for_status()
            return resp.json()

    def insert(self, table: str, data: dict, on_conflict: str = None) -> dict:
        """
        Insert a row and return the created record.

        With `on_conflict` the insert becomes an ignore-duplicates upsert; a row
        rejected by the unique constraint comes back as an empty dict.
        """
        params = []
        prefer = "return=representation"
        if on_conflict:
            params.append(("on_conflict", on_conflict))
            prefer = "return=representation,resolution=ignore-duplicates"

        with self._client() as client:
            resp = client.post(self._table_url(table), params=params, json=data, headers=self._headers(prefer))
            resp.raise_for_status()
            result = resp.json()
            return result[0] if isinstance(result, list) and result else {}

    def insert_many(self, table: str, rows: list[dict]) -> int:
        """Insert a batch of rows in one request. Returns the number of rows sent."""
        if not rows:
            return 0
        with self._client() as client:
            resp = client.post(self._table_url(table), json=rows, headers=self._headers("return=minimal"))
            resp.raise_for_status()
        return len(rows)


_rest: SupabaseRest = None


def get_rest() -> SupabaseRest:
    """
    Get the service-role PostgREST client.
    Raises ValueError when the Supabase credentials are not configured.
    """
    global _rest

    if _rest is None:
        if not config.SUPABASE_URL or not config.SUPABASE_SERVICE_ROLE_KEY:
            raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set in environment variables")

        _rest = SupabaseRest(config.SUPABASE_URL, config.SUPABASE_SERVICE_ROLE_KEY, timeout=config.HTTP_TIMEOUT_SECONDS)
        logger.info("Supabase REST client ready for %s", config.SUPABASE_URL)

    return _rest
