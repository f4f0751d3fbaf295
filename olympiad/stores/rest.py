"""
PostgREST-backed stores (e.g. a hosted Supabase project).

Talks to the `question_bank` and `quiz_history` tables over HTTP. Row-level
security on the backend only exposes active questions; the query filters on
is_active as well so a permissive policy cannot leak soft-deleted rows.

Hardening:
- Per-request timeout so a slow backend surfaces as an error
- Retry with backoff on 5xx responses
- Every transport or payload failure becomes a StoreError
- History reads page through the server-side row cap
"""
from __future__ import annotations

from collections.abc import Collection
from datetime import datetime, timezone
from typing import Any

import requests
from loguru import logger
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from olympiad.core.errors import StoreError
from olympiad.core.models import AnswerHistoryEntry, CuratedRow, Level, Subject

DEFAULT_RETRIES = 2
DEFAULT_BACKOFF_FACTOR = 0.3
RETRY_STATUS_CODES = [500, 502, 503, 504]
DEFAULT_PAGE_SIZE = 1000

QUESTION_COLUMNS = "id,level,subject,question,options,answer,explanation,image_url,is_active"
HISTORY_COLUMNS = "user_id,subject,question_signature,is_correct,created_at"


class RestClient:
    """Thin wrapper around a PostgREST endpoint."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 4.0,
        retries: int = DEFAULT_RETRIES,
        backoff_factor: float = DEFAULT_BACKOFF_FACTOR,
        session: requests.Session | None = None,
    ) -> None:
        """
        Initialize client with retry logic.

        Args:
            base_url: REST root, e.g. https://<project>.supabase.co/rest/v1
            api_key: Key sent as `apikey` and bearer token
            timeout: Request timeout in seconds
            retries: Retry attempts on 5xx responses
            backoff_factor: Exponential backoff factor between retries
            session: Pre-built session (tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

        if session is None:
            retry_strategy = Retry(
                total=retries,
                backoff_factor=backoff_factor,
                status_forcelist=RETRY_STATUS_CODES,
                allowed_methods=["GET"],  # inserts are not idempotent
            )
            adapter = HTTPAdapter(max_retries=retry_strategy)
            self.session.mount("http://", adapter)
            self.session.mount("https://", adapter)

        self.session.headers.update(
            {
                "apikey": api_key,
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            }
        )

    def get(self, table: str, params: dict[str, str]) -> list[dict[str, Any]]:
        logger.debug("REST GET {} params={}", table, params)
        try:
            response = self.session.get(f"{self.base_url}/{table}", params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise StoreError(f"GET {table} failed: {e}") from e
        except ValueError as e:
            raise StoreError(f"GET {table} returned invalid JSON: {e}") from e

        if not isinstance(data, list):
            raise StoreError(f"GET {table} returned {type(data).__name__}, expected a list")
        return data

    def get_all(self, table: str, params: dict[str, str], page_size: int = DEFAULT_PAGE_SIZE) -> list[dict[str, Any]]:
        """
        Fetch every matching row, one page at a time.

        PostgREST caps responses (1000 rows on Supabase by default), so rows
        are requested with limit/offset until a short page comes back. Callers
        should pass an `order` param to keep pages stable.
        """
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        rows: list[dict[str, Any]] = []
        while True:
            page = self.get(table, {**params, "limit": str(page_size), "offset": str(len(rows))})
            rows.extend(page)
            if len(page) < page_size:
                return rows

    def insert(self, table: str, payload: dict[str, Any]) -> None:
        logger.debug("REST POST {}", table)
        try:
            response = self.session.post(
                f"{self.base_url}/{table}",
                json=payload,
                headers={"Prefer": "return=minimal"},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise StoreError(f"POST {table} failed: {e}") from e


def _in_list(values: Collection[str]) -> str:
    quoted = ",".join('"' + v.replace('"', '\\"') + '"' for v in sorted(values))
    return f"({quoted})"


def _parse_timestamp(value: str | None) -> datetime:
    if not value:
        return datetime.now(timezone.utc)
    ts = datetime.fromisoformat(value.replace("Z", "+00:00"))
    return ts if ts.tzinfo else ts.replace(tzinfo=timezone.utc)


class RestHistoryStore:
    """History store over the `quiz_history` table."""

    def __init__(self, client: RestClient, page_size: int = DEFAULT_PAGE_SIZE):
        self.client = client
        self.page_size = page_size

    def fetch_history(self, user_id: str) -> list[AnswerHistoryEntry]:
        rows = self.client.get_all(
            "quiz_history",
            {"select": HISTORY_COLUMNS, "user_id": f"eq.{user_id}", "order": "created_at.asc"},
            page_size=self.page_size,
        )
        try:
            return [
                AnswerHistoryEntry(
                    user_id=row.get("user_id", user_id),
                    subject=row.get("subject", ""),
                    question_signature=row["question_signature"],
                    is_correct=bool(row.get("is_correct", False)),
                    timestamp=_parse_timestamp(row.get("created_at")),
                )
                for row in rows
            ]
        except (KeyError, ValueError, TypeError) as e:
            raise StoreError(f"Malformed history row for user {user_id}: {e}") from e

    def record_answer(self, entry: AnswerHistoryEntry) -> None:
        self.client.insert(
            "quiz_history",
            {
                "user_id": entry.user_id,
                "subject": entry.subject,
                "question_signature": entry.question_signature,
                "is_correct": entry.is_correct,
                "created_at": entry.timestamp.isoformat(),
            },
        )


class RestCuratedStore:
    """Curated store over the `question_bank` table."""

    def __init__(self, client: RestClient):
        self.client = client

    def query_active_questions(
        self,
        level: Level,
        subject: Subject,
        exclude_ids: Collection[str],
        limit: int,
    ) -> list[CuratedRow]:
        if limit <= 0:
            return []

        params = {
            "select": QUESTION_COLUMNS,
            "level": f"eq.{level.value}",
            "subject": f"eq.{subject.value}",
            "is_active": "eq.true",
            "limit": str(limit),
        }
        if exclude_ids:
            params["id"] = f"not.in.{_in_list(exclude_ids)}"

        rows = self.client.get("question_bank", params)
        try:
            return [CuratedRow.from_dict(row) for row in rows]
        except (KeyError, TypeError) as e:
            raise StoreError(f"Malformed question_bank row: {e}") from e
