from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

import httpx
from supabase import PostgrestAPIError

from ..core.exceptions import StoreError, ValidationError

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(action: str) -> Iterator[None]:
    """Translate PostgREST and transport failures into StoreError, keeping the provider message."""

    try:
        yield
    except (PostgrestAPIError, httpx.HTTPError) as exc:
        message = getattr(exc, "message", None) or str(exc) or type(exc).__name__
        logger.error("%s failed: %s", action, message)
        raise StoreError(message) from exc


@contextmanager
def row_errors(table: str) -> Iterator[None]:
    """A stored row that does not parse is a store fault, not bad client input."""

    try:
        yield
    except (ValidationError, AttributeError, KeyError, TypeError, ValueError) as exc:
        logger.error("Malformed row in %s: %s", table, exc)
        raise StoreError(f"Malformed row in {table}") from exc


def fetchall(response: Any) -> List[Dict[str, Any]]:
    return list(getattr(response, "data", None) or [])


def fetchone(response: Any) -> Optional[Dict[str, Any]]:
    rows = fetchall(response)
    return rows[0] if rows else None
