"""Shared execution of Supabase queries."""

import logging
from typing import Any

import httpx
from postgrest.exceptions import APIError

from wellness_tracker.errors import BackendError

logger = logging.getLogger(__name__)


def execute(query: Any, action: str) -> list[dict[str, Any]]:
    """Run a query builder and return its rows.

    Errors reported by PostgREST or the transport are raised as BackendError.
    """
    try:
        response = query.execute()
    except APIError as exc:
        logger.warning("Supabase rejected %s: %s", action, exc.message)
        raise BackendError(f"Failed to {action}") from exc
    except httpx.HTTPError as exc:
        logger.warning("Supabase unreachable during %s: %s", action, exc)
        raise BackendError(f"Failed to {action}") from exc
    return list(response.data or [])
