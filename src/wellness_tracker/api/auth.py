"""Token auth and user allow-listing for the HTTP API."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import Depends, Header, HTTPException, Request, status

from wellness_tracker.config import parse_allowed_user_ids

if TYPE_CHECKING:
    from wellness_tracker.containers import AppContainer


def _get_api_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.api_token


async def require_api_token(
    x_api_token: str | None = Header(default=None),
    api_token: str = Depends(_get_api_token),
) -> None:
    """Ensure requests include a valid API token."""
    if not x_api_token or x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


async def require_allowed_user(user_id: UUID, request: Request) -> None:
    """Reject users outside the configured allow-list."""
    container: AppContainer = request.app.state.container
    allowed = parse_allowed_user_ids(container.settings.allowed_user_ids)
    if allowed is not None and user_id not in allowed:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN)
