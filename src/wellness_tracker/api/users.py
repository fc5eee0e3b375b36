"""Per-user tracker endpoints."""

from __future__ import annotations

import asyncio
from dataclasses import asdict
from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import APIRouter, Depends, HTTPException, Request, status

from wellness_tracker.api.auth import require_allowed_user, require_api_token
from wellness_tracker.api.models import (
    EditSelectionIn,
    MealIn,
    MeditationIn,
    ProfileIn,
    WaterIn,
    WorkoutIn,
)
from wellness_tracker.domain.entries import EntryKind
from wellness_tracker.errors import ValidationError
from wellness_tracker.services.composer import SelectedItem, Selection, custom_food
from wellness_tracker.services.profiles import ProfileUpdate

if TYPE_CHECKING:
    from wellness_tracker.containers import AppContainer
    from wellness_tracker.services.entries import EntryService

router = APIRouter(
    prefix="/users/{user_id}",
    tags=["users"],
    dependencies=[Depends(require_api_token), Depends(require_allowed_user)],
)

_KIND_PATHS = {
    "meals": EntryKind.MEAL,
    "workouts": EntryKind.WORKOUT,
    "meditation": EntryKind.MEDITATION,
    "water": EntryKind.WATER,
}


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("/today")
async def today(
    user_id: UUID,
    request: Request,
    tz: str | None = None,
    day: date | None = None,
) -> dict[str, object]:
    """Return the day's entries, totals and goal progress."""
    container = _container(request)
    timezone_name = tz or container.settings.default_timezone
    if not _is_valid_timezone(timezone_name):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown timezone: {timezone_name}",
        )
    summary = await container.tracker_service.get_day(user_id, timezone_name, day)
    return asdict(summary)


@router.post("/meals", status_code=status.HTTP_201_CREATED)
async def log_meal(user_id: UUID, body: MealIn, request: Request) -> dict[str, object]:
    """Log the selected foods as one meal, or one meal per food."""
    service = _container(request).entry_service
    selection = _selection(service, body)
    if body.per_item:
        entries = await asyncio.to_thread(
            service.log_meal_items, user_id, selection, body.meal_type, body.logged_at
        )
        return {"entries": [asdict(entry) for entry in entries]}
    entry = await asyncio.to_thread(
        service.log_meal, user_id, selection, body.meal_type, body.logged_at
    )
    return {"entries": [asdict(entry)]}


@router.put("/meals/{entry_id}")
async def update_meal(
    user_id: UUID, entry_id: UUID, body: MealIn, request: Request
) -> dict[str, object]:
    """Replace a meal with a new selection."""
    service = _container(request).entry_service
    selection = _selection(service, body)
    entry = await asyncio.to_thread(
        service.update_meal, user_id, entry_id, selection, body.meal_type
    )
    return asdict(entry)


@router.post("/meals/edit-selection")
async def edit_selection(body: EditSelectionIn, request: Request) -> dict[str, object]:
    """Read a stored meal back into catalog items for editing."""
    service = _container(request).entry_service
    parsed = service.edit_selection(body.name, body.nutrients())
    return asdict(parsed)


@router.post("/workouts", status_code=status.HTTP_201_CREATED)
async def log_workout(
    user_id: UUID, body: WorkoutIn, request: Request
) -> dict[str, object]:
    service = _container(request).entry_service
    entry = await asyncio.to_thread(
        service.log_workout,
        user_id,
        body.workout_type,
        body.duration_minutes,
        body.name,
        body.notes,
        body.logged_at,
    )
    return asdict(entry)


@router.put("/workouts/{entry_id}")
async def update_workout(
    user_id: UUID, entry_id: UUID, body: WorkoutIn, request: Request
) -> dict[str, object]:
    service = _container(request).entry_service
    entry = await asyncio.to_thread(
        service.update_workout,
        user_id,
        entry_id,
        body.workout_type,
        body.duration_minutes,
        body.name,
        body.notes,
    )
    return asdict(entry)


@router.post("/meditation", status_code=status.HTTP_201_CREATED)
async def log_meditation(
    user_id: UUID, body: MeditationIn, request: Request
) -> dict[str, object]:
    service = _container(request).entry_service
    entry = await asyncio.to_thread(
        service.log_meditation,
        user_id,
        body.duration_minutes,
        body.type,
        body.notes,
        body.logged_at,
    )
    return asdict(entry)


@router.put("/meditation/{entry_id}")
async def update_meditation(
    user_id: UUID, entry_id: UUID, body: MeditationIn, request: Request
) -> dict[str, object]:
    service = _container(request).entry_service
    entry = await asyncio.to_thread(
        service.update_meditation,
        user_id,
        entry_id,
        body.duration_minutes,
        body.type,
        body.notes,
    )
    return asdict(entry)


@router.post("/water", status_code=status.HTTP_201_CREATED)
async def log_water(
    user_id: UUID, body: WaterIn, request: Request
) -> dict[str, object]:
    service = _container(request).entry_service
    entry = await asyncio.to_thread(
        service.log_water, user_id, body.glasses, body.logged_at
    )
    return asdict(entry)


@router.put("/water/{entry_id}")
async def update_water(
    user_id: UUID, entry_id: UUID, body: WaterIn, request: Request
) -> dict[str, object]:
    service = _container(request).entry_service
    entry = await asyncio.to_thread(
        service.update_water, user_id, entry_id, body.glasses
    )
    return asdict(entry)


@router.delete("/{kind}/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(
    user_id: UUID, kind: str, entry_id: UUID, request: Request
) -> None:
    """Delete an entry of any kind."""
    entry_kind = _KIND_PATHS.get(kind)
    if entry_kind is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    service = _container(request).entry_service
    await asyncio.to_thread(service.delete_entry, entry_kind, user_id, entry_id)


@router.get("/profile")
async def get_profile(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the profile and whether onboarding is still pending."""
    service = _container(request).profile_service
    profile = await asyncio.to_thread(service.get_profile, user_id)
    return {
        "profile": asdict(profile) if profile else None,
        "needs_onboarding": profile is None or not profile.display_name,
        "goals": asdict(await asyncio.to_thread(service.goals_for, user_id)),
    }


@router.put("/profile")
async def update_profile(
    user_id: UUID, body: ProfileIn, request: Request
) -> dict[str, object]:
    service = _container(request).profile_service
    profile = await asyncio.to_thread(
        service.update_profile, user_id, ProfileUpdate(**body.model_dump())
    )
    return asdict(profile)


@router.post("/onboarding", status_code=status.HTTP_201_CREATED)
async def onboarding(
    user_id: UUID, body: ProfileIn, request: Request
) -> dict[str, object]:
    """Store the first profile; every biometric field is required."""
    service = _container(request).profile_service
    profile = await asyncio.to_thread(
        service.complete_onboarding, user_id, ProfileUpdate(**body.model_dump())
    )
    return asdict(profile)


def _selection(service: EntryService, body: MealIn) -> Selection:
    items: list[SelectedItem] = []
    for item in body.items:
        if item.food_id:
            food = service.resolve_food(item.food_id)
        elif item.custom is not None:
            food = custom_food(item.custom.name, item.custom.nutrients())
        else:
            raise ValidationError("Each item needs a food_id or a custom food")
        items.append(SelectedItem(food=food, quantity=item.quantity))
    return tuple(items)


def _is_valid_timezone(value: str) -> bool:
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return False
    return True
