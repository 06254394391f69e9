"""
Event API endpoints.

Listing and reading events is public. Creating, updating and deleting
events requires the admin role.
"""

from fastapi import APIRouter, Depends, status

from api.dependencies import get_event_service
from api.middleware.auth import require_roles
from api.models.errors import ERROR_RESPONSES
from shared.models import MessageResponse, Role
from modules.users.models import User

from .models import (
    CreateEventRequest,
    EventListResponse,
    EventMutationResponse,
    EventResponse,
    UpdateEventRequest,
)
from .service import EventService

router = APIRouter(responses=ERROR_RESPONSES)

admin_only = require_roles(Role.ADMIN)


@router.get("", response_model=EventListResponse)
async def list_events(
    service: EventService = Depends(get_event_service),
) -> EventListResponse:
    """List all events, soonest first."""
    return EventListResponse(events=await service.list_events())


@router.get("/{event_id}", response_model=EventResponse)
async def get_event(
    event_id: str,
    service: EventService = Depends(get_event_service),
) -> EventResponse:
    return EventResponse(event=await service.get_event(event_id))


@router.post("", response_model=EventMutationResponse, status_code=status.HTTP_201_CREATED)
async def create_event(
    request: CreateEventRequest,
    user: User = Depends(admin_only),
    service: EventService = Depends(get_event_service),
) -> EventMutationResponse:
    """Create an event owned by the calling admin."""
    event = await service.create_event(user, request)
    return EventMutationResponse(message="Event created successfully", event=event)


@router.put("/{event_id}", response_model=EventMutationResponse, dependencies=[Depends(admin_only)])
async def update_event(
    event_id: str,
    request: UpdateEventRequest,
    service: EventService = Depends(get_event_service),
) -> EventMutationResponse:
    """Partially update an event. Unknown fields are rejected."""
    event = await service.update_event(event_id, request)
    return EventMutationResponse(message="Event updated successfully", event=event)


@router.delete("/{event_id}", response_model=MessageResponse, dependencies=[Depends(admin_only)])
async def delete_event(
    event_id: str,
    service: EventService = Depends(get_event_service),
) -> MessageResponse:
    """
    Delete an event.

    Registrations for the event are kept; they show a null event afterwards.
    """
    await service.delete_event(event_id)
    return MessageResponse(message="Event deleted successfully")
