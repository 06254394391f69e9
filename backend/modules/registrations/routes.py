"""
Registration API endpoints.

Donors register for events, list their registrations and cancel them.
Admins can list every registration.
"""

from fastapi import APIRouter, Depends, status

from api.dependencies import get_registration_service
from api.middleware.auth import get_current_user, require_admin
from api.models.errors import ERROR_RESPONSES
from shared.models import MessageResponse
from modules.users.models import User

from .interfaces import IRegistrationService
from .models import (
    CreateRegistrationRequest,
    MyRegistrationsResponse,
    RegistrationCreatedResponse,
    RegistrationListResponse,
)

router = APIRouter(responses=ERROR_RESPONSES)


@router.post("", response_model=RegistrationCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_registration(
    request: CreateRegistrationRequest,
    user: User = Depends(get_current_user),
    service: IRegistrationService = Depends(get_registration_service),
) -> RegistrationCreatedResponse:
    """
    Register the current user for an event.

    Returns 404 if the event does not exist and 409 if the user is
    already registered for it.
    """
    registration = await service.register(user, request.event_id)
    return RegistrationCreatedResponse(message="Registered successfully", registration=registration)


@router.get("/my", response_model=MyRegistrationsResponse)
async def list_my_registrations(
    user: User = Depends(get_current_user),
    service: IRegistrationService = Depends(get_registration_service),
) -> MyRegistrationsResponse:
    return MyRegistrationsResponse(registrations=await service.list_for_user(user))


@router.delete("/{registration_id}", response_model=MessageResponse)
async def cancel_registration(
    registration_id: str,
    user: User = Depends(get_current_user),
    service: IRegistrationService = Depends(get_registration_service),
) -> MessageResponse:
    """
    Cancel one of the current user's registrations.

    Someone else's registration ID gets the same 404 as an unknown one.
    """
    await service.cancel(registration_id, user)
    return MessageResponse(message="Registration cancelled successfully")


@router.get("", response_model=RegistrationListResponse, dependencies=[Depends(require_admin)])
async def list_all_registrations(
    service: IRegistrationService = Depends(get_registration_service),
) -> RegistrationListResponse:
    """Every registration with user summary and event. Admin only."""
    return RegistrationListResponse(registrations=await service.list_all())
