"""Admin invitation routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from adminvite.application.usecase.admin_invitation import (
    CreateAdminInvitationRequest,
    CreateAdminInvitationUseCase,
)
from adminvite.config import Settings
from adminvite.domain.value.types import MAX_EMAIL_LENGTH

router = APIRouter(
    prefix="/api/admin-invitations",
    tags=["admin-invitations"],
    route_class=DishkaRoute,
)


class CreateAdminInvitationAPIRequest(BaseModel):
    """API request for inviting an admin."""

    email: str = Field(max_length=MAX_EMAIL_LENGTH)


class AdminInvitationCreatedData(BaseModel):
    """Payload of a successful invitation."""

    message: str
    email: str
    # Only exposed in development, where no real email is sent
    verification_link: str | None = None


class CreateAdminInvitationAPIResponse(BaseModel):
    """API response for a created invitation."""

    data: AdminInvitationCreatedData


@router.post(
    "",
    response_model=CreateAdminInvitationAPIResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_admin_invitation(
    request: CreateAdminInvitationAPIRequest,
    create_admin_invitation_use_case: FromDishka[CreateAdminInvitationUseCase],
    settings: FromDishka[Settings],
) -> CreateAdminInvitationAPIResponse:
    """Invite an admin by email.

    Creates a pending invitation (or reuses the address's current one) and
    emails the verification link. Failures are rendered by the error
    handlers in ``adminvite.interface.error``.

    Args:
        request: Request with the invitee email
        create_admin_invitation_use_case: Use case from DI
        settings: Application settings from DI

    Returns:
        Confirmation message and the invitee email
    """
    response = await create_admin_invitation_use_case.execute(
        CreateAdminInvitationRequest(
            email=request.email,
            frontend_origin=settings.invitations.frontend_url,
        )
    )

    return CreateAdminInvitationAPIResponse(
        data=AdminInvitationCreatedData(
            message="Invitation email sent",
            email=response.invitation.email.root,
            verification_link=(
                response.verification_link if settings.is_development else None
            ),
        )
    )
