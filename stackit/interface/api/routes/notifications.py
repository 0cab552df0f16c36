"""Notification inbox routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends

from stackit.application.usecase.notification import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkAllReadRequest,
    MarkAllReadResponse,
    MarkAllReadUseCase,
    MarkReadRequest,
    MarkReadUseCase,
    NotificationResponse,
)
from stackit.domain.service import JWTService
from stackit.interface.api.security import get_auth_token, require_user_id

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_auth_token),
) -> ListNotificationsResponse:
    """Get the signed-in user's newest notifications and unread count."""
    user_id = require_user_id(jwt_service, token)
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(user_id=user_id)
    )


# Declared before /{notification_id}/read so "read-all" is not taken as an ID
@router.patch("/read-all", response_model=MarkAllReadResponse)
async def mark_all_read(
    mark_all_read_use_case: FromDishka[MarkAllReadUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_auth_token),
) -> MarkAllReadResponse:
    """Mark every unread notification read."""
    user_id = require_user_id(jwt_service, token)
    return await mark_all_read_use_case.execute(MarkAllReadRequest(user_id=user_id))


@router.patch("/{notification_id}/read", response_model=NotificationResponse)
async def mark_read(
    notification_id: UUID,
    mark_read_use_case: FromDishka[MarkReadUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_auth_token),
) -> NotificationResponse:
    """Mark one of your notifications read."""
    user_id = require_user_id(jwt_service, token)
    return await mark_read_use_case.execute(
        MarkReadRequest(user_id=user_id, notification_id=str(notification_id))
    )
