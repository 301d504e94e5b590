from fastapi import APIRouter, Depends, Query
from nrc.auth import UserPrincipal, get_current_user
from nrc.database import get_store
from nrc.schemas.notification import NotificationCreate, NotificationResponse
from nrc.services.notification_service import notification_service
from nrc.storage import Store

router = APIRouter()


@router.get("/role/{role}", response_model=list[NotificationResponse])
def list_notifications(
    role: str,
    unread_only: bool = Query(False),
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    notifications = notification_service.list_for_role(store, role, unread_only)
    return [NotificationResponse.from_row(n) for n in notifications]


@router.post("", status_code=201)
def create_notification(
    body: NotificationCreate,
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    notification = notification_service.create(
        store,
        user_role=body.user_role,
        type=body.type,
        title=body.title,
        message=body.message,
        priority=body.priority,
        action_required=body.action_required,
        date=body.date,
    )
    return {"message": "Notification created successfully", "id": notification["id"]}


@router.put("/{notification_id}/read")
def mark_notification_read(
    notification_id: str,
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    notification_service.mark_read(store, notification_id)
    return {"message": "Notification marked as read"}
