import logging
import uuid
from typing import Optional
from nrc.clock import as_date_str, now_iso, today
from nrc.exceptions import RecordNotFound
from nrc.models import NOTIFICATIONS
from nrc.storage import Store

logger = logging.getLogger(__name__)


class NotificationService:
    def list_for_role(self, store: Store, role: str, unread_only: bool = False) -> list[dict]:
        notifications = store.find_by_field(NOTIFICATIONS, "user_role", role)
        if unread_only:
            notifications = [n for n in notifications if n["read_status"] != "true"]
        return notifications

    def create(
        self,
        store: Store,
        *,
        user_role: str,
        type: str,
        title: str,
        message: str,
        priority: str = "medium",
        action_required: bool = False,
        date: Optional[str] = None,
    ) -> dict:
        notification = store.append(NOTIFICATIONS, {
            "id": str(uuid.uuid4()),
            "user_role": user_role,
            "type": type,
            "title": title,
            "message": message,
            "priority": priority,
            "action_required": action_required,
            "read_status": False,
            "date": as_date_str(date) or today(),
            "created_at": now_iso(),
        })
        logger.info("Notification %s (%s) created for role %s", notification["id"], type, user_role)
        return notification

    def mark_read(self, store: Store, notification_id: str) -> dict:
        updated = store.update(NOTIFICATIONS, notification_id, {"read_status": True})
        if not updated:
            raise RecordNotFound("Notification not found")
        return updated


notification_service = NotificationService()
