import logging
import uuid
from typing import Optional
from nrc.auth import hash_password, verify_password
from nrc.clock import now_iso
from nrc.exceptions import DuplicateRecord, RecordNotFound
from nrc.models import USERS
from nrc.schemas.auth import UserCreate, UserUpdate
from nrc.storage import Store

logger = logging.getLogger(__name__)


class UserService:
    def authenticate(self, store: Store, username: str, password: str, employee_id: str) -> Optional[dict]:
        """Return the active user matching all three credentials, else None."""
        user = store.find_one(USERS, {
            "username": username,
            "employee_id": employee_id,
            "is_active": "true",
        })
        if not user:
            logger.info("Login failed: no active user %s / %s", username, employee_id)
            return None
        if not verify_password(password, user["password_hash"]):
            logger.info("Login failed: wrong password for %s", username)
            return None
        logger.info("Login successful for %s", username)
        return user

    def list_users(self, store: Store) -> list[dict]:
        return store.read_all(USERS)

    def create(self, store: Store, data: UserCreate, created_by: str) -> dict:
        password_hash = hash_password(data.password)

        with store.lock:
            if store.find_one(USERS, {"employee_id": data.employee_id}):
                raise DuplicateRecord("Employee ID already exists")
            if store.find_one(USERS, {"username": data.username}):
                raise DuplicateRecord("Username already exists")

            timestamp = now_iso()
            user = store.append(USERS, {
                "id": str(uuid.uuid4()),
                "employee_id": data.employee_id,
                "username": data.username,
                "password_hash": password_hash,
                "name": data.name,
                "role": data.role,
                "contact_number": data.contact_number or "",
                "email": data.email or "",
                "is_active": True,
                "created_by": data.created_by or created_by,
                "created_at": timestamp,
                "updated_at": timestamp,
            })
        logger.info("User %s created with role %s", user["username"], user["role"])
        return user

    def update(self, store: Store, user_id: str, data: UserUpdate) -> dict:
        changes = data.model_dump(exclude_none=True, exclude={"password"})
        if data.password:
            changes["password_hash"] = hash_password(data.password)

        updated = store.update(USERS, user_id, changes)
        if not updated:
            raise RecordNotFound("User not found")
        return updated

    def deactivate(self, store: Store, user_id: str) -> dict:
        updated = store.update(USERS, user_id, {"is_active": False})
        if not updated:
            raise RecordNotFound("User not found")
        logger.info("User %s deactivated", user_id)
        return updated


user_service = UserService()
