"""
Auth module: password hashing, JWT creation/validation and the
get_current_user FastAPI dependency.

Auth is optional unless AUTH_REQUIRED is set. Without an Authorization header
(or with an invalid token) the dependency returns ANONYMOUS_ADMIN, a synthetic
admin principal, so the API stays usable by clients that never log in.
"""

import time
from dataclasses import dataclass
from typing import Optional
from jose import jwt, JWTError
from fastapi import Depends, HTTPException, Request
from werkzeug.security import check_password_hash, generate_password_hash

ALGORITHM = "HS256"


@dataclass
class UserPrincipal:
    """Resolved identity attached to each request."""
    user_id: str
    employee_id: str
    name: str
    role: str                     # "anganwadi_worker" | "supervisor" | "hospital" | "admin"
    is_anonymous: bool = False

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    def has_role(self, *roles: str) -> bool:
        return self.is_admin or self.role in roles

    @property
    def actor(self) -> str:
        """Identifier recorded in created_by / registered_by columns."""
        return "SYSTEM" if self.is_anonymous else self.employee_id


ANONYMOUS_ADMIN = UserPrincipal(
    user_id="",
    employee_id="SYSTEM",
    name="Admin (Anonymous)",
    role="admin",
    is_anonymous=True,
)


def hash_password(password: str) -> str:
    return generate_password_hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    if not password_hash:
        return False
    try:
        return check_password_hash(password_hash, password)
    except ValueError:
        # Hash written by another tool in a format werkzeug does not know
        return False


def create_token(user: dict, secret_key: str, expire_seconds: int) -> str:
    """Create a signed JWT for a users.csv row."""
    payload = {
        "sub": user["id"],
        "employee_id": user["employee_id"],
        "name": user["name"],
        "role": user["role"],
        "exp": int(time.time()) + expire_seconds,
    }
    return jwt.encode(payload, secret_key, algorithm=ALGORITHM)


def decode_token(token: str, secret_key: str) -> Optional[UserPrincipal]:
    """Decode and validate a JWT. Returns None if invalid/expired."""
    try:
        payload = jwt.decode(token, secret_key, algorithms=[ALGORITHM])
        return UserPrincipal(
            user_id=payload["sub"],
            employee_id=payload.get("employee_id", ""),
            name=payload.get("name", ""),
            role=payload.get("role", ""),
        )
    except (JWTError, KeyError):
        return None


async def get_current_user(request: Request) -> UserPrincipal:
    """
    FastAPI dependency. Extracts the JWT from the Authorization header.
    Falls back to ANONYMOUS_ADMIN unless the app requires authentication.
    """
    settings = request.app.state.settings
    auth_header = request.headers.get("Authorization", "")
    principal = None
    if auth_header.startswith("Bearer "):
        principal = decode_token(auth_header[7:], settings.jwt_secret_key)

    if principal:
        return principal
    if settings.auth_required:
        raise HTTPException(status_code=401, detail="Authentication required")
    return ANONYMOUS_ADMIN


def require_roles(*roles: str):
    """Dependency factory admitting admins plus the given roles."""

    async def dependency(current_user: UserPrincipal = Depends(get_current_user)) -> UserPrincipal:
        if not current_user.has_role(*roles):
            raise HTTPException(
                status_code=403,
                detail=f"Your role does not permit this action ({current_user.role})",
            )
        return current_user

    return dependency
