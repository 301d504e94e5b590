from fastapi import APIRouter, Depends, HTTPException
from nrc.auth import UserPrincipal, create_token, get_current_user, require_roles
from nrc.config import Settings
from nrc.database import get_app_settings, get_store
from nrc.schemas.auth import LoginRequest, LoginResponse, LoginUser, UserCreate, UserResponse, UserUpdate
from nrc.services.user_service import user_service
from nrc.storage import Store

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    store: Store = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
):
    """Exchange username, password and employee id for a JWT."""
    user = user_service.authenticate(store, body.username, body.password, body.employee_id)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = create_token(user, settings.jwt_secret_key, settings.jwt_expire_seconds)
    return LoginResponse(
        token=token,
        user=LoginUser(
            id=user["id"],
            employee_id=user["employee_id"],
            name=user["name"],
            role=user["role"],
            contact_number=user["contact_number"],
            email=user["email"],
        ),
    )


@router.get("/me")
async def me(current_user: UserPrincipal = Depends(get_current_user)):
    return {
        "id": current_user.user_id,
        "employee_id": current_user.employee_id,
        "name": current_user.name,
        "role": current_user.role,
        "anonymous": current_user.is_anonymous,
    }


@router.get("/users", response_model=list[UserResponse])
def list_users(
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(require_roles("admin")),
):
    return [UserResponse.from_row(u) for u in user_service.list_users(store)]


@router.post("/users", status_code=201)
def create_user(
    body: UserCreate,
    store: Store = Depends(get_store),
    current_user: UserPrincipal = Depends(require_roles("admin")),
):
    user = user_service.create(store, body, created_by=current_user.actor)
    return {"message": "User created successfully", "id": user["id"]}


@router.put("/users/{user_id}")
def update_user(
    user_id: str,
    body: UserUpdate,
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(require_roles("admin")),
):
    user_service.update(store, user_id, body)
    return {"message": "User updated successfully"}


@router.delete("/users/{user_id}")
def delete_user(
    user_id: str,
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(require_roles("admin")),
):
    user_service.deactivate(store, user_id)
    return {"message": "User deactivated successfully"}
