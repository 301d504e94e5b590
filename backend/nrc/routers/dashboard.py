from fastapi import APIRouter, Depends, Query
from nrc.auth import UserPrincipal, get_current_user
from nrc.config import Settings
from nrc.database import get_app_settings, get_store
from nrc.services.dashboard_service import dashboard_service
from nrc.storage import Store

router = APIRouter()


@router.get("/stats")
def get_dashboard_stats(
    role: str = Query("", description="Include unread notification count for this role"),
    store: Store = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
    _: UserPrincipal = Depends(get_current_user),
):
    return dashboard_service.get_stats(store, role, settings.high_risk_threshold)
