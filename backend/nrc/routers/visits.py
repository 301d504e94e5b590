from fastapi import APIRouter, Depends, Query
from nrc.auth import UserPrincipal, get_current_user
from nrc.database import get_store
from nrc.models import PATIENTS
from nrc.schemas.visit import VisitCreate, VisitResponse, VisitUpdate
from nrc.services.visit_service import visit_service
from nrc.storage import Store

router = APIRouter()


@router.get("", response_model=list[VisitResponse])
def list_visits(
    patient_id: str = Query(""),
    status: str = Query("", description="Filter: scheduled, completed, missed, rescheduled"),
    scheduled_date: str = Query("", description="YYYY-MM-DD"),
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    patients = {p["id"]: p for p in store.read_all(PATIENTS)}
    visits = visit_service.list_visits(store, patient_id, status, scheduled_date)
    return [VisitResponse.from_row(v, patients.get(v["patient_id"])) for v in visits]


@router.get("/{visit_id}", response_model=VisitResponse)
def get_visit(
    visit_id: str,
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    visit = visit_service.get(store, visit_id)
    return VisitResponse.from_row(visit, store.find_by_id(PATIENTS, visit["patient_id"]))


@router.post("", status_code=201)
def schedule_visit(
    body: VisitCreate,
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    visit = visit_service.schedule(store, body)
    return {"message": "Visit scheduled successfully", "id": visit["id"]}


@router.put("/{visit_id}")
def update_visit(
    visit_id: str,
    body: VisitUpdate,
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    visit_service.update(store, visit_id, body)
    return {"message": "Visit updated successfully"}
