from typing import Optional
from fastapi import APIRouter, Depends, Query
from nrc.auth import UserPrincipal, get_current_user
from nrc.database import get_store
from nrc.models import PATIENTS
from nrc.schemas.treatment import DischargeRequest, ProgressEntry, TreatmentCreate, TreatmentResponse
from nrc.services.treatment_service import treatment_service
from nrc.storage import Store

router = APIRouter()


def _response(store: Store, tracker: dict) -> TreatmentResponse:
    return TreatmentResponse.from_row(tracker, store.find_by_id(PATIENTS, tracker["patient_id"]))


@router.get("", response_model=list[TreatmentResponse])
def list_treatments(
    active: Optional[bool] = Query(None, description="true: admitted, false: discharged"),
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    patients = {p["id"]: p for p in store.read_all(PATIENTS)}
    return [
        TreatmentResponse.from_row(t, patients.get(t["patient_id"]))
        for t in treatment_service.list_trackers(store, active)
    ]


@router.get("/{tracker_id}", response_model=TreatmentResponse)
def get_treatment(
    tracker_id: str,
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    return _response(store, treatment_service.get(store, tracker_id))


@router.post("", status_code=201)
def create_treatment(
    body: TreatmentCreate,
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    tracker = treatment_service.create(store, body)
    return {"message": "Treatment tracker created successfully", "id": tracker["id"]}


@router.post("/{tracker_id}/progress", response_model=TreatmentResponse)
def add_progress(
    tracker_id: str,
    body: ProgressEntry,
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    return _response(store, treatment_service.add_progress(store, tracker_id, body))


@router.post("/{tracker_id}/discharge", response_model=TreatmentResponse)
def discharge(
    tracker_id: str,
    body: DischargeRequest,
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    return _response(store, treatment_service.discharge(store, tracker_id, body.discharge_date))
