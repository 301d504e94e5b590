from fastapi import APIRouter, Depends, Query
from nrc.auth import UserPrincipal, get_current_user, require_roles
from nrc.database import get_store
from nrc.models import PATIENTS
from nrc.schemas.bed_request import BedRequestApprove, BedRequestCreate, BedRequestDecline, BedRequestResponse
from nrc.services.bed_request_service import bed_request_service
from nrc.storage import Store

router = APIRouter()


@router.get("", response_model=list[BedRequestResponse])
def list_bed_requests(
    status: str = Query("", description="Filter: pending, approved, declined"),
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    patients = {p["id"]: p for p in store.read_all(PATIENTS)}
    return [
        BedRequestResponse.from_row(r, patients.get(r["patient_id"]))
        for r in bed_request_service.list_requests(store, status)
    ]


@router.get("/{request_id}", response_model=BedRequestResponse)
def get_bed_request(
    request_id: str,
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    request = bed_request_service.get(store, request_id)
    return BedRequestResponse.from_row(request, store.find_by_id(PATIENTS, request["patient_id"]))


@router.post("", status_code=201)
def create_bed_request(
    body: BedRequestCreate,
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    request = bed_request_service.create(store, body)
    return {"message": "Bed request submitted successfully", "id": request["id"]}


@router.post("/{request_id}/approve")
def approve_bed_request(
    request_id: str,
    body: BedRequestApprove,
    store: Store = Depends(get_store),
    current_user: UserPrincipal = Depends(require_roles("supervisor")),
):
    _, bed = bed_request_service.approve(store, request_id, body, reviewer=current_user.actor)
    return {
        "message": "Bed request approved",
        "bedId": bed["id"],
        "bedNumber": bed["number"],
        "ward": bed["ward"],
    }


@router.post("/{request_id}/decline")
def decline_bed_request(
    request_id: str,
    body: BedRequestDecline,
    store: Store = Depends(get_store),
    current_user: UserPrincipal = Depends(require_roles("supervisor")),
):
    bed_request_service.decline(store, request_id, body, reviewer=current_user.actor)
    return {"message": "Bed request declined"}
