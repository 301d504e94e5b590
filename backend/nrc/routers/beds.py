from fastapi import APIRouter, Depends, Query
from nrc.auth import UserPrincipal, get_current_user
from nrc.database import get_store
from nrc.schemas.bed import BedCreate, BedResponse, BedUpdate, HospitalCreate, HospitalResponse
from nrc.services.bed_service import bed_service
from nrc.storage import Store

router = APIRouter()
hospitals_router = APIRouter()


@router.get("", response_model=list[BedResponse])
def list_beds(
    status: str = Query("", description="Filter: available, occupied, maintenance"),
    ward: str = Query(""),
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    return [
        BedResponse.from_row(bed, patient, hospital)
        for bed, patient, hospital in bed_service.list_beds(store, status, ward)
    ]


@router.post("", status_code=201)
def create_bed(
    body: BedCreate,
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    bed = bed_service.create(store, body.hospital_id, body.number, body.ward, body.status)
    return {"message": "Bed created successfully", "id": bed["id"]}


@router.put("/{bed_id}")
def update_bed(
    bed_id: str,
    body: BedUpdate,
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    bed_service.update_bed(store, bed_id, body.status, body.patient_id, body.admission_date)
    return {"message": "Bed updated successfully"}


@hospitals_router.get("", response_model=list[HospitalResponse])
def list_hospitals(
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    return [HospitalResponse.from_row(h) for h in bed_service.list_hospitals(store)]


@hospitals_router.post("", status_code=201)
def create_hospital(
    body: HospitalCreate,
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    hospital = bed_service.create_hospital(store, body.model_dump())
    return {"message": "Hospital created successfully", "id": hospital["id"]}
