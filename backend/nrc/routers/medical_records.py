from fastapi import APIRouter, Depends, Query
from nrc.auth import UserPrincipal, get_current_user
from nrc.database import get_store
from nrc.schemas.medical_record import MedicalRecordCreate, MedicalRecordResponse
from nrc.services.medical_record_service import medical_record_service
from nrc.storage import Store

router = APIRouter()


@router.get("", response_model=list[MedicalRecordResponse])
def list_medical_records(
    patient_id: str = Query(""),
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    return [MedicalRecordResponse.from_row(r) for r in medical_record_service.list_records(store, patient_id)]


@router.get("/{record_id}", response_model=MedicalRecordResponse)
def get_medical_record(
    record_id: str,
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    return MedicalRecordResponse.from_row(medical_record_service.get(store, record_id))


@router.post("", status_code=201)
def create_medical_record(
    body: MedicalRecordCreate,
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    record = medical_record_service.create(store, body)
    return {"message": "Medical record added successfully", "id": record["id"]}
