from fastapi import APIRouter, Depends, Query
from nrc.auth import UserPrincipal, get_current_user
from nrc.config import Settings
from nrc.database import get_app_settings, get_store
from nrc.schemas.patient import PatientCreate, PatientResponse, PatientUpdate
from nrc.services.patient_service import patient_service
from nrc.storage import Store

router = APIRouter()


@router.get("", response_model=list[PatientResponse])
def list_patients(
    search: str = Query("", description="Search by name or registration number"),
    type: str = Query("", description="Filter: child, pregnant"),
    nutrition_status: str = Query("", description="Filter: normal, malnourished, severely_malnourished"),
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    patients = patient_service.list_active(store, search, type, nutrition_status)
    return [PatientResponse.from_row(p) for p in patients]


@router.get("/{patient_id}", response_model=PatientResponse)
def get_patient(
    patient_id: str,
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    return PatientResponse.from_row(patient_service.get(store, patient_id))


@router.post("", status_code=201)
def create_patient(
    body: PatientCreate,
    store: Store = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
    current_user: UserPrincipal = Depends(get_current_user),
):
    patient = patient_service.create(
        store,
        body,
        registered_by=current_user.actor,
        high_risk_threshold=settings.high_risk_threshold,
    )
    return {
        "message": "Patient registered successfully",
        "id": patient["id"],
        "registrationNumber": patient["registration_number"],
    }


@router.put("/{patient_id}")
def update_patient(
    patient_id: str,
    body: PatientUpdate,
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    patient_service.update(store, patient_id, body)
    return {"message": "Patient updated successfully"}


@router.delete("/{patient_id}")
def delete_patient(
    patient_id: str,
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    patient_service.deactivate(store, patient_id)
    return {"message": "Patient deleted successfully"}
