"""
Bed allocation.

A bed row and the occupying patient's `bed_id` are kept in step here: every
assignment or release updates both files while holding the store lock.
"""

import logging
import uuid
from typing import Optional
from nrc.clock import as_date_str, now_iso
from nrc.exceptions import DuplicateRecord, InvalidRequest, RecordNotFound
from nrc.models import BEDS, HOSPITALS, PATIENTS
from nrc.storage import Store

logger = logging.getLogger(__name__)

VACANT = {"status": "available", "patient_id": "", "admission_date": ""}


class BedService:
    def list_beds(self, store: Store, status: str = "", ward: str = "") -> list[tuple[dict, Optional[dict], Optional[dict]]]:
        """Beds with their occupying patient and hospital rows."""
        beds = store.read_all(BEDS)
        patients = {p["id"]: p for p in store.read_all(PATIENTS)}
        hospitals = store.read_all(HOSPITALS)

        if status:
            beds = [b for b in beds if b["status"] == status]
        if ward:
            beds = [b for b in beds if b["ward"].lower() == ward.lower()]

        return [
            (bed, patients.get(bed["patient_id"]), self._hospital_for(bed, hospitals))
            for bed in beds
        ]

    @staticmethod
    def _hospital_for(bed: dict, hospitals: list[dict]) -> Optional[dict]:
        # Beds may reference their hospital by id or by code
        return next(
            (h for h in hospitals if bed["hospital_id"] in (h["id"], h["code"])),
            None,
        )

    def create(self, store: Store, hospital_id: str, number: str, ward: str, status: str = "available") -> dict:
        with store.lock:
            existing = store.find_one(BEDS, {"hospital_id": hospital_id, "ward": ward, "number": number})
            if existing:
                raise DuplicateRecord(f"Bed {number} already exists in {ward} ward")

            timestamp = now_iso()
            return store.append(BEDS, {
                "id": str(uuid.uuid4()),
                "hospital_id": hospital_id,
                "number": number,
                "ward": ward,
                "status": status,
                "patient_id": "",
                "admission_date": "",
                "created_at": timestamp,
                "updated_at": timestamp,
            })

    def find_available_bed(self, store: Store, ward: str) -> Optional[dict]:
        return store.find_one(BEDS, {"status": "available", "ward": ward})

    def update_bed(
        self,
        store: Store,
        bed_id: str,
        status: str,
        patient_id: Optional[str] = None,
        admission_date=None,
    ) -> dict:
        """
        Set a bed's status and occupant, updating patients.csv to match.

        With a patient: the patient points at this bed, any previous occupant
        is detached and the patient's previous bed is freed. Without one,
        every patient still pointing at this bed is detached.
        """
        with store.lock:
            bed = store.find_by_id(BEDS, bed_id)
            if not bed:
                raise RecordNotFound("Bed not found")

            patient = None
            if patient_id:
                patient = store.find_by_id(PATIENTS, patient_id)
                if not patient or patient["is_active"] != "true":
                    raise RecordNotFound("Patient not found")
                if bed["status"] == "occupied" and bed["patient_id"] not in ("", patient_id):
                    raise InvalidRequest("Bed already occupied")

            updated = store.update(BEDS, bed_id, {
                "status": status,
                "patient_id": patient_id or "",
                "admission_date": as_date_str(admission_date),
            })

            if patient:
                previous_bed = patient["bed_id"]
                if previous_bed and previous_bed != bed_id:
                    logger.info("Freeing previous bed %s of patient %s", previous_bed, patient_id)
                    store.update(BEDS, previous_bed, VACANT)
                previous_occupant = bed["patient_id"]
                if previous_occupant and previous_occupant != patient_id:
                    store.update(PATIENTS, previous_occupant, {"bed_id": ""})
                store.update(PATIENTS, patient_id, {"bed_id": bed_id})
                logger.info("Assigned bed %s to patient %s", bed_id, patient_id)
            else:
                for occupant in store.find_by_field(PATIENTS, "bed_id", bed_id):
                    store.update(PATIENTS, occupant["id"], {"bed_id": ""})
                    logger.info("Cleared bed assignment of patient %s", occupant["id"])

        return updated

    def release_patient_bed(self, store: Store, patient: dict) -> Optional[dict]:
        """Free whatever bed the patient holds. Returns the freed bed, if any."""
        bed_id = patient["bed_id"]
        if not bed_id:
            return None
        with store.lock:
            bed = store.update(BEDS, bed_id, VACANT)
            store.update(PATIENTS, patient["id"], {"bed_id": ""})
        logger.info("Released bed %s held by patient %s", bed_id, patient["id"])
        return bed

    def list_hospitals(self, store: Store) -> list[dict]:
        return store.read_all(HOSPITALS)

    def create_hospital(self, store: Store, data: dict) -> dict:
        with store.lock:
            if store.find_one(HOSPITALS, {"code": data["code"]}):
                raise DuplicateRecord("Hospital code already exists")
            return store.append(HOSPITALS, {"id": str(uuid.uuid4()), **data, "created_at": now_iso()})


bed_service = BedService()
