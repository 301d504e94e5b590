"""Sample data written into an empty store so the application is usable out of the box."""

import logging
import uuid

from nrc.auth import hash_password
from nrc.clock import now_iso
from nrc.models import BEDS, HOSPITALS, USERS
from nrc.storage.base import Store

logger = logging.getLogger(__name__)

# Demo password for each role's sample account
DEMO_PASSWORDS = {
    "admin": "admin123",
    "anganwadi_worker": "worker123",
    "supervisor": "super123",
    "hospital": "hosp123",
}

SAMPLE_USERS = [
    {"employee_id": "ADMIN001", "username": "admin", "name": "System Administrator",
     "role": "admin", "contact_number": "+91 9999999999", "email": "admin@nrc.gov.in",
     "created_by": "SYSTEM"},
    {"employee_id": "EMP001", "username": "priya.sharma", "name": "Priya Sharma",
     "role": "anganwadi_worker", "contact_number": "+91 9876543210", "email": "priya.sharma@gov.in",
     "created_by": "ADMIN001"},
    {"employee_id": "SUP001", "username": "supervisor1", "name": "Dr. Sunita Devi",
     "role": "supervisor", "contact_number": "+91 9876543212", "email": "sunita.devi@gov.in",
     "created_by": "ADMIN001"},
    {"employee_id": "HOSP001", "username": "hospital1", "name": "Dr. Amit Sharma",
     "role": "hospital", "contact_number": "+91 9876543214", "email": "amit.sharma@hospital.gov.in",
     "created_by": "ADMIN001"},
]

SAMPLE_HOSPITAL = {
    "name": "District Hospital Meerut",
    "code": "HOSP001",
    "address": "Medical College Road, Meerut, UP",
    "contact_number": "+91 121-2234567",
    "total_beds": "20",
    "nrc_equipped": True,
}

# (number, ward, status, admission_date)
SAMPLE_BEDS = [
    ("101", "Pediatric", "available", ""),
    ("102", "Pediatric", "available", ""),
    ("103", "Pediatric", "maintenance", ""),
    ("201", "Maternity", "available", ""),
    ("202", "Maternity", "occupied", "2024-01-15"),
    ("203", "Maternity", "available", ""),
]


def seed_sample_data(store: Store) -> bool:
    """Populate users, a hospital and its beds when no users exist. Idempotent."""
    if not store.is_empty(USERS):
        return False

    logger.info("Initializing sample data...")
    timestamp = now_iso()

    for user in SAMPLE_USERS:
        store.append(USERS, {
            "id": str(uuid.uuid4()),
            **user,
            "password_hash": hash_password(DEMO_PASSWORDS[user["role"]]),
            "is_active": True,
            "created_at": timestamp,
            "updated_at": timestamp,
        })

    store.append(HOSPITALS, {"id": str(uuid.uuid4()), **SAMPLE_HOSPITAL, "created_at": timestamp})

    for number, ward, status, admission_date in SAMPLE_BEDS:
        store.append(BEDS, {
            "id": str(uuid.uuid4()),
            "hospital_id": SAMPLE_HOSPITAL["code"],
            "number": number,
            "ward": ward,
            "status": status,
            "patient_id": "",
            "admission_date": admission_date,
            "created_at": timestamp,
            "updated_at": timestamp,
        })

    logger.info("Sample data initialized successfully")
    return True
