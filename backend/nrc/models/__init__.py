from nrc.models.base import Table
from nrc.models.user import USERS
from nrc.models.patient import PATIENTS
from nrc.models.anganwadi import ANGANWADI_CENTERS
from nrc.models.worker import WORKERS
from nrc.models.bed import BEDS
from nrc.models.bed_request import BED_REQUESTS
from nrc.models.visit import VISITS
from nrc.models.medical_record import MEDICAL_RECORDS
from nrc.models.notification import NOTIFICATIONS
from nrc.models.hospital import HOSPITALS
from nrc.models.treatment import TREATMENT_TRACKERS

ALL_TABLES = (
    USERS, PATIENTS, ANGANWADI_CENTERS, WORKERS, BEDS, BED_REQUESTS, VISITS,
    MEDICAL_RECORDS, NOTIFICATIONS, HOSPITALS, TREATMENT_TRACKERS,
)

__all__ = ["Table", "USERS", "PATIENTS", "ANGANWADI_CENTERS", "WORKERS", "BEDS",
           "BED_REQUESTS", "VISITS", "MEDICAL_RECORDS", "NOTIFICATIONS", "HOSPITALS",
           "TREATMENT_TRACKERS", "ALL_TABLES"]
