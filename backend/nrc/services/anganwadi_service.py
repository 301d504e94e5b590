import logging
import uuid
from nrc.clock import as_date_str, now_iso, today
from nrc.exceptions import DuplicateRecord, RecordNotFound
from nrc.models import ANGANWADI_CENTERS, WORKERS
from nrc.schemas.anganwadi import CenterCreate, CenterUpdate, WorkerCreate, WorkerUpdate
from nrc.storage import Store

logger = logging.getLogger(__name__)


class CenterService:
    def list_centers(self, store: Store, include_inactive: bool = False) -> list[dict]:
        centers = store.read_all(ANGANWADI_CENTERS)
        if not include_inactive:
            centers = [c for c in centers if c["is_active"] == "true"]
        return centers

    def worker_counts(self, store: Store) -> dict[str, int]:
        counts: dict[str, int] = {}
        for worker in store.read_all(WORKERS):
            if worker["is_active"] == "true" and worker["anganwadi_id"]:
                counts[worker["anganwadi_id"]] = counts.get(worker["anganwadi_id"], 0) + 1
        return counts

    def get(self, store: Store, center_id: str) -> dict:
        center = store.find_by_id(ANGANWADI_CENTERS, center_id)
        if not center:
            raise RecordNotFound("Anganwadi center not found")
        return center

    def create(self, store: Store, data: CenterCreate) -> dict:
        timestamp = now_iso()
        center = data.model_dump()
        center.update({
            "id": str(uuid.uuid4()),
            "established_date": as_date_str(data.established_date),
            "is_active": True,
            "created_at": timestamp,
            "updated_at": timestamp,
        })

        with store.lock:
            if store.find_one(ANGANWADI_CENTERS, {"code": data.code}):
                raise DuplicateRecord("Center code already exists")
            center = store.append(ANGANWADI_CENTERS, center)
        logger.info("Anganwadi center %s (%s) created", center["id"], center["code"])
        return center

    def update(self, store: Store, center_id: str, data: CenterUpdate) -> dict:
        updated = store.update(ANGANWADI_CENTERS, center_id, data.model_dump(exclude_none=True))
        if not updated:
            raise RecordNotFound("Anganwadi center not found")
        return updated

    def deactivate(self, store: Store, center_id: str) -> dict:
        updated = store.update(ANGANWADI_CENTERS, center_id, {"is_active": False})
        if not updated:
            raise RecordNotFound("Anganwadi center not found")
        return updated


class WorkerService:
    def list_workers(self, store: Store, anganwadi_id: str = "", include_inactive: bool = False) -> list[dict]:
        workers = store.read_all(WORKERS)
        if anganwadi_id:
            workers = [w for w in workers if w["anganwadi_id"] == anganwadi_id]
        if not include_inactive:
            workers = [w for w in workers if w["is_active"] == "true"]
        return workers

    def get(self, store: Store, worker_id: str) -> dict:
        worker = store.find_by_id(WORKERS, worker_id)
        if not worker:
            raise RecordNotFound("Worker not found")
        return worker

    def create(self, store: Store, data: WorkerCreate) -> dict:
        if data.anganwadi_id:
            center_service.get(store, data.anganwadi_id)

        timestamp = now_iso()
        worker = data.model_dump()
        worker.update({
            "id": str(uuid.uuid4()),
            "join_date": as_date_str(data.join_date) or today(),
            "is_active": True,
            "created_at": timestamp,
            "updated_at": timestamp,
        })

        with store.lock:
            if store.find_one(WORKERS, {"employee_id": data.employee_id}):
                raise DuplicateRecord("Employee ID already exists")
            worker = store.append(WORKERS, worker)
        logger.info("Worker %s (%s) created", worker["id"], worker["employee_id"])
        return worker

    def update(self, store: Store, worker_id: str, data: WorkerUpdate) -> dict:
        changes = data.model_dump(exclude_none=True)
        if changes.get("anganwadi_id"):
            center_service.get(store, changes["anganwadi_id"])
        updated = store.update(WORKERS, worker_id, changes)
        if not updated:
            raise RecordNotFound("Worker not found")
        return updated

    def deactivate(self, store: Store, worker_id: str) -> dict:
        updated = store.update(WORKERS, worker_id, {"is_active": False})
        if not updated:
            raise RecordNotFound("Worker not found")
        return updated


center_service = CenterService()
worker_service = WorkerService()
