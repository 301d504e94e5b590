from fastapi import APIRouter, Depends, Query
from nrc.auth import UserPrincipal, get_current_user
from nrc.database import get_store
from nrc.schemas.anganwadi import (
    CenterCreate,
    CenterResponse,
    CenterUpdate,
    WorkerCreate,
    WorkerResponse,
    WorkerUpdate,
)
from nrc.services.anganwadi_service import center_service, worker_service
from nrc.storage import Store

centers_router = APIRouter()
workers_router = APIRouter()


@centers_router.get("", response_model=list[CenterResponse])
def list_centers(
    include_inactive: bool = Query(False),
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    counts = center_service.worker_counts(store)
    return [
        CenterResponse.from_row(c, counts.get(c["id"], 0))
        for c in center_service.list_centers(store, include_inactive)
    ]


@centers_router.get("/{center_id}", response_model=CenterResponse)
def get_center(
    center_id: str,
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    center = center_service.get(store, center_id)
    return CenterResponse.from_row(center, center_service.worker_counts(store).get(center_id, 0))


@centers_router.post("", status_code=201)
def create_center(
    body: CenterCreate,
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    center = center_service.create(store, body)
    return {"message": "Anganwadi center created successfully", "id": center["id"]}


@centers_router.put("/{center_id}")
def update_center(
    center_id: str,
    body: CenterUpdate,
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    center_service.update(store, center_id, body)
    return {"message": "Anganwadi center updated successfully"}


@centers_router.delete("/{center_id}")
def delete_center(
    center_id: str,
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    center_service.deactivate(store, center_id)
    return {"message": "Anganwadi center deactivated successfully"}


@workers_router.get("", response_model=list[WorkerResponse])
def list_workers(
    anganwadi_id: str = Query(""),
    include_inactive: bool = Query(False),
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    return [WorkerResponse.from_row(w) for w in worker_service.list_workers(store, anganwadi_id, include_inactive)]


@workers_router.get("/{worker_id}", response_model=WorkerResponse)
def get_worker(
    worker_id: str,
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    return WorkerResponse.from_row(worker_service.get(store, worker_id))


@workers_router.post("", status_code=201)
def create_worker(
    body: WorkerCreate,
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    worker = worker_service.create(store, body)
    return {"message": "Worker created successfully", "id": worker["id"]}


@workers_router.put("/{worker_id}")
def update_worker(
    worker_id: str,
    body: WorkerUpdate,
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    worker_service.update(store, worker_id, body)
    return {"message": "Worker updated successfully"}


@workers_router.delete("/{worker_id}")
def delete_worker(
    worker_id: str,
    store: Store = Depends(get_store),
    _: UserPrincipal = Depends(get_current_user),
):
    worker_service.deactivate(store, worker_id)
    return {"message": "Worker deactivated successfully"}
