"""Correction submission and moderation endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from launderette.api.deps import get_store, require_admin
from launderette.core.security import AuthUser
from launderette.db.store import RecordStore
from launderette.schemas.correction import Correction, CorrectionCreate, CorrectionStatus
from launderette.services import corrections as correction_service

router = APIRouter(prefix="/corrections", tags=["corrections"])


@router.post("", response_model=Correction, status_code=status.HTTP_201_CREATED)
def submit_correction(
    payload: CorrectionCreate, store: RecordStore = Depends(get_store)
) -> Correction:
    """Public: propose a change to one field of a listing."""
    return correction_service.submit_correction(store, payload)


@router.get("", response_model=list[Correction])
def list_corrections(
    status_filter: Optional[CorrectionStatus] = Query(None, alias="status"),
    store: RecordStore = Depends(get_store),
    user: AuthUser = Depends(require_admin),
) -> list[Correction]:
    return correction_service.list_corrections(store, status_filter)


@router.put("/{correction_id}/approve", response_model=Correction)
def approve_correction(
    correction_id: str,
    store: RecordStore = Depends(get_store),
    user: AuthUser = Depends(require_admin),
) -> Correction:
    return correction_service.approve_correction(store, correction_id, reviewer=user.uid)


@router.put("/{correction_id}/reject", response_model=Correction)
def reject_correction(
    correction_id: str,
    store: RecordStore = Depends(get_store),
    user: AuthUser = Depends(require_admin),
) -> Correction:
    return correction_service.reject_correction(store, correction_id, reviewer=user.uid)
