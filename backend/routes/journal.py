from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.encoders import jsonable_encoder
from sqlalchemy.exc import IntegrityError

from backend.auth import require_owner_id
from backend.schemas import JournalEntryCreate, JournalEntryPatch, JournalEntryResponse, JournalListResponse
from backend import repositories

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/v1/journal", response_model=JournalListResponse)
async def list_journal_entries(
    day: date | None = Query(default=None, alias="date"),
    owner_id: str = Depends(require_owner_id),
):
    items = await repositories.list_journal_entries(owner_id, day.isoformat() if day else None)
    return {"items": jsonable_encoder(items)}


@router.post("/v1/journal", response_model=JournalEntryResponse)
async def create_journal_entry(payload: JournalEntryCreate, owner_id: str = Depends(require_owner_id)):
    try:
        record = await repositories.create_journal_entry(owner_id, payload.date, payload.content)
    except IntegrityError as exc:
        logger.warning("Duplicate journal entry for %s on %s", owner_id, payload.date)
        raise HTTPException(status_code=409, detail="Journal entry already exists for this date") from exc
    return jsonable_encoder(record)


@router.patch("/v1/journal/{entry_id}", response_model=JournalEntryResponse)
async def patch_journal_entry(entry_id: str, payload: JournalEntryPatch, owner_id: str = Depends(require_owner_id)):
    record = await repositories.update_journal_entry(owner_id, entry_id, payload.content)
    if record is None:
        raise HTTPException(status_code=404, detail="Journal entry not found")
    return jsonable_encoder(record)


@router.delete("/v1/journal/{entry_id}")
async def delete_journal_entry(entry_id: str, owner_id: str = Depends(require_owner_id)):
    if not await repositories.delete_journal_entry(owner_id, entry_id):
        raise HTTPException(status_code=404, detail="Journal entry not found")
    return {"ok": True}
