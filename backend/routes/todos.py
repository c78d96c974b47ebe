from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.encoders import jsonable_encoder

from backend.auth import require_owner_id
from backend.schemas import TodoCreate, TodoListResponse, TodoPatch, TodoResponse
from backend import repositories

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/v1/todos", response_model=TodoListResponse)
async def list_todos(
    day: date | None = Query(default=None, alias="date"),
    owner_id: str = Depends(require_owner_id),
):
    items = await repositories.list_todos(owner_id, day.isoformat() if day else None)
    return {"items": jsonable_encoder(items)}


@router.post("/v1/todos", response_model=TodoResponse)
async def create_todo(payload: TodoCreate, owner_id: str = Depends(require_owner_id)):
    try:
        record = await repositories.create_todo(owner_id, payload.model_dump())
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    logger.info("Created todo %s for %s", record["id"], owner_id)
    return jsonable_encoder(record)


@router.patch("/v1/todos/{todo_id}", response_model=TodoResponse)
async def patch_todo(todo_id: str, payload: TodoPatch, owner_id: str = Depends(require_owner_id)):
    patch = payload.model_dump(exclude_unset=True)
    if not patch:
        raise HTTPException(status_code=400, detail="No changes provided")
    nulls = sorted(key for key, value in patch.items() if value is None)
    if nulls:
        raise HTTPException(status_code=400, detail=f"Fields cannot be null: {', '.join(nulls)}")
    try:
        record = await repositories.update_todo(owner_id, todo_id, patch)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    if record is None:
        raise HTTPException(status_code=404, detail="Todo not found")
    return jsonable_encoder(record)


@router.delete("/v1/todos/{todo_id}")
async def delete_todo(todo_id: str, owner_id: str = Depends(require_owner_id)):
    if not await repositories.delete_todo(owner_id, todo_id):
        raise HTTPException(status_code=404, detail="Todo not found")
    return {"ok": True}
